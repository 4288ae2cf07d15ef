"""
HTTP fetch helper used by every source tool
"""

from typing import Dict, Optional

import requests
import urllib3

from .errors import TransportError


def http_get(url: str, timeout: float = 30, headers: Optional[Dict] = None,
             verify: bool = True) -> str:
    """
    GET a URL and return the body text.

    Raises:
        TransportError: on connection failure, timeout or a non-2xx status
    """
    if not verify:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    try:
        response = requests.get(url, headers=headers, timeout=timeout, verify=verify)
    except requests.exceptions.Timeout:
        raise TransportError(f"Timeout after {timeout}s: {url}")
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Request failed: {e}")

    if not 200 <= response.status_code < 300:
        body_preview = (response.text or "").strip().replace("\n", " ")[:200]
        raise TransportError(f"HTTP {response.status_code}: {body_preview}")

    return response.text
