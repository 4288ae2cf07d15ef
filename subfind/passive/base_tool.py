"""
Base class for all source tools
Provides the common fetch contract and HTTP/JSON helpers
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from ..core.errors import DecodeError
from ..core.http import http_get


class BaseTool(ABC):
    """Abstract base class for passive sources"""

    name = "base_tool"

    def __init__(self, config: Optional[Dict] = None):
        self.config = config or {}
        self.url = self.config.get('url', '')
        self.timeout = self.get_timeout()
        self.verify = self.config.get('verify_ssl', True)
        self.headers = {}
        if self.config.get('user_agent'):
            self.headers['User-Agent'] = self.config['user_agent']

    @abstractmethod
    def fetch(self, domain: str) -> Iterable[str]:
        """
        Query the source for names under a domain

        Args:
            domain: Target domain, passed through unvalidated

        Returns:
            Raw names in the order the source listed them. May be a generator;
            names produced before an exception are kept by the runner.

        Raises:
            SourceError: the source failed
        """
        pass

    def build_url(self, domain: str, **extra) -> str:
        return self.url.format(domain=domain, **extra)

    def get(self, url: str) -> str:
        return http_get(url, timeout=self.timeout, headers=self.headers, verify=self.verify)

    def load_json(self, raw: str) -> Any:
        try:
            return json.loads(raw)
        except ValueError as e:
            preview = (raw or "").strip().replace("\n", " ")[:200]
            raise DecodeError(f"Invalid JSON: {e}. Body: {preview}")

    def string_list(self, value: Any, field: str) -> List[str]:
        """A JSON list of names; null or missing counts as empty, a null item as ''"""
        if value is None:
            return []
        if not isinstance(value, list):
            raise DecodeError(f"'{field}' is not a list")

        names = []
        for item in value:
            if item is None:
                item = ''
            elif not isinstance(item, str):
                raise DecodeError(f"'{field}' contains a non-string entry")
            names.append(item)
        return names

    def get_timeout(self) -> float:
        return self.config.get('timeout', 30)

    def is_enabled(self) -> bool:
        return self.config.get('enabled', True)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name}>"
