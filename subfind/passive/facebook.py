"""
Facebook certificate transparency tool
Pages through the Graph API certificates endpoint.
Needs an app id and secret; without them the source yields nothing.
"""

from typing import Dict, Iterator, Optional

from .base_tool import BaseTool
from ..core.errors import DecodeError


class FacebookTool(BaseTool):
    """graph.facebook.com certificate search"""

    name = "facebook"

    def __init__(self, config: Optional[Dict] = None):
        super().__init__(config)
        self.app_id = self.config.get('app_id', '')
        self.app_secret = self.config.get('app_secret', '')
        self.max_pages = self.config.get('max_pages', 20)

    def has_credentials(self) -> bool:
        return bool(self.app_id and self.app_secret)

    def fetch(self, domain: str) -> Iterator[str]:
        if not self.has_credentials():
            return

        url = self.build_url(domain, app_id=self.app_id, app_secret=self.app_secret)
        pages = 0

        while url and pages < self.max_pages:
            page = self.load_json(self.get(url))
            pages += 1

            if not isinstance(page, dict):
                raise DecodeError(f"expected a page object, got {type(page).__name__}")

            for cert in page.get('data') or []:
                if cert is None:
                    continue
                if not isinstance(cert, dict):
                    raise DecodeError("certificate entry is not an object")
                yield from self.string_list(cert.get('domains'), 'domains')

            paging = page.get('paging') or {}
            url = paging.get('next') if isinstance(paging, dict) else None
