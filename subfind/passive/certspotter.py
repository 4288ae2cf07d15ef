"""
CertSpotter certificate transparency tool
Flattens dns_names from every certificate the API returns
"""

from typing import List

from .base_tool import BaseTool
from ..core.errors import DecodeError


class CertSpotterTool(BaseTool):
    """certspotter.com certificate search"""

    name = "certspotter"

    def fetch(self, domain: str) -> List[str]:
        certs = self.load_json(self.get(self.build_url(domain)))

        if not isinstance(certs, list):
            raise DecodeError(f"expected a list of certificates, got {type(certs).__name__}")

        names = []
        for cert in certs:
            if cert is None:
                continue
            if not isinstance(cert, dict):
                raise DecodeError("certificate entry is not an object")
            names.extend(self.string_list(cert.get('dns_names'), 'dns_names'))

        return names
