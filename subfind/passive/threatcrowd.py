"""
ThreatCrowd domain report tool
"""

from typing import List

from .base_tool import BaseTool
from ..core.errors import DecodeError


class ThreatCrowdTool(BaseTool):
    """threatcrowd.org domain report"""

    name = "threatcrowd"

    def fetch(self, domain: str) -> List[str]:
        report = self.load_json(self.get(self.build_url(domain)))

        if not isinstance(report, dict):
            raise DecodeError(f"expected a report object, got {type(report).__name__}")

        return list(self.string_list(report.get('subdomains'), 'subdomains'))
