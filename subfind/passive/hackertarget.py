"""
HackerTarget host search tool
Response is plain text, one "hostname,ip" pair per line
"""

from typing import List

from .base_tool import BaseTool


class HackerTargetTool(BaseTool):
    """api.hackertarget.com host search"""

    name = "hackertarget"

    def fetch(self, domain: str) -> List[str]:
        raw = self.get(self.build_url(domain))
        return self.parse(raw)

    @staticmethod
    def parse(raw: str) -> List[str]:
        names = []
        for line in raw.splitlines():
            parts = line.split(',', 1)
            # Error banners and blank lines have no comma
            if len(parts) != 2:
                continue
            names.append(parts[0])
        return names
