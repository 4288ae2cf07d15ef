"""
crt.sh Certificate Transparency Log tool
Reads the body as a sequence of JSON objects carrying a name_value field
"""

import json
import re
from typing import Iterator

from .base_tool import BaseTool

WHITESPACE = re.compile(r'\s*')


class CrtshTool(BaseTool):
    """crt.sh certificate transparency enumeration"""

    name = "crtsh"

    def fetch(self, domain: str) -> Iterator[str]:
        raw = self.get(self.build_url(domain))
        return self.parse(raw)

    @staticmethod
    def parse(raw: str) -> Iterator[str]:
        """
        Yield name_value from each consecutive JSON object.

        Decoding stops quietly at the first value that is not an object with
        a string name_value. The end of the body stops it the same way, so a
        truncated or malformed body keeps everything decoded before it.
        """
        decoder = json.JSONDecoder()
        pos = WHITESPACE.match(raw, 0).end()

        while True:
            try:
                entry, pos = decoder.raw_decode(raw, pos)
            except ValueError:
                return

            if not isinstance(entry, dict):
                return

            name = entry.get('name_value')
            if name is None:
                name = ''
            if not isinstance(name, str):
                return

            yield name
            pos = WHITESPACE.match(raw, pos).end()
