"""
Streaming deduplication of merged source results
"""

from typing import Dict, Iterable, Iterator, Optional, Set

from .validator import DomainValidator


class Deduplicator:
    """
    Single consumer of the merged stream.

    Normalizes each name and yields it the first time it is seen. The seen
    set is touched only by the thread iterating process(), so it needs no lock.
    """

    def __init__(self, domain: Optional[str] = None, subs_only: bool = False):
        if subs_only and not domain:
            raise ValueError("subs_only filtering needs a domain")

        self.domain = domain
        self.subs_only = subs_only
        self.validator = DomainValidator()
        self.seen: Set[str] = set()

        self.received = 0
        self.duplicates = 0
        self.filtered = 0

    def process(self, names: Iterable[str]) -> Iterator[str]:
        """
        Yield each distinct normalized name once, in arrival order

        Args:
            names: Raw names, consumed lazily

        Returns:
            Iterator of unique normalized names
        """
        for raw in names:
            self.received += 1
            name = self.validator.normalize(raw)

            if name in self.seen:
                self.duplicates += 1
                continue

            if self.subs_only and not self.validator.is_subdomain_of(name, self.domain):
                self.filtered += 1
                continue

            self.seen.add(name)
            yield name

    def get_statistics(self) -> Dict:
        """Get deduplication statistics"""
        return {
            'received': self.received,
            'unique': len(self.seen),
            'duplicates': self.duplicates,
            'filtered': self.filtered
        }
