"""
Domain normalization utilities
"""


class DomainValidator:
    """Normalizes names returned by sources"""

    WILDCARD_MARKERS = ('*', '%')

    def normalize(self, domain: str) -> str:
        """
        Normalize a raw name

        Lower-cases it, then strips at most one leading wildcard marker
        ('*' or '%') followed by at most one leading dot. Names shorter
        than two characters are only lower-cased.

        Args:
            domain: Raw name from a source

        Returns:
            Normalized name
        """
        domain = domain.lower()

        if len(domain) < 2:
            return domain

        if domain[0] in self.WILDCARD_MARKERS:
            domain = domain[1:]

        if domain.startswith('.'):
            domain = domain[1:]

        return domain

    def is_subdomain_of(self, subdomain: str, apex: str) -> bool:
        """
        Check if subdomain is the apex itself or a name under it

        Args:
            subdomain: Normalized name
            apex: Target domain

        Returns:
            True if subdomain is under apex domain
        """
        apex = apex.strip().lower().rstrip('.')
        if not apex:
            return False
        return subdomain == apex or subdomain.endswith('.' + apex)


_validator = DomainValidator()


def normalize(domain: str) -> str:
    return _validator.normalize(domain)
