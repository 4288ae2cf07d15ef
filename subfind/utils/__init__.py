"""Normalization and deduplication of source results"""

from .validator import DomainValidator, normalize
from .deduplicator import Deduplicator

__all__ = [
    'DomainValidator',
    'normalize',
    'Deduplicator'
]
