"""Core modules shared by the CLI and the source tools"""

from .config import ConfigManager
from .errors import SourceError, TransportError, DecodeError

__all__ = [
    'ConfigManager',
    'SourceError',
    'TransportError',
    'DecodeError'
]
