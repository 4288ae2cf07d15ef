"""
Errors raised by source tools.
They never leave a tool's worker: the runner reports them and moves on.
"""


class SourceError(RuntimeError):
    """A source could not produce names"""


class TransportError(SourceError):
    """Network failure, timeout or non-2xx response"""


class DecodeError(SourceError):
    """Response body did not have the expected shape"""
