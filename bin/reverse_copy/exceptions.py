"""Exceptions raised by reverse_copy."""


class ReverseCopyError(Exception):
    """Base class for reverse copy failures"""


class InvalidArgumentError(ReverseCopyError, ValueError):
    """Blank path, bad buffer size, or malformed invocation. Raised before any I/O."""


class SourceNotFoundError(ReverseCopyError):
    """Source path does not resolve to an existing file"""


class IOFailureError(ReverseCopyError):
    """Any other failure while opening, seeking, reading, writing or closing"""
