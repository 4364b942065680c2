"""Reverse-order file copy package."""

from .config import Config, load_config
from .engine import DEFAULT_BUFFER_SIZE, ReverseCopyResult, copy_reversed, reverse_in_place
from .exceptions import (
    InvalidArgumentError,
    IOFailureError,
    ReverseCopyError,
    SourceNotFoundError,
)

__all__ = [
    "Config",
    "DEFAULT_BUFFER_SIZE",
    "IOFailureError",
    "InvalidArgumentError",
    "ReverseCopyError",
    "ReverseCopyResult",
    "SourceNotFoundError",
    "copy_reversed",
    "load_config",
    "reverse_in_place",
]
