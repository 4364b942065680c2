"""Centralized configuration management."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .engine import DEFAULT_BUFFER_SIZE
from .exceptions import InvalidArgumentError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """Centralized configuration management"""
    buffer_size: Optional[int] = None  # None: REVERSE_COPY_BUFFER_SIZE or DEFAULT_BUFFER_SIZE
    log_level: Optional[str] = None  # None: REVERSE_COPY_LOG_LEVEL or WARNING

    def __post_init__(self):
        # Environment only fills values that were not given explicitly
        if self.buffer_size is None:
            env_buffer = os.environ.get('REVERSE_COPY_BUFFER_SIZE')
            if env_buffer:
                try:
                    self.buffer_size = int(env_buffer)
                except ValueError:
                    raise InvalidArgumentError(
                        f"REVERSE_COPY_BUFFER_SIZE is not an integer: {env_buffer!r}"
                    ) from None
            else:
                self.buffer_size = DEFAULT_BUFFER_SIZE
        if self.log_level is None:
            self.log_level = os.environ.get('REVERSE_COPY_LOG_LEVEL') or _DEFAULT_LOG_LEVEL

        if isinstance(self.buffer_size, bool) or not isinstance(self.buffer_size, int) \
                or self.buffer_size < 1:
            raise InvalidArgumentError(
                f"buffer_size must be a positive integer, got {self.buffer_size!r}"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidArgumentError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config(path: Optional[Path] = None) -> Config:
    """Load configuration from a YAML file.

    Without ``path`` the ``REVERSE_COPY_CONFIG`` environment variable is used;
    with neither, defaults (plus environment overrides) are returned.
    """
    if path is None:
        env_path = os.environ.get('REVERSE_COPY_CONFIG')
        if not env_path:
            return Config()
        path = Path(env_path)

    path = Path(path)
    if not path.is_file():
        raise InvalidArgumentError(f"Config file not found: {path}")

    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidArgumentError(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidArgumentError(f"Unknown config keys in {path}: {', '.join(map(str, unknown))}")

    return Config(**data)
