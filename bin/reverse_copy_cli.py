#!/usr/bin/env python3
"""
Reverse copy CLI — copies a file with its byte order reversed.

The source is processed in fixed-size chunks, so memory use stays bounded
by the buffer size whatever the file size.

Usage:
  bin/reverse_copy_cli.py <src> <dst>                # default buffer (1024 bytes)
  bin/reverse_copy_cli.py <src> <dst> -b 65536       # 64 KiB buffer
  bin/reverse_copy_cli.py --help

Environment:
  REVERSE_COPY_CONFIG       YAML file with buffer_size / log_level
  REVERSE_COPY_BUFFER_SIZE  default buffer size when -b is omitted
  REVERSE_COPY_LOG_LEVEL    logging level (default: WARNING)
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

# 스크립트 위치 기반 경로 상수
_SCRIPT_DIR = Path(__file__).resolve().parent   # bin/

# Ensure bin/ is on sys.path so local package imports resolve without PYTHONPATH
if str(_SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(_SCRIPT_DIR))

from reverse_copy.config import Config, load_config
from reverse_copy.engine import DEFAULT_BUFFER_SIZE, copy_reversed
from reverse_copy.exceptions import InvalidArgumentError, ReverseCopyError

_HELP_FLAGS = ("-h", "--help")
_BUFFER_FLAGS = ("-b", "--buffer")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reverse-copy",
        description="Copy <src> to <dst> with the byte order reversed",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")
    parser.add_argument(
        "-b", "--buffer",
        metavar="<buffer size>",
        help=f"Specify buffer size in bytes (default: {DEFAULT_BUFFER_SIZE})",
    )
    parser.add_argument("src", metavar="<src>", help="Source file path")
    parser.add_argument("dst", metavar="<dst>", help="Destination file path")
    return parser


def _parse_arguments(parser: argparse.ArgumentParser, argv: Sequence[str]) -> argparse.Namespace:
    """Enforce the argument-count contract, then let argparse fill the namespace.

    Accepted shapes: ``-h|--help``, ``<src> <dst>``, ``<src> <dst> -b|--buffer <n>``.
    """
    if len(argv) == 1 and argv[0] in _HELP_FLAGS:
        return argparse.Namespace(help=True, buffer=None, src=None, dst=None)
    if len(argv) not in (2, 4):
        raise InvalidArgumentError("Invalid number of arguments.")

    options: list[str] = []
    if len(argv) == 4:
        if argv[2] not in _BUFFER_FLAGS:
            raise InvalidArgumentError(f"Unknown option: {argv[2]}")
        options.append(f"--buffer={argv[3]}")

    # "--" keeps paths starting with "-" positional
    return parser.parse_args([*options, "--", argv[0], argv[1]])


def _parse_buffer_size(value: str) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise InvalidArgumentError("Invalid buffer size.")
    return int(value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()

    try:
        args = _parse_arguments(parser, argv)
    except InvalidArgumentError as e:
        print(e, file=sys.stderr)
        return 1

    if args.help:
        parser.print_help()
        return 0

    try:
        if args.buffer is None:
            config = load_config()
            buffer_size = config.buffer_size
        else:
            buffer_size = _parse_buffer_size(args.buffer)
            # -b replaces the configured buffer size; only the log level is looked up
            config = Config(buffer_size=DEFAULT_BUFFER_SIZE)
    except ReverseCopyError as e:
        print(e, file=sys.stderr)
        return 1

    # Set up logging configuration
    logging.basicConfig(
        level=config.logging_level,
        format='%(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        stream=sys.stderr,
    )

    try:
        copy_reversed(args.src, args.dst, buffer_size)
    except ReverseCopyError as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
