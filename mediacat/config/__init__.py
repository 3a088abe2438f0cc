"""Configuration and CLI handling."""

from mediacat.config.settings import (
    VIDEO_EXTENSIONS,
    SUBTITLE_EXTENSIONS,
    BYTES_PER_MB,
    MIN_VIDEO_SIZE_MB,
    MIN_VIDEO_SIZE_BYTES,
)
from mediacat.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
    validate_root,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "SUBTITLE_EXTENSIONS",
    "BYTES_PER_MB",
    "MIN_VIDEO_SIZE_MB",
    "MIN_VIDEO_SIZE_BYTES",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
    "validate_root",
]
