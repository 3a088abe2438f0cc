"""File classification and path-kind predicates."""

from mediacat.classification.classifier import (
    FileClassifier,
    is_directory,
    is_regular_file,
    is_symlink,
    is_readable_or_writable,
    file_size,
)

__all__ = [
    "FileClassifier",
    "is_directory",
    "is_regular_file",
    "is_symlink",
    "is_readable_or_writable",
    "file_size",
]
