"""File classification by extension and size, plus path-kind predicates."""

import os
import re
from pathlib import Path
from typing import Iterable, Pattern

from mediacat.config.settings import (
    MIN_VIDEO_SIZE_BYTES,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from mediacat.filesystem.paths import PathLike, must_be_absolute, must_be_filename
from mediacat.models.file_type import FileType


def _compile_extensions(extensions: Iterable[str]) -> Pattern[str]:
    """
    Build a filename pattern matching any of the given extensions.

    Hidden files (leading dot) never match.

    Args:
        extensions: Extensions without the leading dot.

    Returns:
        Compiled case-insensitive pattern, to be used with fullmatch.

    Raises:
        ValueError: If no extension is given.
    """
    extensions = sorted(extensions)
    if not extensions:
        raise ValueError("Received an empty extensions list")
    alternatives = "|".join(re.escape(ext) for ext in extensions)
    return re.compile(rf"[^.].*\.({alternatives})", re.IGNORECASE | re.DOTALL)


class FileClassifier:
    """
    Categorizes filenames by extension and size.

    The extension lists are fixed at construction; matching only ever looks
    at the filename component, never at the full path.
    """

    def __init__(
        self,
        video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
        subtitle_extensions: Iterable[str] = SUBTITLE_EXTENSIONS,
    ) -> None:
        self._video_pattern = _compile_extensions(video_extensions)
        self._subtitle_pattern = _compile_extensions(subtitle_extensions)

    def is_video(self, path: PathLike) -> bool:
        """Check if the filename of a (relative or absolute) path has a video extension."""
        return bool(self._video_pattern.fullmatch(Path(path).name))

    def is_subtitle(self, path: PathLike) -> bool:
        """Check if the filename of a (relative or absolute) path has a subtitle extension."""
        return bool(self._subtitle_pattern.fullmatch(Path(path).name))

    def classify(
        self,
        filename: PathLike,
        size_bytes: int,
        threshold_bytes: int = MIN_VIDEO_SIZE_BYTES
    ) -> FileType:
        """
        Categorize a file from its name and size.

        Large files are movies when the extension says so and unusual
        otherwise; small files are subtitles or possibly junk.

        Args:
            filename: Bare filename.
            size_bytes: File size in bytes.
            threshold_bytes: Size above which a file counts as large.

        Returns:
            The file's category.
        """
        name = must_be_filename(filename)
        if size_bytes > threshold_bytes:
            return FileType.MOVIE if self.is_video(name) else FileType.UNUSUAL
        # Large subtitle-looking files end up UNUSUAL above
        return FileType.SUBTITLE if self.is_subtitle(name) else FileType.POSSIBLY_JUNK

    def classify_path(
        self,
        path: PathLike,
        threshold_bytes: int = MIN_VIDEO_SIZE_BYTES
    ) -> FileType:
        """
        Categorize a file on disk.

        Args:
            path: Absolute path of a regular file.
            threshold_bytes: Size above which a file counts as large.

        Returns:
            The file's category.

        Raises:
            OSError: If the file size cannot be read.
        """
        path = must_be_absolute(path)
        return self.classify(path.name, file_size(path), threshold_bytes)


def is_directory(path: PathLike) -> bool:
    """Check if path is a directory; symlinks to directories return False."""
    path = must_be_absolute(path)
    # os.path predicates answer False when the entry cannot be stat'ed
    return not os.path.islink(path) and os.path.isdir(path)


def is_regular_file(path: PathLike) -> bool:
    """Check if path is a regular file; symlinks to files return False."""
    path = must_be_absolute(path)
    return not os.path.islink(path) and os.path.isfile(path)


def is_symlink(path: PathLike) -> bool:
    """Check if path is a symbolic link (dangling or not)."""
    path = must_be_absolute(path)
    return os.path.islink(path)


def is_readable_or_writable(path: PathLike) -> bool:
    """Check if the current user may read or write path."""
    path = must_be_absolute(path)
    return os.access(path, os.R_OK) or os.access(path, os.W_OK)


def file_size(path: PathLike) -> int:
    """
    Return the size of a file in bytes without following symlinks.

    Raises:
        OSError: If the file cannot be stat'ed.
    """
    path = must_be_absolute(path)
    return path.lstat().st_size
