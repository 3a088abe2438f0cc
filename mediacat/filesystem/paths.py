"""Path precondition helpers shared by the catalog modules."""

from pathlib import Path, PurePath
from typing import Union

from mediacat.exceptions import InvalidArgumentError

PathLike = Union[str, PurePath]


def must_be_absolute(path: PathLike) -> Path:
    """
    Ensure a path is absolute.

    Args:
        path: Path to check.

    Returns:
        The path as a Path object.

    Raises:
        InvalidArgumentError: If the path is relative.
    """
    path = Path(path)
    if not path.is_absolute():
        raise InvalidArgumentError(
            f"Expected an absolute path but received a relative path: {path}"
        )
    return path


def must_be_filename(name: PathLike) -> str:
    """
    Ensure a name is a bare filename (exactly one path component).

    Args:
        name: Filename to check.

    Returns:
        The filename as a string.

    Raises:
        InvalidArgumentError: If the name has zero or several components.
    """
    parts = PurePath(name).parts
    if len(parts) != 1 or parts[0] in ('/', '.', '..'):
        raise InvalidArgumentError(
            f"Received an invalid filename, did you provide a full path? {name}"
        )
    return parts[0]


def relative_depth(path: Path, root: Path) -> int:
    """
    Count the path components of ``path`` beyond ``root``.

    Args:
        path: Absolute path at or below root.
        root: Absolute root path.

    Returns:
        Depth of path relative to root (root itself is 0).
    """
    return len(path.parts) - len(root.parts)
