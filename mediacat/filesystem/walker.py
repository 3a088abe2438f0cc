"""Directory tree walk used to build the catalog."""

import os
from pathlib import Path
from typing import Callable, Generator, Optional

from loguru import logger

from mediacat.filesystem.paths import PathLike, must_be_absolute


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Suppressed a filesystem error during the walk: {error.filename} ({error})")


def walk_tree(
    root: PathLike,
    prune: Optional[Callable[[Path], bool]] = None
) -> Generator[Path, None, None]:
    """
    Walk a directory tree without following symlinks.

    Every directory is yielded before its descendants, and a directory's
    files (and symlinks) are yielded before its subdirectories are walked.
    Listing errors are logged and the walk continues with the rest of the
    tree.

    Args:
        root: Absolute path of the directory to walk.
        prune: Optional predicate; subdirectories for which it returns True
            are neither yielded nor descended into.

    Yields:
        Absolute paths of every entry, starting with root itself.
    """
    root = must_be_absolute(root)
    if prune is not None and prune(root):
        return

    for dirpath, dirnames, filenames in os.walk(
        root, topdown=True, onerror=_log_walk_error, followlinks=False
    ):
        current = Path(dirpath)
        yield current

        for name in sorted(filenames):
            yield current / name

        kept = []
        for name in sorted(dirnames):
            entry = current / name
            if os.path.islink(entry):
                # os.walk lists links to directories here but never enters them
                yield entry
            elif prune is not None and prune(entry):
                logger.debug(f"Pruned directory: {entry}")
            else:
                kept.append(name)
        dirnames[:] = kept
