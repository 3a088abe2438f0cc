"""Filesystem primitives used by the catalog mutator.

None of these follow symlinks and none of them overwrite an existing
destination. Failures surface as OSError.
"""

import errno
import os
import shutil
from pathlib import Path

from loguru import logger


def _must_not_exist(destination: Path) -> None:
    if os.path.lexists(destination):
        raise FileExistsError(errno.EEXIST, "Destination already exists", str(destination))


def delete_entry(path: Path) -> None:
    """
    Delete a file, a symlink or an empty directory.

    A non-empty directory is refused by the OS (OSError).

    Args:
        path: Absolute path to delete.
    """
    if path.is_dir() and not path.is_symlink():
        os.rmdir(path)
    else:
        os.unlink(path)
    logger.debug(f"Deleted: {path}")


def copy_entry(source: Path, destination: Path) -> None:
    """
    Copy a single file with its attributes.

    Args:
        source: Absolute path of the file to copy.
        destination: Absolute path of the copy (must not exist).
    """
    _must_not_exist(destination)
    shutil.copy2(source, destination, follow_symlinks=False)
    logger.debug(f"Copied: {source} -> {destination}")


def copy_folder_shell(source: Path, destination: Path) -> None:
    """
    Create a directory carrying the attributes of another, without contents.

    Args:
        source: Absolute path of the directory to mirror.
        destination: Absolute path of the new directory (must not exist).
    """
    _must_not_exist(destination)
    os.mkdir(destination)
    try:
        shutil.copystat(source, destination, follow_symlinks=False)
    except OSError:
        os.rmdir(destination)
        raise
    logger.debug(f"Folder created: {source} -> {destination}")


def move_entry(source: Path, destination: Path) -> None:
    """
    Move a file or a whole directory.

    Args:
        source: Absolute path to move.
        destination: Absolute target path (must not exist).
    """
    _must_not_exist(destination)
    shutil.move(str(source), str(destination))
    logger.debug(f"Moved: {source} -> {destination}")
