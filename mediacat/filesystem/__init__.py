"""Filesystem access for the media catalog."""

from mediacat.filesystem.paths import (
    must_be_absolute,
    must_be_filename,
    relative_depth,
)
from mediacat.filesystem.walker import walk_tree
from mediacat.filesystem.file_ops import (
    delete_entry,
    copy_entry,
    copy_folder_shell,
    move_entry,
)

__all__ = [
    "must_be_absolute",
    "must_be_filename",
    "relative_depth",
    "walk_tree",
    "delete_entry",
    "copy_entry",
    "copy_folder_shell",
    "move_entry",
]
