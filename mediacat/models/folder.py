"""Folder node of the in-memory catalog tree."""

import os
from pathlib import Path
from typing import Dict, Iterator, Optional, Set

from mediacat.exceptions import InvariantViolation
from mediacat.filesystem.paths import PathLike, must_be_absolute, must_be_filename
from mediacat.models.file_type import FILE_CATEGORIES, FileType


class FolderNode:
    """
    One directory's record: path, depth, child folders and categorized files.

    A node is owned by its parent's ``folders`` mapping (the root by the
    Catalog). Nodes hold no reference to their parent; a node's path is
    always ``parent.path / key`` and its depth ``parent.depth + 1``.

    Attributes:
        path: Absolute path of the directory.
        depth: Distance from the catalog root (root is 0).
        folders: Child folders keyed by folder name.
        files: One set of filenames per file category.
    """

    def __init__(self, path: PathLike, depth: int) -> None:
        self.path: Path = must_be_absolute(path)
        self.depth: int = depth
        self.folders: Dict[str, "FolderNode"] = {}
        self.files: Dict[FileType, Set[str]] = {
            file_type: set() for file_type in FILE_CATEGORIES
        }

    @property
    def name(self) -> str:
        """Folder name (last path component)."""
        return self.path.name

    def __repr__(self) -> str:
        return f"FolderNode({str(self.path)!r}, depth={self.depth})"

    def __str__(self) -> str:
        return str(self.path)

    # Queries

    def _entries(self, file_type: FileType):
        if file_type is FileType.FOLDER:
            return self.folders.keys()
        return self.files[file_type]

    def contains(self, name: PathLike, file_type: FileType) -> bool:
        """Check if name is recorded here under the given category."""
        return must_be_filename(name) in self._entries(file_type)

    def contains_file(self, name: PathLike) -> bool:
        """Check if name is recorded here as a file of any category."""
        return self.get_file_type(name) is not None

    def contains_entry(self, name: PathLike) -> bool:
        """Check if name is taken here by a file of any category or a folder."""
        name = must_be_filename(name)
        return name in self.folders or self.get_file_type(name) is not None

    def get_file_type(self, name: PathLike) -> Optional[FileType]:
        """
        Find the category a file is recorded under.

        Args:
            name: Bare filename.

        Returns:
            The file's category, or None if no file has that name.
        """
        name = must_be_filename(name)
        for file_type in FILE_CATEGORIES:
            if name in self.files[file_type]:
                return file_type
        return None

    def count(self, file_type: FileType) -> int:
        """Return the number of entries of a category (FOLDER counts child folders)."""
        return len(self._entries(file_type))

    def is_empty(self) -> bool:
        """Check if this folder records no files and no subfolders."""
        return not self.folders and not any(self.files.values())

    def to_absolute_path(self, name: PathLike) -> Path:
        """Resolve a bare filename against this folder's path."""
        return self.path / must_be_filename(name)

    def belongs_here(self, path: PathLike) -> bool:
        """Check if this folder is the direct parent of an absolute path."""
        return must_be_absolute(path).parent == self.path

    def get_folder(self, name: PathLike) -> Optional["FolderNode"]:
        """Return the child folder with the given name, if any."""
        return self.folders.get(must_be_filename(name))

    def iter_folders(self) -> Iterator["FolderNode"]:
        """Iterate over direct child folders."""
        return iter(list(self.folders.values()))

    def iter_files(self) -> Iterator[str]:
        """Iterate over all filenames, category by category."""
        for file_type in FILE_CATEGORIES:
            yield from sorted(self.files[file_type])

    # Record mutations

    def add_file(self, name: PathLike, file_type: FileType) -> None:
        """
        Record a file under a category.

        Raises:
            InvariantViolation: If the name is already recorded as a file or
                folder here, or the category is FOLDER.
        """
        name = must_be_filename(name)
        if file_type is FileType.FOLDER:
            raise InvariantViolation(f"Folders cannot be recorded as files: {name}")
        if self.contains_entry(name):
            raise InvariantViolation(
                f"The folder {self} already contains an entry named {name}"
            )
        self.files[file_type].add(name)

    def add_folder(self, folder: "FolderNode") -> None:
        """
        Attach a folder node as a child, re-homing it under this folder.

        The child's path becomes ``self.path / folder.name`` and its depth
        ``self.depth + 1``. Descendants of the child are not updated.

        Raises:
            InvariantViolation: If the directory does not exist at the new
                location or the name is already taken here.
        """
        full_path = self.path / folder.name
        if not os.path.isdir(full_path) or os.path.islink(full_path):
            raise InvariantViolation(
                f"Cannot record folder {full_path}: it does not exist in this location"
            )
        if self.contains_entry(folder.name):
            raise InvariantViolation(
                f"The folder {self} already contains an entry named {folder.name}"
            )
        folder.change_path(full_path, self.depth + 1)
        self.folders[folder.name] = folder

    def delete_record(self, name: PathLike, file_type: FileType) -> None:
        """
        Remove a file or folder record.

        The entity must already be gone from the filesystem.

        Raises:
            InvariantViolation: If the entity still exists on disk or the
                record is missing.
        """
        name = must_be_filename(name)
        absolute = self.path / name
        if os.path.lexists(absolute):
            raise InvariantViolation(
                f"{absolute} must be removed from the filesystem before its record"
            )
        entries = self._entries(file_type)
        if name not in entries:
            raise InvariantViolation(f"Could not locate the record for deletion: {absolute}")
        if file_type is FileType.FOLDER:
            del self.folders[name]
        else:
            entries.remove(name)

    def detach_folder(self, name: PathLike) -> "FolderNode":
        """
        Remove a child folder record and hand back its node.

        Used when the folder moved elsewhere; the same disk check as
        delete_record applies.
        """
        name = must_be_filename(name)
        folder = self.folders.get(name)
        if folder is None:
            raise InvariantViolation(f"Could not locate the folder record: {self.path / name}")
        self.delete_record(name, FileType.FOLDER)
        return folder

    def change_path(self, path: PathLike, depth: int) -> None:
        """Relocate this node in place (path and depth only)."""
        self.path = must_be_absolute(path)
        self.depth = depth
