"""Validated file and folder mutations that keep the catalog in sync with disk.

Every operation follows the same protocol:

1. Validate: resolve the records involved and check for collisions. Nothing
   has been touched when a validation error is raised.
2. Act: run exactly one filesystem primitive. An OSError becomes a
   FileIOError and the records are left untouched.
3. Record: update the tree to match the disk. A failure here is an
   InvariantViolation, since validation guarantees the records exist.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from loguru import logger

from mediacat.exceptions import (
    CollisionError,
    FileIOError,
    InvalidArgumentError,
    NotFoundError,
)
from mediacat.filesystem import file_ops
from mediacat.filesystem.paths import PathLike, must_be_absolute
from mediacat.models.file_type import FileType
from mediacat.models.folder import FolderNode

if TYPE_CHECKING:
    from mediacat.catalog.collection import Catalog


class Mutator:
    """
    Performs delete/copy/move of files and folders for a Catalog.

    The mutator is the only writer of the catalog tree.
    """

    def __init__(self, catalog: "Catalog") -> None:
        self.catalog = catalog

    # Validation helpers

    def _resolve_source_file(self, source: Path) -> Tuple[FolderNode, FileType]:
        folder = self.catalog.require_folder(
            source.parent, f"Could not resolve the source path: {source}"
        )
        file_type = folder.get_file_type(source.name)
        if file_type is None:
            raise NotFoundError(f"The source file could not be located: {source}")
        return folder, file_type

    def _resolve_source_folder(self, source: Path) -> Tuple[FolderNode, FolderNode]:
        folder = self.catalog.require_folder(source, f"Could not open the source: {source}")
        parent = self.catalog.require_folder(
            source.parent, f"Could not open the parent of the source: {source}"
        )
        return folder, parent

    def _resolve_destination(self, destination: Path) -> FolderNode:
        folder = self.catalog.require_folder(
            destination.parent, f"Could not resolve the destination path: {destination}"
        )
        if folder.contains_entry(destination.name):
            kind = "folder" if destination.name in folder.folders else "file"
            raise CollisionError(
                f"The destination folder already contains a {kind} named "
                f"{destination.name}: {destination}"
            )
        return folder

    @staticmethod
    def _must_be_outside(source: Path, destination: Path) -> None:
        if destination.parts[:len(source.parts)] == source.parts:
            raise InvalidArgumentError(
                f"Cannot place folder {source} inside itself: {destination}"
            )

    @staticmethod
    def _act(
        operation: Callable[..., None],
        source: Path,
        destination: Optional[Path] = None
    ) -> None:
        args = (source,) if destination is None else (source, destination)
        try:
            operation(*args)
        except OSError as e:
            logger.error(f"Filesystem error on {source} -> {destination}: {e}")
            raise FileIOError(
                f"A low level file IO error occurred {source} to {destination} "
                f"- check permissions: {e}",
                source=source,
                destination=destination,
            ) from e

    # File operations

    def delete_file(self, path: PathLike) -> None:
        """
        Delete a catalogued file.

        Args:
            path: Absolute path of the file.

        Raises:
            NotFoundError: If the file is not catalogued.
            FileIOError: If the filesystem refused the deletion.
        """
        path = must_be_absolute(path)
        folder, file_type = self._resolve_source_file(path)

        self._act(file_ops.delete_entry, path)

        folder.delete_record(path.name, file_type)
        logger.info(f"File deleted: {path}")

    def copy_file(self, source: PathLike, destination: PathLike) -> None:
        """
        Copy a catalogued file, recording the copy under the same category.

        Args:
            source: Absolute path of the file.
            destination: Absolute path of the copy, in a catalogued folder.

        Raises:
            NotFoundError: If the source or destination folder is unknown.
            CollisionError: If the destination name is already taken.
            FileIOError: If the copy failed.
        """
        source = must_be_absolute(source)
        destination = must_be_absolute(destination)
        _, file_type = self._resolve_source_file(source)
        destination_folder = self._resolve_destination(destination)

        self._act(file_ops.copy_entry, source, destination)

        destination_folder.add_file(destination.name, file_type)
        logger.info(f"File copied: {source} -> {destination}")

    def move_file(self, source: PathLike, destination: PathLike) -> None:
        """
        Move or rename a catalogued file.

        Args:
            source: Absolute path of the file.
            destination: Absolute target path, in a catalogued folder.

        Raises:
            NotFoundError: If the source or destination folder is unknown.
            CollisionError: If the destination name is already taken.
            FileIOError: If the move failed.
        """
        source = must_be_absolute(source)
        destination = must_be_absolute(destination)
        source_folder, file_type = self._resolve_source_file(source)
        destination_folder = self._resolve_destination(destination)

        self._act(file_ops.move_entry, source, destination)

        source_folder.delete_record(source.name, file_type)
        destination_folder.add_file(destination.name, file_type)
        logger.info(f"File moved: {source} -> {destination}")

    # Folder operations

    def delete_folder(self, path: PathLike) -> None:
        """
        Delete a catalogued folder.

        Emptiness is left to the OS: deleting a non-empty folder fails with
        FileIOError and changes nothing. The root cannot be deleted.

        Raises:
            NotFoundError: If the folder (or its parent) is not catalogued.
            FileIOError: If the filesystem refused the deletion.
        """
        path = must_be_absolute(path)
        folder, parent = self._resolve_source_folder(path)

        self._act(file_ops.delete_entry, path)

        parent.delete_record(folder.name, FileType.FOLDER)
        logger.info(f"Folder deleted: {path}")

    def move_folder(self, source: PathLike, destination: PathLike) -> None:
        """
        Move or rename a catalogued folder with its whole subtree.

        The directory is moved by a single OS call; afterwards the path and
        depth of every node below it are recomputed.

        Raises:
            InvalidArgumentError: If destination lies inside source.
            NotFoundError: If source, its parent, or the destination parent
                is not catalogued.
            CollisionError: If the destination name is already taken.
            FileIOError: If the move failed.
        """
        source = must_be_absolute(source)
        destination = must_be_absolute(destination)
        folder, parent = self._resolve_source_folder(source)
        self._must_be_outside(source, destination)
        destination_parent = self._resolve_destination(destination)

        self._act(file_ops.move_entry, source, destination)

        parent.detach_folder(folder.name)
        folder.change_path(destination, folder.depth)
        destination_parent.add_folder(folder)
        self._ripple(folder)
        logger.info(f"Folder moved: {source} -> {destination}")

    def _ripple(self, origin: FolderNode) -> None:
        """Recompute path and depth of every descendant of a relocated folder."""
        for folder in self.catalog.get_subtree(origin):
            for name, child in folder.folders.items():
                child.change_path(folder.path / name, folder.depth + 1)
        logger.debug(f"Paths updated below {origin.path}")

    def copy_folder(self, source: PathLike, destination: PathLike) -> None:
        """
        Copy a catalogued folder and its whole subtree.

        Folders are visited breadth first, so each destination parent exists
        before its children are created. Each folder is recreated as an empty
        shell carrying the source's attributes, then its files are copied one
        by one through copy_file, with the same collision checks.

        Raises:
            InvalidArgumentError: If destination lies inside source.
            NotFoundError: If source or the destination parent is not
                catalogued.
            CollisionError: If the destination name is already taken.
            FileIOError: If a directory or file copy failed; folders and files
                copied up to that point stay copied and catalogued.
        """
        source = must_be_absolute(source)
        destination = must_be_absolute(destination)
        origin = self.catalog.require_folder(source, f"Could not open the source: {source}")
        self._must_be_outside(source, destination)
        self._resolve_destination(destination)

        # Snapshot before the tree grows
        folders = list(self.catalog.get_subtree(origin))
        for folder in folders:
            target = destination / folder.path.relative_to(source)
            self._copy_folder_shell(folder, target)
            for name in list(folder.iter_files()):
                self.copy_file(folder.path / name, target / name)

        logger.info(f"Folder copied: {source} -> {destination}")

    def _copy_folder_shell(self, folder: FolderNode, target: Path) -> FolderNode:
        target_parent = self._resolve_destination(target)

        self._act(file_ops.copy_folder_shell, folder.path, target)

        copy = FolderNode(target, target_parent.depth + 1)
        target_parent.add_folder(copy)
        return copy
