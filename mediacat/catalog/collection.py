"""Catalog of a movie collection: the in-memory mirror of a directory tree."""

from collections import deque
from pathlib import Path
from typing import Iterator, Optional, Union

from mediacat.catalog.builder import CatalogBuilder
from mediacat.catalog.mutator import Mutator
from mediacat.exceptions import NotFoundError
from mediacat.filesystem.paths import PathLike, must_be_absolute, relative_depth
from mediacat.models.file_type import FILE_CATEGORIES, FileType
from mediacat.models.folder import FolderNode


class Catalog:
    """
    In-memory mirror of a movie collection directory.

    The tree is built once at construction; afterwards it only changes
    through the mutation methods, which keep it consistent with the disk.
    Instances are not thread-safe: serialize access with one lock around
    the whole catalog.

    Example:
        catalog = Catalog("/media/movies")
        folder = catalog.open_folder(Path("/media/movies/Action"))
        catalog.move_file(
            Path("/media/movies/Action/film.mkv"),
            Path("/media/movies/Drama/film.mkv"),
        )
    """

    def __init__(self, root: PathLike, builder: Optional[CatalogBuilder] = None) -> None:
        """
        Build the catalog of a directory.

        Args:
            root: Collection directory; a relative path is made absolute
                against the working directory.
            builder: Optional pre-configured builder for the same root.

        Raises:
            InvalidArgumentError: If root is not an existing, non-symlink
                directory.
        """
        if builder is None:
            builder = CatalogBuilder(Path(root).absolute())
        self.root: FolderNode = builder.build()
        self.mutator = Mutator(self)

    @property
    def root_path(self) -> Path:
        """Absolute path of the collection root."""
        return self.root.path

    def depth_of(self, path: PathLike) -> int:
        """Return the number of path components beyond the root."""
        return relative_depth(must_be_absolute(path), self.root_path)

    def __repr__(self) -> str:
        return f"Catalog({str(self.root_path)!r})"

    # Queries

    def open_folder(self, path: PathLike) -> Optional[FolderNode]:
        """
        Resolve an absolute path to its folder record.

        Walks the child mappings from the root one path component at a
        time.

        Args:
            path: Absolute folder path.

        Returns:
            The FolderNode, or None if the path is outside the root or a
            component is missing.
        """
        path = must_be_absolute(path)
        root_parts = self.root_path.parts
        if path.parts[:len(root_parts)] != root_parts:
            return None

        folder: Optional[FolderNode] = self.root
        for component in path.parts[len(root_parts):]:
            folder = folder.folders.get(component)
            if folder is None:
                return None
        return folder

    def require_folder(self, path: PathLike, message: str = "") -> FolderNode:
        """
        Resolve an absolute path to its folder record or fail.

        Raises:
            NotFoundError: If the folder is not in the catalog.
        """
        folder = self.open_folder(path)
        if folder is None:
            raise NotFoundError(message or f"Could not resolve the folder: {path}")
        return folder

    def contains_folder(self, path: PathLike) -> bool:
        """Check if an absolute path is a catalogued folder."""
        return self.open_folder(path) is not None

    def contains_file(self, path: PathLike) -> bool:
        """Check if an absolute path is a catalogued file (any category)."""
        return self.get_file_type(path) not in (None, FileType.FOLDER)

    def get_file_type(self, path: PathLike) -> Optional[FileType]:
        """
        Report the category of a catalogued entry.

        Args:
            path: Absolute path of a file or folder.

        Returns:
            The file's category, FileType.FOLDER for a folder, or None if
            the path is not catalogued.
        """
        path = must_be_absolute(path)
        if path == self.root_path:
            return FileType.FOLDER
        parent = self.open_folder(path.parent)
        if parent is None:
            return None
        if path.name in parent.folders:
            return FileType.FOLDER
        return parent.get_file_type(path.name)

    def get_subtree(self, origin: Union[FolderNode, PathLike]) -> Iterator[FolderNode]:
        """
        Enumerate a folder and all its descendants breadth first.

        The origin comes first; every folder at depth k+1 comes after all
        folders at depth k. Order within one depth is unspecified. The
        sequence is lazy: call again to restart.

        Args:
            origin: Starting FolderNode or its absolute path.

        Raises:
            NotFoundError: If origin is a path that is not catalogued.
        """
        if not isinstance(origin, FolderNode):
            origin = self.require_folder(origin, f"Could not open the source folder: {origin}")
        return self._breadth_first(origin)

    @staticmethod
    def _breadth_first(origin: FolderNode) -> Iterator[FolderNode]:
        queue = deque([origin])
        while queue:
            folder = queue.popleft()
            yield folder
            queue.extend(folder.iter_folders())

    def __iter__(self) -> Iterator[FolderNode]:
        return self._breadth_first(self.root)

    def count_files(self, file_type: Optional[FileType] = None) -> int:
        """
        Count catalogued files across the whole tree.

        Args:
            file_type: Restrict to one category; None counts all files.
                FileType.FOLDER counts folders below the root.
        """
        types = FILE_CATEGORIES if file_type is None else (file_type,)
        return sum(folder.count(t) for folder in self for t in types)

    # Mutations

    def delete_file(self, path: PathLike) -> None:
        """Delete a catalogued file from disk and from the catalog."""
        self.mutator.delete_file(path)

    def copy_file(self, source: PathLike, destination: PathLike) -> None:
        """Copy a catalogued file; the copy keeps the source's category."""
        self.mutator.copy_file(source, destination)

    def move_file(self, source: PathLike, destination: PathLike) -> None:
        """Move (or rename) a catalogued file."""
        self.mutator.move_file(source, destination)

    def delete_folder(self, path: PathLike) -> None:
        """Delete an empty catalogued folder."""
        self.mutator.delete_folder(path)

    def copy_folder(self, source: PathLike, destination: PathLike) -> None:
        """Copy a catalogued folder and everything below it."""
        self.mutator.copy_folder(source, destination)

    def move_folder(self, source: PathLike, destination: PathLike) -> None:
        """Move (or rename) a catalogued folder with its whole subtree."""
        self.mutator.move_folder(source, destination)
