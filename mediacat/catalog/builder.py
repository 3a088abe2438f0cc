"""One-shot construction of the catalog tree from a root directory."""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from mediacat.classification.classifier import (
    FileClassifier,
    is_directory,
    is_readable_or_writable,
    is_regular_file,
)
from mediacat.config.settings import MIN_VIDEO_SIZE_BYTES
from mediacat.exceptions import InvalidArgumentError, InvariantViolation
from mediacat.filesystem.paths import PathLike, must_be_absolute, relative_depth
from mediacat.filesystem.walker import walk_tree
from mediacat.models.folder import FolderNode


class CatalogBuilder:
    """
    Walks a root directory once and assembles the FolderNode tree.

    The walk yields every directory before its contents. The builder keeps
    a stack with one open folder per depth on the path from the root to the
    current directory: a directory at depth d pops the stack down to its
    parent (depth d - 1) and is pushed on top, a file is recorded into the
    folder on top.
    """

    def __init__(
        self,
        root: PathLike,
        classifier: Optional[FileClassifier] = None,
        threshold_bytes: int = MIN_VIDEO_SIZE_BYTES
    ) -> None:
        self.root_path: Path = must_be_absolute(root)
        if not is_directory(self.root_path):
            raise InvalidArgumentError(
                f"Starting path must be a directory and cannot be a symlink: {self.root_path}"
            )
        self.classifier = classifier or FileClassifier()
        self.threshold_bytes = threshold_bytes
        self._stack: List[FolderNode] = []
        self._root: Optional[FolderNode] = None
        self.folder_count = 0
        self.file_count = 0
        self.skipped_count = 0

    def build(self) -> FolderNode:
        """
        Walk the root directory and return the root FolderNode.

        Each call starts from scratch: the stack and counters are reset
        and a new tree is returned.

        Raises:
            InvalidArgumentError: If the root itself could not be catalogued.
        """
        self._stack = []
        self._root = None
        self.folder_count = 0
        self.file_count = 0
        self.skipped_count = 0

        logger.info(f"Building catalog: {self.root_path}")
        for path in walk_tree(self.root_path, prune=self._prune):
            self.visit(path)

        if self._root is None:
            raise InvalidArgumentError(f"Could not read the starting directory: {self.root_path}")

        logger.info(
            f"Catalog built: {self.folder_count} folders, {self.file_count} files, "
            f"{self.skipped_count} skipped"
        )
        return self._root

    def _prune(self, path: Path) -> bool:
        """Decide whether the walk skips a directory and everything below it."""
        if not is_readable_or_writable(path):
            logger.debug(f"Skipping directory neither readable nor writable: {path}")
        elif not is_directory(path):
            logger.warning(f"Skipping directory that couldn't be stat'ed: {path}")
        else:
            return False
        self.skipped_count += 1
        return True

    def visit(self, path: Path) -> None:
        """Process one walked entry."""
        if not is_readable_or_writable(path):
            logger.debug(f"Skipping entry neither readable nor writable: {path}")
            self.skipped_count += 1
            return

        if is_directory(path):
            self._add_folder(path)
        elif is_regular_file(path):
            self._add_file(path)
        else:
            logger.warning(f"Path couldn't be classified as a directory or regular file: {path}")
            self.skipped_count += 1

    def _current_depth(self) -> int:
        return len(self._stack) - 1

    def _unwind_to(self, path: Path) -> None:
        """Pop open folders until the top of the stack is the parent of path."""
        place_at_depth = relative_depth(path, self.root_path) - 1
        pops = self._current_depth() - place_at_depth
        if pops < 0:
            raise InvariantViolation(
                f"Calculated a negative number of stack pops ({pops}) for: {path}"
            )
        for _ in range(pops):
            self._stack.pop()

    def _add_folder(self, path: Path) -> None:
        self._unwind_to(path)
        folder = FolderNode(path, relative_depth(path, self.root_path))
        if self._stack:
            self._stack[-1].add_folder(folder)
        else:
            self._root = folder
        self._stack.append(folder)
        self.folder_count += 1

    def _add_file(self, path: Path) -> None:
        if not self._stack:
            raise InvariantViolation(f"Received a file before any folder: {path}")
        self._unwind_to(path)
        try:
            file_type = self.classifier.classify_path(path, self.threshold_bytes)
        except OSError as e:
            logger.warning(f"Suppressed an error while reading {path}: {e}")
            self.skipped_count += 1
            return
        self._stack[-1].add_file(path.name, file_type)
        self.file_count += 1


def build_catalog_tree(root: PathLike, **kwargs) -> FolderNode:
    """
    Build the catalog tree rooted at an absolute directory path.

    Args:
        root: Absolute path of an existing, non-symlink directory.
        **kwargs: Passed to CatalogBuilder.

    Returns:
        The root FolderNode.
    """
    return CatalogBuilder(root, **kwargs).build()
