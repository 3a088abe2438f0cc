"""Tests for the catalog data models."""

import pytest
from pathlib import Path

from mediacat.exceptions import InvalidArgumentError, InvariantViolation
from mediacat.models.file_type import FILE_CATEGORIES, FileType
from mediacat.models.folder import FolderNode


class TestFileType:
    """Tests for the FileType enumeration."""

    def test_file_categories_exclude_folder(self):
        """FILE_CATEGORIES lists the four file categories."""
        assert FileType.FOLDER not in FILE_CATEGORIES
        assert len(FILE_CATEGORIES) == 4

    def test_is_folder(self):
        """Only FOLDER is the folder pseudo-category."""
        assert FileType.FOLDER.is_folder
        assert not FileType.MOVIE.is_folder


class TestFolderNodeQueries:
    """Tests for FolderNode lookups."""

    @pytest.fixture
    def folder(self, tmp_path):
        node = FolderNode(tmp_path, 2)
        node.add_file("movie.mkv", FileType.MOVIE)
        node.add_file("track.srt", FileType.SUBTITLE)
        (tmp_path / "sub").mkdir()
        node.add_folder(FolderNode(tmp_path / "sub", 0))
        return node

    def test_requires_absolute_path(self):
        """Relative paths are rejected."""
        with pytest.raises(InvalidArgumentError):
            FolderNode(Path("relative"), 0)

    def test_name(self, folder, tmp_path):
        """Name is the last path component."""
        assert folder.name == tmp_path.name

    def test_get_file_type(self, folder):
        """Reports the category a file is recorded under."""
        assert folder.get_file_type("movie.mkv") is FileType.MOVIE
        assert folder.get_file_type("track.srt") is FileType.SUBTITLE
        assert folder.get_file_type("missing.mkv") is None

    def test_get_file_type_ignores_folders(self, folder):
        """Folders are not files."""
        assert folder.get_file_type("sub") is None

    def test_contains(self, folder):
        """contains checks one category."""
        assert folder.contains("movie.mkv", FileType.MOVIE)
        assert not folder.contains("movie.mkv", FileType.SUBTITLE)
        assert folder.contains("sub", FileType.FOLDER)

    def test_contains_file_and_entry(self, folder):
        """contains_entry also sees folders, contains_file does not."""
        assert folder.contains_file("movie.mkv")
        assert not folder.contains_file("sub")
        assert folder.contains_entry("sub")
        assert folder.contains_entry("track.srt")
        assert not folder.contains_entry("other")

    def test_rejects_multi_component_name(self, folder):
        """Names must be bare filenames."""
        with pytest.raises(InvalidArgumentError):
            folder.contains_file("sub/movie.mkv")

    def test_count(self, folder):
        """Counts entries per category."""
        assert folder.count(FileType.MOVIE) == 1
        assert folder.count(FileType.UNUSUAL) == 0
        assert folder.count(FileType.FOLDER) == 1

    def test_is_empty(self, folder, tmp_path):
        """Empty only without files and folders."""
        assert not folder.is_empty()
        assert FolderNode(tmp_path / "sub", 3).is_empty()

    def test_to_absolute_path(self, folder, tmp_path):
        """Resolves a filename against the folder path."""
        assert folder.to_absolute_path("movie.mkv") == tmp_path / "movie.mkv"

    def test_belongs_here(self, folder, tmp_path):
        """True only for direct children."""
        assert folder.belongs_here(tmp_path / "anything")
        assert not folder.belongs_here(tmp_path / "sub" / "anything")

    def test_iter_files(self, folder):
        """Iterates over every filename."""
        assert sorted(folder.iter_files()) == ["movie.mkv", "track.srt"]

    def test_get_folder(self, folder, tmp_path):
        """Returns child folders by name."""
        assert folder.get_folder("sub").path == tmp_path / "sub"
        assert folder.get_folder("missing") is None


class TestFolderNodeMutations:
    """Tests for FolderNode record changes."""

    def test_add_file_duplicate(self, tmp_path):
        """A filename is recorded at most once, in one category."""
        node = FolderNode(tmp_path, 0)
        node.add_file("a.mkv", FileType.MOVIE)

        with pytest.raises(InvariantViolation):
            node.add_file("a.mkv", FileType.UNUSUAL)

    def test_add_file_rejects_folder_type(self, tmp_path):
        """FOLDER is not a file category."""
        with pytest.raises(InvariantViolation):
            FolderNode(tmp_path, 0).add_file("a", FileType.FOLDER)

    def test_add_folder_sets_path_and_depth(self, tmp_path):
        """Attached folder is re-homed under the parent."""
        (tmp_path / "child").mkdir()
        parent = FolderNode(tmp_path, 3)
        child = FolderNode(tmp_path / "elsewhere" / "child", 9)

        parent.add_folder(child)

        assert child.path == tmp_path / "child"
        assert child.depth == 4
        assert parent.folders["child"] is child

    def test_add_folder_requires_directory_on_disk(self, tmp_path):
        """Folders missing from disk cannot be recorded."""
        parent = FolderNode(tmp_path, 0)

        with pytest.raises(InvariantViolation):
            parent.add_folder(FolderNode(tmp_path / "missing", 1))

    def test_delete_record(self, tmp_path):
        """Removes a record once the file is gone from disk."""
        node = FolderNode(tmp_path, 0)
        node.add_file("a.mkv", FileType.MOVIE)

        node.delete_record("a.mkv", FileType.MOVIE)

        assert not node.contains_file("a.mkv")

    def test_delete_record_requires_disk_removal(self, tmp_path):
        """Records of files still on disk cannot be deleted."""
        (tmp_path / "a.mkv").touch()
        node = FolderNode(tmp_path, 0)
        node.add_file("a.mkv", FileType.MOVIE)

        with pytest.raises(InvariantViolation):
            node.delete_record("a.mkv", FileType.MOVIE)

    def test_delete_record_missing(self, tmp_path):
        """Deleting a missing record is an invariant violation."""
        with pytest.raises(InvariantViolation):
            FolderNode(tmp_path, 0).delete_record("a.mkv", FileType.MOVIE)

    def test_delete_record_wrong_category(self, tmp_path):
        """The record must be in the given category."""
        node = FolderNode(tmp_path, 0)
        node.add_file("a.mkv", FileType.MOVIE)

        with pytest.raises(InvariantViolation):
            node.delete_record("a.mkv", FileType.UNUSUAL)

    def test_detach_folder(self, tmp_path):
        """Detaching returns the child node."""
        (tmp_path / "child").mkdir()
        parent = FolderNode(tmp_path, 0)
        child = FolderNode(tmp_path / "child", 1)
        parent.add_folder(child)
        (tmp_path / "child").rmdir()

        assert parent.detach_folder("child") is child
        assert parent.is_empty()

    def test_change_path(self, tmp_path):
        """change_path updates path and depth in place."""
        node = FolderNode(tmp_path, 0)
        node.change_path(tmp_path / "x", 5)

        assert node.path == tmp_path / "x"
        assert node.depth == 5
