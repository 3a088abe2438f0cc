"""Data models for the media catalog."""

from mediacat.models.file_type import FileType, FILE_CATEGORIES
from mediacat.models.folder import FolderNode

__all__ = ["FileType", "FILE_CATEGORIES", "FolderNode"]
