"""File type (category) enumeration."""

from enum import Enum
from typing import Tuple


class FileType(Enum):
    """Category of a catalog entry."""

    FOLDER = "Folder"
    MOVIE = "Movie"
    SUBTITLE = "Subtitle"
    UNUSUAL = "Unusual"
    POSSIBLY_JUNK = "PossiblyJunk"

    @property
    def is_folder(self) -> bool:
        """Check if this is the folder pseudo-category."""
        return self is FileType.FOLDER


# Categories tracked in FolderNode.files, in lookup order
FILE_CATEGORIES: Tuple[FileType, ...] = (
    FileType.MOVIE,
    FileType.SUBTITLE,
    FileType.UNUSUAL,
    FileType.POSSIBLY_JUNK,
)
