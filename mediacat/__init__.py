"""
Mediacat - Media collection catalog.

Catalogs a directory tree holding a media collection by:
- Classifying every file by extension and size (movie, subtitle, unusual, junk)
- Mirroring the directory hierarchy in memory
- Moving, copying and deleting files and folders while keeping the
  in-memory mirror consistent with the filesystem
"""

__version__ = "0.1.0"
