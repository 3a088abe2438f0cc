"""Pytest configuration and fixtures."""

import shlex

import pytest
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from mediacat.config.settings import BYTES_PER_MB


@dataclass
class MovieDir:
    """A movie directory materialised from a layout template."""

    root: Path
    dirs: List[Path] = field(default_factory=list)
    files: List[Path] = field(default_factory=list)


def make_file(path: Path, size_mb: float = 0) -> Path:
    """Create a sparse file of the given size (parents included)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as handle:
        handle.truncate(int(size_mb * BYTES_PER_MB))
    return path


def build_movie_dir(root: Path, layout: str) -> MovieDir:
    """
    Create directories and files from a layout template.

    One entry per line, ``#`` starts a comment:

        D  relative/dir
        F  relative/file.mkv  80      # size in MB
        F  "name with spaces.srt"  0

    Args:
        root: Existing directory the paths are resolved against.
        layout: Template text.

    Returns:
        MovieDir listing what was created, in template order.
    """
    movie_dir = MovieDir(root=root)
    for number, line in enumerate(layout.splitlines(), start=1):
        columns = shlex.split(line, comments=True)
        if not columns:
            continue
        kind = columns[0].upper()
        if kind == "D" and len(columns) == 2:
            path = root / columns[1]
            path.mkdir(parents=True, exist_ok=True)
            movie_dir.dirs.append(path)
        elif kind == "F" and len(columns) == 3:
            movie_dir.files.append(make_file(root / columns[1], float(columns[2])))
        else:
            raise ValueError(f"Couldn't parse layout line {number}: {line!r}")
    return movie_dir


EXAMPLE_LAYOUT = """
# A small collection
D  a
F  a/movie.mkv          80
D  a/sub
F  a/sub/track.srt      0.001
F  a/notes.txt          0
F  a/bonus.iso          60      # large but not a video
D  b
F  b/Film.MP4           51
F  b/.hidden.mkv        70
F  b/subs.idx           1
D  b/extras
D  b/extras/deep
F  b/extras/deep/trailer.avi 0
D  empty
F  readme.nfo           0
"""


@pytest.fixture
def movie_dir(tmp_path):
    """Factory creating a movie directory from a layout template."""
    def _factory(layout: str = EXAMPLE_LAYOUT) -> MovieDir:
        root = tmp_path / "collection"
        root.mkdir(exist_ok=True)
        return build_movie_dir(root, layout)
    return _factory


@pytest.fixture
def example_dir(movie_dir):
    """The example collection."""
    return movie_dir()


@pytest.fixture
def catalog(example_dir):
    """Catalog built from the example collection."""
    from mediacat.catalog import Catalog

    return Catalog(example_dir.root)
