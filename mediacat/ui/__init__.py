"""User interface components."""

from mediacat.ui.console import ConsoleUI, console
from mediacat.ui.display import (
    format_file_count,
    describe_folder,
    build_tree,
    display_tree,
    get_category_stats,
    display_statistics,
)

__all__ = [
    "ConsoleUI",
    "console",
    "format_file_count",
    "describe_folder",
    "build_tree",
    "display_tree",
    "get_category_stats",
    "display_statistics",
]
