"""Display functions for catalog output."""

from typing import TYPE_CHECKING, Dict, Optional

from rich.markup import escape
from rich.tree import Tree

from mediacat.models.file_type import FILE_CATEGORIES, FileType
from mediacat.models.folder import FolderNode
from mediacat.ui.console import ConsoleUI, console as default_console

if TYPE_CHECKING:
    from mediacat.catalog.collection import Catalog

# Icon and style per category
_FILE_STYLES: Dict[FileType, str] = {
    FileType.MOVIE: "🎬 [green]{}[/green]",
    FileType.SUBTITLE: "💬 [cyan]{}[/cyan]",
    FileType.UNUSUAL: "❓ [yellow]{}[/yellow]",
    FileType.POSSIBLY_JUNK: "🗑️  [dim]{}[/dim]",
}


def format_file_count(count: int) -> str:
    """
    Format file count with proper pluralization.

    Args:
        count: Number of files.

    Returns:
        Formatted string like "5 files" or "1 file".
    """
    return f"{count} file{'s' if count != 1 else ''}"


def describe_folder(folder: FolderNode) -> str:
    """
    One-line summary of a folder record.

    Args:
        folder: Folder to describe.

    Returns:
        Path, depth and non-zero counts, e.g.
        "/movies/a (depth 1): 1 Movie, 1 Folder".
    """
    counts = [
        f"{folder.count(file_type)} {file_type.value}"
        for file_type in FILE_CATEGORIES + (FileType.FOLDER,)
        if folder.count(file_type)
    ]
    summary = ", ".join(counts) if counts else "empty"
    return f"{folder.path} (depth {folder.depth}): {summary}"


def build_tree(folder: FolderNode, max_files_per_folder: Optional[int] = None) -> Tree:
    """
    Build a Rich Tree of a folder and everything below it.

    Args:
        folder: Top folder of the tree.
        max_files_per_folder: Maximum files to show per folder (None for all).

    Returns:
        Rich Tree instance.
    """
    root_tree = Tree(f"📁 [bold cyan]{escape(str(folder.path))}[/bold cyan]")
    # Iterative to stay clear of the recursion limit on deep collections
    pending = [(folder, root_tree)]
    while pending:
        current, node = pending.pop()
        _add_files(current, node, max_files_per_folder)
        for name in sorted(current.folders):
            child = current.folders[name]
            child_node = node.add(
                f"📁 [bold]{escape(name)}[/bold] "
                f"[dim]({format_file_count(sum(child.count(t) for t in FILE_CATEGORIES))})[/dim]"
            )
            pending.append((child, child_node))
    return root_tree


def _add_files(folder: FolderNode, node: Tree, limit: Optional[int]) -> None:
    shown = 0
    total = sum(folder.count(t) for t in FILE_CATEGORIES)
    for file_type in FILE_CATEGORIES:
        for name in sorted(folder.files[file_type]):
            if limit is not None and shown >= limit:
                node.add(f"[dim]... and {total - shown} more files[/dim]")
                return
            node.add(_FILE_STYLES[file_type].format(escape(name)))
            shown += 1


def display_tree(
    folder: FolderNode,
    max_files_per_folder: Optional[int] = None,
    ui: ConsoleUI = default_console
) -> None:
    """Print a folder and its subtree."""
    ui.print(build_tree(folder, max_files_per_folder))


def get_category_stats(catalog: "Catalog") -> Dict[FileType, int]:
    """
    Count catalogued entries by category.

    Args:
        catalog: Catalog to summarize.

    Returns:
        Dict mapping each category (FOLDER included, root excluded) to its count.
    """
    stats: Dict[FileType, int] = {file_type: 0 for file_type in FileType}
    for folder in catalog:
        for file_type in FileType:
            stats[file_type] += folder.count(file_type)
    return stats


def display_statistics(catalog: "Catalog", ui: ConsoleUI = default_console) -> None:
    """
    Display per-category statistics of a catalog.

    Args:
        catalog: Catalog to summarize.
        ui: Console to print to.
    """
    ui.rule("[bold blue]Catalog Statistics[/bold blue]")
    table = ui.create_table("By Category", ["Category", "Count"], numeric=["Count"])
    for file_type, count in get_category_stats(catalog).items():
        table.add_row(file_type.value, str(count))
    ui.print_table(table)
