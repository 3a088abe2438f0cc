"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        root_dir: Absolute path of the collection root.
        query: Absolute path of the folder to look up.
        show_tree: If True, render the whole catalog as a tree.
        show_stats: If True, print per-category file counts.
        debug: If True, enable debug logging.
    """

    root_dir: Path = field(default_factory=Path.cwd)
    query: Path = field(default_factory=Path.cwd)
    show_tree: bool = False
    show_stats: bool = False
    debug: bool = False


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='mediacat',
        description="""
        Catalogs a movie collection directory and resolves a folder
        inside it.
        """
    )

    parser.add_argument(
        'root',
        help="path to the movie collection (relative or absolute)"
    )

    parser.add_argument(
        'query',
        help="folder inside the collection (relative to the root, or absolute)"
    )

    parser.add_argument(
        '--tree',
        action='store_true',
        help="display the full catalog as a tree"
    )

    parser.add_argument(
        '--stats',
        action='store_true',
        help="display file counts per category"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug mode"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    A relative root is resolved against the working directory, a relative
    query against the root.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    root_dir = Path(namespace.root).absolute()
    query = Path(namespace.query)
    if not query.is_absolute():
        query = root_dir / query

    return CLIArgs(
        root_dir=root_dir,
        query=query,
        show_tree=namespace.tree,
        show_stats=namespace.stats,
        debug=namespace.debug,
    )


def validate_root(root_dir: Path) -> bool:
    """
    Check that the collection root is an existing, non-symlink directory.

    Args:
        root_dir: Collection root.

    Returns:
        True if validation passed, False otherwise.
    """
    if root_dir.is_symlink():
        logger.error(f"Root directory {root_dir} is a symlink")
        return False

    if not root_dir.is_dir():
        logger.error(f"Root directory {root_dir} does not exist")
        return False

    return True
