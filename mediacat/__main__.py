"""Entry point for the mediacat package.

Smoke-test driver: catalogs a collection and resolves one folder in it.
Run with: python -m mediacat ROOT QUERY
"""

import sys
from typing import List, Optional

from loguru import logger

from mediacat.catalog import Catalog
from mediacat.config import args_to_cli_args, parse_arguments, validate_root
from mediacat.config.settings import LOG_FILE, LOG_RETENTION, LOG_ROTATION
from mediacat.exceptions import InvalidArgumentError
from mediacat.ui import ConsoleUI, describe_folder, display_statistics, display_tree


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level="DEBUG",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        0 on success, 1 for an invalid root, 2 if the query is not catalogued.
    """
    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug)
    console = ConsoleUI()

    if not validate_root(cli_args.root_dir):
        console.print_error(f"Invalid collection root: {cli_args.root_dir}")
        return 1

    try:
        catalog = Catalog(cli_args.root_dir)
    except InvalidArgumentError as e:
        console.print_error(str(e))
        return 1

    console.print(str(catalog.root))

    folder = catalog.open_folder(cli_args.query)
    if folder is None:
        console.print_warning(f"Folder not found in catalog: {cli_args.query}")
    else:
        console.print(describe_folder(folder))

    if cli_args.show_tree:
        display_tree(catalog.root, ui=console)
    if cli_args.show_stats:
        display_statistics(catalog, ui=console)

    return 0 if folder is not None else 2


if __name__ == "__main__":
    sys.exit(main())
