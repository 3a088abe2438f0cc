"""Tests for the mediacat entry point."""

import pytest
from unittest.mock import patch, MagicMock

from mediacat.__main__ import setup_logging, main


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self):
        """Sets up a console sink and a file sink."""
        with patch("mediacat.__main__.logger") as mock_logger:
            setup_logging(debug=False)
            mock_logger.remove.assert_called_once()
            assert mock_logger.add.call_count == 2
            assert mock_logger.add.call_args_list[0].kwargs["level"] == "INFO"

    def test_setup_logging_debug(self):
        """Debug mode lowers the console level."""
        with patch("mediacat.__main__.logger") as mock_logger:
            setup_logging(debug=True)
            assert mock_logger.add.call_args_list[0].kwargs["level"] == "DEBUG"


@pytest.fixture
def console():
    with patch("mediacat.__main__.ConsoleUI") as console_class, \
            patch("mediacat.__main__.setup_logging"):
        yield console_class.return_value


class TestMain:
    """Tests for main function."""

    def test_prints_root_and_folder(self, example_dir, console):
        """Prints the root and the resolved folder."""
        result = main([str(example_dir.root), "a/sub"])

        assert result == 0
        printed = [call.args[0] for call in console.print.call_args_list]
        assert printed[0] == str(example_dir.root)
        assert str(example_dir.root / "a" / "sub") in printed[1]

    def test_absolute_query(self, example_dir, console):
        """Absolute queries are accepted."""
        assert main([str(example_dir.root), str(example_dir.root / "b" / "extras")]) == 0

    def test_query_not_found(self, example_dir, console):
        """Unknown query returns 2 with a warning."""
        result = main([str(example_dir.root), "nope"])

        assert result == 2
        console.print_warning.assert_called_once()

    def test_invalid_root(self, tmp_path, console):
        """Missing root returns 1."""
        result = main([str(tmp_path / "missing"), "a"])

        assert result == 1
        console.print_error.assert_called_once()

    def test_tree_and_stats(self, example_dir, console):
        """--tree and --stats render extra output."""
        with patch("mediacat.__main__.display_tree") as display_tree, \
                patch("mediacat.__main__.display_statistics") as display_statistics:
            main([str(example_dir.root), "a", "--tree", "--stats"])

        display_tree.assert_called_once()
        display_statistics.assert_called_once()
