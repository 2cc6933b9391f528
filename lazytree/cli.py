"""Command-line front door for lazytree.

Parses CLI options, resolves the target directory, and builds the node forest.
Then dispatches into the interactive viewer or prints the tree.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config
from .highlight import DEFAULT_STYLE
from .model import TreeModel
from .providers.fs import build_path_forest
from .runtime import print_tree, run_tree
from .symbols import available_symbol_names, symbols_by_name
from .theme import available_theme_names, depth_style_for, resolve_theme

LOG_ENV_VAR = "LAZYTREE_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _non_negative_int(value: str) -> int:
    """argparse type for integer values that may be zero."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def configure_logging(log_file: str | None) -> None:
    """Send DEBUG logs to ``log_file``; without one, logging stays silent."""
    if not log_file:
        return
    logging.basicConfig(filename=log_file, level=logging.DEBUG, format=LOG_FORMAT)


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a directory as a collapsible tree in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to show. Defaults to current directory.")
    parser.add_argument(
        "--symbols",
        choices=available_symbol_names(),
        default=None,
        help="Connector symbol set (default: saved preference or normal).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--show-hidden", action="store_true", help="Include dotfiles.")
    parser.add_argument("--depth", type=_positive_int, default=None, help="Maximum directory depth to list.")
    parser.add_argument(
        "--preview",
        type=_non_negative_int,
        default=0,
        metavar="LINES",
        help="Show the first LINES lines of each file under its name.",
    )
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name for previews.")
    parser.add_argument("--nopager", action="store_true", help="Print the tree and exit.")
    parser.add_argument("--max-cols", type=_positive_int, default=None, help="Column width for --nopager output.")
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Save the chosen --symbols/--theme/--show-hidden as defaults.",
    )
    parser.add_argument("--log-file", default=None, help=f"Write debug logs here (or set ${LOG_ENV_VAR}).")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazytree on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_file or os.environ.get(LOG_ENV_VAR))

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    if args.remember:
        if args.symbols:
            config.save_symbols_name(args.symbols)
        if args.theme:
            config.save_theme_name(args.theme)
        config.save_show_hidden(args.show_hidden)

    interactive = not args.nopager and _is_interactive()
    no_color = args.no_color or (not interactive and not sys.stdout.isatty())
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=no_color)
    symbols = symbols_by_name(args.symbols or config.load_symbols_name())
    forest = build_path_forest(
        path.resolve(),
        show_hidden=args.show_hidden or config.load_show_hidden(),
        preview_lines=args.preview,
        style=None if no_color else args.style,
        max_depth=args.depth,
    )
    model = TreeModel(forest, symbols=symbols, theme=theme, depth_style=depth_style_for(theme))

    if not interactive:
        print_tree(model, sys.stdout, width=args.max_cols)
        return
    run_tree(model)


if __name__ == "__main__":
    main()
