"""Command-line front door for lazyfileops.

Parses CLI options, merges them with the config file, and sets up logging.
Then dispatches into the interactive session runtime.
"""

from __future__ import annotations

import argparse
import termios
from pathlib import Path

from .runtime import run_app
from .runtime.config import load_log_level, load_result_delay_seconds, load_theme_name
from .runtime.logs import configure_logging
from .ui_theme import available_theme_names
from .workflow import DEFAULT_RESULT_DELAY_SECONDS


def _positive_float(value: str) -> float:
    """argparse type for positive float values."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be > 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyfileops",
        description="Copy, move, or remove files by browsing and selecting them in the terminal.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to start browsing in. Defaults to current directory.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--result-delay",
        type=_positive_float,
        default=None,
        metavar="SECONDS",
        help=f"Seconds the result stays on screen (default: {DEFAULT_RESULT_DELAY_SECONDS:g}).",
    )
    parser.add_argument("--log-file", default=None, help="Write diagnostic logs to this file.")
    parser.add_argument("--log-level", default=None, help="Log level name (DEBUG, INFO, WARNING, ...).")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run one interactive session.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Exits non-zero only when the terminal cannot be
    driven (for example when stdin is not a TTY).
    """
    args = build_parser().parse_args()

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    try:
        configure_logging(log_file=args.log_file, level=args.log_level, default_level=load_log_level())
    except OSError as exc:
        raise SystemExit(f"Error: cannot open log file: {exc}") from exc
    theme_name = args.theme if args.theme is not None else load_theme_name()
    delay = args.result_delay
    if delay is None:
        delay = load_result_delay_seconds() or DEFAULT_RESULT_DELAY_SECONDS

    try:
        exit_code = run_app(path, theme_name, args.no_color, delay)
    except (termios.error, OSError) as exc:
        raise SystemExit(f"Error: cannot start interactive terminal: {exc}") from exc
    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
