"""Command-line front door for restorepoint.

Loads a text file into an in-memory buffer, replays a command sequence
through the restore controller, and prints where the cursor ended up.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .buffer import DEFAULT_PAGE_SIZE, EditorSession
from .config import load_settings
from .errors import CommandArgumentError, UnknownCommandError
from .render import DEFAULT_STYLE, render_point_context


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def parse_command_sequence(raw: str) -> list[tuple[str, str | None]]:
    """Split ``"name,name:arg,..."`` into ``(name, arg)`` pairs, skipping blanks."""
    steps: list[tuple[str, str | None]] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        name, sep, arg = token.partition(":")
        steps.append((name.strip(), arg if sep else None))
    return steps


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def replay(session: EditorSession, steps: list[tuple[str, str | None]]) -> None:
    for name, arg in steps:
        session.execute(name, arg)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, replay the command sequence, and print the result."""
    parser = argparse.ArgumentParser(
        description="Replay editor commands on a file and show where point is restored to."
    )
    parser.add_argument("path", help="Text file to load into the buffer.")
    parser.add_argument(
        "--commands",
        default="",
        help="Comma-separated command names; 'name:arg' passes an argument (e.g. self-insert-command:x).",
    )
    parser.add_argument("--cursor", type=_nonnegative_int, default=0, help="Initial point offset.")
    parser.add_argument("--page-size", type=_positive_int, default=DEFAULT_PAGE_SIZE, help="Lines per scroll.")
    parser.add_argument("--context", type=_nonnegative_int, default=2, help="Lines shown around point.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--verbose", action="store_true", help="Log snapshot and restore decisions.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"File not found: {path}")

    session = EditorSession(settings=load_settings(), page_size=args.page_size)
    session.open_buffer(str(path.resolve()), read_text(path), point=args.cursor)
    try:
        replay(session, parse_command_sequence(args.commands))
    except UnknownCommandError as exc:
        raise SystemExit(f"Unknown command: {exc}") from exc
    except CommandArgumentError as exc:
        raise SystemExit(f"Invalid command argument: {exc}") from exc

    buffer = session.buffer
    line, column = buffer.line_col()
    for message in session.messages:
        sys.stdout.write(f"{message}\n")
    sys.stdout.write(f"point {buffer.point} (line {line + 1}, column {column})\n")
    sys.stdout.write(render_point_context(buffer, path, args.context, args.style, args.no_color))


if __name__ == "__main__":
    main()
