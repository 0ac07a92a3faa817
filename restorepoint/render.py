"""Terminal rendering of the lines around a buffer's point."""

from __future__ import annotations

from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .buffer import TextBuffer

DEFAULT_STYLE = "monokai"
CURSOR_MARKER = ">"

_FORMATTERS: dict[str, TerminalFormatter] = {}


def _normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Highlight ``source`` with the lexer Pygments picks for ``path``."""
    try:
        lexer = get_lexer_for_filename(path.name, source, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    return highlight(source, lexer, _formatter_for_style(_normalize_style(style)))


def render_point_context(
    buffer: TextBuffer,
    path: Path,
    context_lines: int = 2,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
) -> str:
    """Render numbered lines around point, marking the point line.

    Lines are highlighted as a whole block so multi-line tokens keep their
    colors before being split back into rows.
    """
    lines = buffer.text.split("\n")
    point_line, _column = buffer.line_col()
    first = max(0, point_line - context_lines)
    last = min(len(lines), point_line + context_lines + 1)

    if no_color:
        rows = lines
    else:
        rows = colorize(buffer.text, path, style).split("\n")
        if len(rows) < len(lines):
            rows.extend("" for _ in range(len(lines) - len(rows)))

    width = len(str(last))
    out: list[str] = []
    for idx in range(first, last):
        marker = CURSOR_MARKER if idx == point_line else " "
        out.append(f"{marker} {idx + 1:>{width}} | {rows[idx]}")
    return "\n".join(out) + "\n"


__all__ = ["DEFAULT_STYLE", "colorize", "render_point_context"]
