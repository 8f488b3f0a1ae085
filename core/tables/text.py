"""Plain-text rendering of a RenderedTable.

Used by the `show_employees` management command. HTML fragments produced by
column templates are reduced to their text content.
"""

from __future__ import annotations

from typing import Any

from django.utils.html import strip_tags

from .render import RenderedTable
from .schema import Align


def cell_text(display: Any) -> str:
    """Return the plain-text form of a rendered display value."""

    if display is None:
        return ""
    return strip_tags(str(display)).strip()


def render_text_table(table: RenderedTable, *, separator: str = " | ") -> str:
    """Render a table as aligned, fixed-width text lines.

    Args:
        table: Rendered table to print.
        separator: Text placed between columns.

    Returns:
        Header line, rule line, then one line per row, joined by newlines.
    """

    header_texts = [header.text for header in table.headers]
    body = [[cell_text(cell.display) for cell in row.cells] for row in table.rows]

    widths = [len(text) for text in header_texts]
    for texts in body:
        for idx, text in enumerate(texts):
            widths[idx] = max(widths[idx], len(text))

    aligns = [header.align for header in table.headers]
    lines = [
        separator.join(_align(text, width, align) for text, width, align in zip(header_texts, widths, aligns)),
        separator.join("-" * width for width in widths),
    ]
    for texts in body:
        lines.append(separator.join(_align(text, width, align) for text, width, align in zip(texts, widths, aligns)))
    return "\n".join(line.rstrip() for line in lines)


def _align(text: str, width: int, align: Align) -> str:
    if align == "right":
        return text.rjust(width)
    if align == "center":
        return text.center(width)
    return text.ljust(width)
