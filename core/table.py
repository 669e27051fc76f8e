"""Plain column alignment for styled terminal text.

Cells are ``rich.text.Text`` values: the characters and their styling are kept
apart, so measuring a cell never has to look at escape sequences.
"""

from rich.cells import cell_len
from rich.text import Text

COLUMN_SEPARATOR = "  "

Cell = Text | str


def as_text(cell: Cell) -> Text:
    """Coerce a cell to Text, decoding any ANSI escapes in plain strings."""
    if isinstance(cell, Text):
        return cell
    return Text.from_ansi(cell) if "\x1b" in cell else Text(cell)


def visible_width(cell: Cell) -> int:
    """Number of terminal columns a cell occupies once printed.

    Styling never contributes: ``Text("abc", style="red")``, ``"\\x1b[31mabc\\x1b[0m"``
    and ``"abc"`` all measure 3.
    """
    return cell_len(as_text(cell).plain)


def column_widths(rows: list[list[Cell]]) -> list[int]:
    widths: list[int] = []
    for row in rows:
        for index, cell in enumerate(row):
            width = visible_width(cell)
            if index == len(widths):
                widths.append(width)
            elif width > widths[index]:
                widths[index] = width
    return widths


def render_table(rows: list[list[Cell]], separator: str = COLUMN_SEPARATOR) -> list[Text]:
    """Align rows into left-justified columns.

    Args:
        rows: Table rows; rows may have fewer cells than the widest row
        separator: Text placed between columns

    Returns:
        One styled line per input row, trailing padding removed
    """
    widths = column_widths(rows)
    lines = []
    for row in rows:
        line = Text()
        for index, cell in enumerate(row):
            if index:
                line.append(separator)
            text = as_text(cell)
            line.append_text(text)
            line.append(" " * (widths[index] - visible_width(text)))
        line.rstrip()
        lines.append(line)
    return lines
