"""Plain-text table rendering for console reports."""

import textwrap
from dataclasses import dataclass
from typing import List, Optional, Sequence

from forkscan.core.constants import HORIZONTAL_RULE_CHAR


@dataclass(frozen=True)
class Column:
    """Layout of one table column."""

    header: str
    align: str = "left"  # 'left', 'right', 'center'
    width: Optional[int] = None  # None sizes the column to its widest cell
    wrap: bool = False

    def __post_init__(self) -> None:
        if self.align not in ("left", "right", "center"):
            raise ValueError(f"Invalid align: {self.align}")
        if self.wrap and not self.width:
            raise ValueError("A fixed width is required for wrapped columns")

    def split(self, text: str) -> List[str]:
        """Break a cell into display lines."""
        if self.wrap:
            return textwrap.wrap(text, self.width) or [""]
        return text.splitlines() or [""]

    def pad(self, line: str, width: int) -> str:
        if self.align == "right":
            return line.rjust(width)
        if self.align == "center":
            return line.center(width)
        return line.ljust(width)


def render_table(
    columns: Sequence[Column],
    rows: Sequence[Sequence[str]],
    padding_right: int = 1,
    rule_char: str = HORIZONTAL_RULE_CHAR,
) -> str:
    """
    Render rows as a borderless table with a rule beneath the header.

    Cells have no left padding and ``padding_right`` spaces on the right.
    Wrapped cells grow the row height; shorter cells are top-aligned.

    Args:
        columns: Column layouts, one per cell
        rows: Body rows of cell strings (the header row is taken from columns)
        padding_right: Spaces after each cell
        rule_char: Character used for the header rule

    Returns:
        str: Rendered table, one line per display line
    """
    header = [column.header for column in columns]
    split_rows = []
    for row in [header, *rows]:
        if len(row) != len(columns):
            raise ValueError(f"Expected {len(columns)} cells, got {len(row)}")
        split_rows.append([column.split(str(cell)) for column, cell in zip(columns, row)])

    widths = []
    for index, column in enumerate(columns):
        if column.width:
            widths.append(column.width)
        else:
            widths.append(max(len(line) for cells in split_rows for line in cells[index]))

    lines = []
    for row_index, cells in enumerate(split_rows):
        height = max(len(cell) for cell in cells)
        for line_index in range(height):
            parts = []
            for column, width, cell in zip(columns, widths, cells):
                text = cell[line_index] if line_index < len(cell) else ""
                parts.append(column.pad(text, width) + " " * padding_right)
            lines.append("".join(parts).rstrip())
        if row_index == 0:
            lines.append(rule_char * sum(width + padding_right for width in widths))

    return "\n".join(lines)
