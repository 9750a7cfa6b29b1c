"""
Plain-text report formatting for the command line.

Fixed-width tables for investor rankings and segment scores, plus small
number formatters.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters (longer values are truncated)
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def _fit(self, text: str) -> str:
        if len(text) <= self.width:
            return text
        return text[: max(self.width - 1, 0)] + "…"

    def format_header(self) -> str:
        return f"{self._fit(self.name):{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{self._fit(str(value)):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 100):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add a title framed by '=' rules."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_ticket_range(min_ticket: int, max_ticket: int) -> str:
    """
    Format a ticket-size range with thousands separators.

    Example:
        >>> format_ticket_range(100_000, 600_000)
        '$100,000–$600,000'
    """
    return f"${min_ticket:,}–${max_ticket:,}"
