"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for ATS and keyword analysis reports.
"""

from typing import Any, Iterable, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text reports with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 80):
        """
        Args:
            columns: List of Column definitions
            total_width: Total report width for separators
        """
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_subheader(self, title: str, char: str = "-") -> "TableFormatter":
        """Add a title underlined to its own length."""
        self.lines.append(title)
        self.lines.append(char * len(title))
        return self

    def add_table_header(self) -> "TableFormatter":
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts).rstrip())
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

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_bullets(self, items: Iterable[str], empty_text: str = "(none)") -> "TableFormatter":
        """
        Add one "- item" line per item, or a placeholder line when there are none.

        Args:
            items: Lines to bullet
            empty_text: Placeholder when items is empty
        """
        items = list(items)
        if not items:
            self.lines.append(f"  {empty_text}")
        for item in items:
            self.lines.append(f"- {item}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        """Render accumulated lines to string (with trailing newline)."""
        return "\n".join(self.lines) + "\n"


def format_percentage(value: float, decimal_places: int = 2) -> str:
    """
    Format a percentage value.

    Args:
        value: Percentage (already multiplied by 100)
        decimal_places: Number of decimal places

    Returns:
        Formatted percentage string (e.g., "2.50%")
    """
    return f"{value:.{decimal_places}f}%"


def format_score(value: float) -> str:
    """
    Format a 0-100 score for display, dropping a trailing ".0".

    Example:
        >>> format_score(50.0)
        '50'
        >>> format_score(33.333333)
        '33.3'
    """
    rounded = round(value, 1)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.1f}"
