"""Exception hierarchy for ttygrid."""

from __future__ import annotations


class TTYGridError(Exception):
    """Base exception for all ttygrid errors.

    Attributes:
        message: Human readable description of the failure.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(TTYGridError):
    """Raised when grid configuration values are invalid."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class RowArityMismatchError(TTYGridError):
    """Raised when a row does not have exactly one value per header.

    Attributes:
        expected: Number of headers in the grid.
        actual: Number of values supplied for the row.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"content items must equal the number of headers ({actual} != {expected})")
        self.expected = expected
        self.actual = actual


class MissingColumnError(TTYGridError):
    """Raised when a line has no item for a registered column.

    Unreachable through ``TTYGrid.add_line``; surfaces inconsistent lines
    handed to the width mapper directly.
    """

    def __init__(self, column_index: int, line_index: int) -> None:
        super().__init__(
            f"could not find column {column_index} in line {line_index}"
        )
        self.column_index = column_index
        self.line_index = line_index


class TerminalTooSmallError(TTYGridError):
    """Raised when not even one column fits the width budget.

    Attributes:
        width: The width budget that was supplied.
        required: Display width of the narrowest column.
    """

    def __init__(self, width: int, required: int | None = None) -> None:
        message = f"your terminal is too small (width {width}"
        if required is not None:
            message += f", need at least {required}"
        super().__init__(message + ")")
        self.width = width
        self.required = required
