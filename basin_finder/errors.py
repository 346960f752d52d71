# errors.py
from typing import Optional


class BasinFinderError(Exception):
    """Base class for failures surfaced by the basin analysis."""


class MalformedInputError(BasinFinderError, ValueError):
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({where})"
        super().__init__(message)
        self.line = line
        self.column = column


class InsufficientBasinsError(BasinFinderError):
    def __init__(self, found: int, required: int):
        super().__init__(f"need at least {required} basins to rank, found {found}")
        self.found = found
        self.required = required
