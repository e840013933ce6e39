"""Custom exceptions for date-facades"""

from typing import Optional


class DateFacadeError(Exception):
    """Base exception for all date-facades errors."""
    pass


class UnsupportedUnitError(DateFacadeError, ValueError):
    """Exception raised when a unit is unknown or not valid for an operation."""

    def __init__(self, operation: str, unit: object, message: Optional[str] = None):
        self.operation = operation
        self.unit = unit
        self.message = message

        error_msg = f"Unit {unit!r} is not supported for '{operation}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class InvalidBoundsError(DateFacadeError, ValueError):
    """Exception raised for an unknown range inclusivity specifier."""

    def __init__(self, bounds: str):
        self.bounds = bounds
        super().__init__(
            f"Invalid bounds {bounds!r}, expected one of '()', '[]', '[)' or '(]'"
        )


class UnknownFormatError(DateFacadeError, KeyError):
    """Exception raised when a named format does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown format '{self.name}'"
