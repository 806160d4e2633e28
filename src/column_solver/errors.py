"""Exception types raised by the column solver."""


class ColumnSolverError(Exception):
    """Base class for all column solver errors."""


class InputFormatError(ColumnSolverError):
    """Raised when a prompt receives text that is not a number."""


class DomainError(ColumnSolverError):
    """Raised when a numeric value is non-positive or non-finite."""


class InvalidSelectionError(ColumnSolverError):
    """Raised for an out-of-range menu or cross-section choice."""
