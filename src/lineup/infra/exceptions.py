"""
Custom exceptions for LineUp operations.

This module provides custom exception classes for the errors raised by the
admin and player paths. Projection (engine) errors live in
``lineup.scheduling.exceptions``.
"""


class LineupError(Exception):
    """Base exception for all LineUp errors."""

    pass


class ValidationError(LineupError):
    """Raised when input validation fails."""

    pass


class NotFoundError(LineupError):
    """Raised when a screen or event cannot be resolved."""

    pass


class ConflictError(LineupError):
    """Raised when a uniqueness rule is violated (e.g. duplicate screen slug)."""

    pass
