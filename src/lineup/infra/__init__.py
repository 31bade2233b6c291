"""
Infrastructure layer for LineUp.

Settings, logging, persistence and the unit-of-work boundary live here.
"""

from .exceptions import ConflictError, LineupError, NotFoundError, ValidationError

__all__ = ["LineupError", "ValidationError", "NotFoundError", "ConflictError"]
