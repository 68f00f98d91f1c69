"""
Error types raised by the recommendation engine.
"""

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when an input is structurally invalid (missing field, wrong type, unknown enum value)."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        self.message = message or "invalid value"
        super().__init__(f"Invalid input for field '{field}': {self.message}")
