from __future__ import annotations


class BusinessValidationError(Exception):
    """Raised when a request violates a domain rule (e.g. an unknown goal or stack)."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
