"""
security.txt Errors - one exception per way a record can be malformed.

All errors derive from SecurityTxtError, itself a ValueError, so callers
that only care about "bad input" can catch ValueError.
"""

from __future__ import annotations


class SecurityTxtError(ValueError):
    """Base class for every security.txt parse failure."""


# =============================================================================
# Structural errors (markers and token layout)
# =============================================================================

class StartNotFound(SecurityTxtError):
    def __init__(self) -> None:
        super().__init__("security.txt begin marker not found")


class EndNotFound(SecurityTxtError):
    def __init__(self) -> None:
        super().__init__("security.txt end marker not found")


class InvalidSecurityTxtBegin(SecurityTxtError):
    def __init__(self) -> None:
        super().__init__("Buffer does not start with the security.txt begin marker")


class Uneven(SecurityTxtError):
    def __init__(self) -> None:
        super().__init__("Uneven number of fields: field name without a value")


# =============================================================================
# Token errors
# =============================================================================

class InvalidField(SecurityTxtError):
    """A field name is not valid UTF-8."""

    def __init__(self, raw: bytes) -> None:
        self.raw = raw
        super().__init__(f"Invalid field name: {raw!r}")


class InvalidValue(SecurityTxtError):
    """A field value is not valid UTF-8."""

    def __init__(self, raw: bytes, field: str) -> None:
        self.raw = raw
        self.field = field
        super().__init__(f"Invalid value for field '{field}': {raw!r}")


# =============================================================================
# Schema errors
# =============================================================================

class DuplicateField(SecurityTxtError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Duplicate field: {field}")


class MissingField(SecurityTxtError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class UnknownField(SecurityTxtError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unknown field: {field}")


class InvalidContact(SecurityTxtError):
    """A contact is not `type:value` or its type is not recognised."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid contact: {text!r}")
