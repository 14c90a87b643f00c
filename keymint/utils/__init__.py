"""Utility modules for keymint."""

from .crypto import (
    STANDARD_SYMBOLS,
    SecureRandomSource,
    default_random_source,
)
from .validation import (
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    validate_key_size,
    validate_length,
    validate_symbols,
)

__all__ = [
    "STANDARD_SYMBOLS",
    "SecureRandomSource",
    "default_random_source",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "validate_length",
    "validate_symbols",
    "validate_key_size",
]
