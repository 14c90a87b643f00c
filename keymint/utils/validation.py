"""Validation helpers for generation parameters."""

from typing import Union

from ..errors import (
    InvalidKeySizeError,
    InvalidLengthError,
    InvalidSymbolsError,
)
from ..models.key_pair import KeySize

MIN_PASSWORD_LENGTH = 1
MAX_PASSWORD_LENGTH = 4096


def validate_length(length: int) -> int:
    """Check a password length against the supported range."""
    if (
        isinstance(length, bool)
        or not isinstance(length, int)
        or not MIN_PASSWORD_LENGTH <= length <= MAX_PASSWORD_LENGTH
    ):
        raise InvalidLengthError(
            f"Invalid length. Valid range is {MIN_PASSWORD_LENGTH} "
            f"to {MAX_PASSWORD_LENGTH}."
        )
    return length


def validate_symbols(symbols: str) -> str:
    """Check that a symbol set has something to draw from."""
    if not symbols:
        raise InvalidSymbolsError("Symbol set cannot be empty")
    return symbols


def validate_key_size(key_size: Union[int, KeySize]) -> KeySize:
    """Coerce a key size into the closed ``KeySize`` enumeration."""
    try:
        return KeySize(key_size)
    except ValueError as e:
        allowed = ", ".join(str(size.value) for size in KeySize)
        raise InvalidKeySizeError(
            f"RSA key size must be one of {allowed}", original_error=e
        ) from e
