"""Pydantic schemas for generation options."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import InvalidSymbolsError
from ..models.key_pair import KeySize
from ..utils.crypto import STANDARD_SYMBOLS
from ..utils.validation import validate_key_size, validate_length, validate_symbols


class PasswordOptions(BaseModel):
    """Options for a single password generation."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"length": 24, "symbols": "abcdef0123456789"}},
    )

    length: int = Field(..., description="Number of symbols in the password")
    symbols: str = Field(
        STANDARD_SYMBOLS, description="Symbols the password is drawn from"
    )

    @field_validator("length", mode="before")
    @classmethod
    def check_length(cls, v: Any) -> int:
        return validate_length(v)

    @field_validator("symbols", mode="before")
    @classmethod
    def check_symbols(cls, v: Any) -> str:
        """Accept any sequence of single characters, store it as a string."""
        if v is None:
            return STANDARD_SYMBOLS
        if not isinstance(v, str):
            try:
                v = "".join(v)
            except TypeError as e:
                raise InvalidSymbolsError(
                    "Symbols must be a string or a sequence of strings",
                    original_error=e,
                ) from e
        return validate_symbols(v)


class KeyPairOptions(BaseModel):
    """Options for RSA key pair generation."""

    model_config = ConfigDict(frozen=True)

    key_size: KeySize = Field(KeySize.RSA_4096, description="RSA modulus size")

    @field_validator("key_size", mode="before")
    @classmethod
    def check_key_size(cls, v: Any) -> KeySize:
        return validate_key_size(v)
