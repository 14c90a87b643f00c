"""Pydantic schemas for options and wire formats."""

from .options import KeyPairOptions, PasswordOptions
from .random_org import (
    RandomOrgError,
    RandomOrgParams,
    RandomOrgRequest,
    RandomOrgResponse,
    RandomOrgResult,
)

__all__ = [
    "PasswordOptions",
    "KeyPairOptions",
    "RandomOrgParams",
    "RandomOrgRequest",
    "RandomOrgResponse",
    "RandomOrgResult",
    "RandomOrgError",
]
