"""Credential generation services."""

from .audit_logger import StructuredAuditLogger, get_audit_logger
from .key_pair import KeyPairGenerator
from .listeners import KeyPairListener, PasswordListener
from .local_password import LocalPasswordGenerator
from .random_org import RandomOrgClient, RemotePasswordGenerator

__all__ = [
    "LocalPasswordGenerator",
    "RemotePasswordGenerator",
    "RandomOrgClient",
    "KeyPairGenerator",
    "PasswordListener",
    "KeyPairListener",
    "StructuredAuditLogger",
    "get_audit_logger",
]
