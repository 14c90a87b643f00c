"""Value types produced and audited by keymint."""

from .audit_log import AuditAction, AuditResult
from .key_pair import KeySize, RSAKeyPair

__all__ = [
    "KeySize",
    "RSAKeyPair",
    "AuditAction",
    "AuditResult",
]
