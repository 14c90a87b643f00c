"""Audit vocabulary for credential generation events."""

from enum import Enum


class AuditAction(Enum):
    """Enumeration of auditable actions."""

    GENERATE_LOCAL_PASSWORD = "generate_local_password"
    GENERATE_REMOTE_PASSWORD = "generate_remote_password"
    GENERATE_KEY_PAIR = "generate_key_pair"


class AuditResult(Enum):
    """Enumeration of audit results."""

    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"
