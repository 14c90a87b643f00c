"""Structured audit logging for credential generation events."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..models.audit_log import AuditAction, AuditResult


class StructuredAuditLogger:
    """Audit logger that writes generation events to the ``keymint.audit`` log.

    Entries describe what was generated, never the generated value or the
    credentials used to obtain it.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("keymint.audit")

    def log_generation_event(
        self,
        action: AuditAction,
        result: AuditResult,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Log a generation event and return the structured entry."""
        log_entry = {
            "event_type": "credential_generation",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "action": action.value,
            "result": result.value,
            "details": details or {},
            "error_code": error_code,
            "error_message": error_message,
        }

        if result in [AuditResult.FAILURE, AuditResult.ERROR]:
            self.logger.warning(f"GENERATION EVENT: {action.value}", extra=log_entry)
        else:
            self.logger.info(f"GENERATION EVENT: {action.value}", extra=log_entry)

        return log_entry

    def log_failure(
        self,
        action: AuditAction,
        error: Exception,
        details: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Log a failed generation, classifying it by the error's code."""
        error_code = getattr(error, "error_code", None)
        result = AuditResult.FAILURE if error_code else AuditResult.ERROR
        return self.log_generation_event(
            action=action,
            result=result,
            details=details,
            error_code=error_code,
            error_message=str(error),
        )


# Global audit logger instance
audit_logger = StructuredAuditLogger()


def get_audit_logger() -> StructuredAuditLogger:
    """Get the global audit logger instance."""
    return audit_logger
