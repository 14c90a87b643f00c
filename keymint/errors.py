"""Exception taxonomy for credential generation."""

from datetime import datetime, timezone
from typing import Optional


class CredentialError(Exception):
    """Base exception for credential generation errors."""

    error_code = "credential_error"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class InvalidLengthError(CredentialError):
    """Requested password length is outside the supported range."""

    error_code = "invalid_length"


class InvalidSymbolsError(CredentialError):
    """Symbol set to draw passwords from is unusable."""

    error_code = "invalid_symbols"


class InvalidKeySizeError(CredentialError):
    """Requested RSA key size is not one of the supported sizes."""

    error_code = "invalid_key_size"


class NetworkFailureError(CredentialError):
    """The entropy service could not be reached."""

    error_code = "network_failure"


class ServiceError(CredentialError):
    """The entropy service answered with an error status or error payload."""

    error_code = "service_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message, original_error=original_error)
        self.status_code = status_code
        self.body = body


class MalformedResponseError(CredentialError):
    """The entropy service answered 200 with an empty or unreadable body."""

    error_code = "malformed_response"


class KeyGenerationError(CredentialError):
    """The asymmetric primitive failed to produce a key pair."""

    error_code = "key_generation_failed"
