"""Asynchronous RSA key pair generation."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Union

from cryptography.hazmat.primitives.asymmetric import rsa

from ..errors import KeyGenerationError
from ..models.audit_log import AuditAction, AuditResult
from ..models.key_pair import KeySize, RSAKeyPair
from ..schemas.options import KeyPairOptions
from .audit_logger import StructuredAuditLogger, get_audit_logger
from .listeners import BackgroundWorker, KeyPairListener, notify_listener

logger = logging.getLogger(__name__)

RSA_PUBLIC_EXPONENT = 65537


class KeyPairGenerator:
    """Generates RSA key pairs on a background thread pool."""

    def __init__(
        self,
        executor: Optional[ThreadPoolExecutor] = None,
        max_workers: int = 4,
        audit_logger: Optional[StructuredAuditLogger] = None,
    ):
        self.worker = BackgroundWorker(
            executor=executor,
            max_workers=max_workers,
            thread_name_prefix="keymint-rsa",
        )
        self.audit_logger = audit_logger or get_audit_logger()

    def generate_async(
        self,
        key_size: Union[int, KeySize] = KeySize.RSA_4096,
        listener: Optional[KeyPairListener] = None,
    ) -> Future:
        """
        Generate an RSA key pair without blocking the caller.

        Args:
            key_size: 2048 or 4096, defaults to 4096
            listener: Optional listener notified with the outcome

        Returns:
            Future resolving to an ``RSAKeyPair`` or a ``KeyGenerationError``

        Raises:
            InvalidKeySizeError: If key_size is not a supported size
        """
        options = KeyPairOptions(key_size=key_size)

        future = self.worker.submit(self._generate, options)
        if listener is not None:
            notify_listener(future, listener)
        return future

    def generate(self, key_size: Union[int, KeySize] = KeySize.RSA_4096) -> RSAKeyPair:
        """Generate an RSA key pair, blocking until it is ready."""
        return self.generate_async(key_size).result()

    def _generate(self, options: KeyPairOptions) -> RSAKeyPair:
        key_size = int(options.key_size)
        details = {"key_size": key_size}
        logger.debug(f"Generating {key_size}-bit RSA key pair")

        try:
            private_key = rsa.generate_private_key(
                public_exponent=RSA_PUBLIC_EXPONENT, key_size=key_size
            )
        except Exception as e:
            error = KeyGenerationError(
                f"Failed to generate {key_size}-bit RSA key pair: {str(e)}",
                original_error=e,
            )
            logger.error(error.message)
            self.audit_logger.log_failure(
                AuditAction.GENERATE_KEY_PAIR, error, details=details
            )
            raise error from e

        self.audit_logger.log_generation_event(
            action=AuditAction.GENERATE_KEY_PAIR,
            result=AuditResult.SUCCESS,
            details=details,
        )
        return RSAKeyPair.from_private_key(private_key)

    def close(self) -> None:
        self.worker.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
