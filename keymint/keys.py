"""Caller-facing entry point tying the three generators together."""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional, Sequence, Union

import requests

from .config import Config
from .models.key_pair import KeySize
from .services.audit_logger import StructuredAuditLogger, get_audit_logger
from .services.key_pair import KeyPairGenerator
from .services.listeners import KeyPairListener, PasswordListener
from .services.local_password import LocalPasswordGenerator
from .services.random_org import RandomOrgClient, RemotePasswordGenerator
from .utils.crypto import SecureRandomSource, default_random_source


class CredentialKeys:
    """Generates passwords and RSA key pairs.

    All instances share nothing but the random source handed to them. Async
    operations run on one thread pool owned by this object; call ``close``
    (or use it as a context manager) to release it.
    """

    def __init__(
        self,
        app_config=None,
        random_source: Optional[SecureRandomSource] = None,
        session: Optional[requests.Session] = None,
        audit_logger: Optional[StructuredAuditLogger] = None,
    ):
        self.config = app_config or Config
        self.random_source = random_source or default_random_source()
        self.audit_logger = audit_logger or get_audit_logger()
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.MAX_WORKERS, thread_name_prefix="keymint"
        )

        self.local_generator = LocalPasswordGenerator(
            random_source=self.random_source, audit_logger=self.audit_logger
        )
        self.remote_generator = RemotePasswordGenerator(
            client=RandomOrgClient(
                url=self.config.RANDOM_ORG_URL,
                timeout=self.config.RANDOM_ORG_TIMEOUT,
                session=session,
            ),
            api_key=self.config.RANDOM_ORG_API_KEY,
            executor=self._executor,
            audit_logger=self.audit_logger,
        )
        self.key_pair_generator = KeyPairGenerator(
            executor=self._executor, audit_logger=self.audit_logger
        )

    def gen_secure_random_password(
        self, length: int, symbols: Optional[Sequence[str]] = None
    ) -> str:
        """Generate a password locally with the shared CSPRNG."""
        return self.local_generator.generate(length, symbols)

    def gen_random_org_password(
        self,
        length: int,
        api_key: Optional[str] = None,
        listener: Optional[PasswordListener] = None,
    ) -> Future:
        """Generate a true-random hex password through random.org."""
        return self.remote_generator.generate_async(length, api_key, listener)

    def gen_rsa_key_pair(
        self,
        listener: Optional[KeyPairListener] = None,
        key_size: Union[int, KeySize, None] = None,
    ) -> Future:
        """Generate an RSA key pair, 4096 bits unless configured otherwise."""
        if key_size is None:
            key_size = self.config.DEFAULT_KEY_SIZE
        return self.key_pair_generator.generate_async(key_size, listener)

    def close(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
        self.remote_generator.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


# Convenience functions for common use cases
def gen_secure_random_password(
    length: int, symbols: Optional[Sequence[str]] = None
) -> str:
    """Generate a password with the process-wide random source."""
    return LocalPasswordGenerator().generate(length, symbols)
