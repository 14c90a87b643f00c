"""True-random password generation through the random.org JSON-RPC API."""

import logging
import string
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Any, List, Optional

import requests
from pydantic import ValidationError

from ..config import Config
from ..errors import (
    CredentialError,
    MalformedResponseError,
    NetworkFailureError,
    ServiceError,
)
from ..models.audit_log import AuditAction, AuditResult
from ..schemas.random_org import RandomOrgRequest, RandomOrgResponse
from ..utils.validation import validate_length
from .audit_logger import StructuredAuditLogger, get_audit_logger
from .listeners import (
    BackgroundWorker,
    PasswordListener,
    failed_future,
    notify_listener,
)

logger = logging.getLogger(__name__)

class RandomOrgClient:
    """HTTP transport for the random.org JSON-RPC endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url or Config.RANDOM_ORG_URL
        self.timeout = timeout or Config.RANDOM_ORG_TIMEOUT
        self._session = session
        self._session_lock = Lock()
        self._closed = False
        self._headers = {"content-type": "application/json"}

    @property
    def session(self) -> requests.Session:
        """Lazy initialization of the HTTP session."""
        with self._session_lock:
            if self._closed:
                raise NetworkFailureError("random.org client is closed")
            if self._session is None:
                self._session = requests.Session()
            return self._session

    def invoke(self, request: RandomOrgRequest) -> RandomOrgResponse:
        """
        Send a JSON-RPC request and parse the response.

        Raises:
            NetworkFailureError: If the service cannot be reached
            ServiceError: On a non-200 status or an error member in the body
            MalformedResponseError: If a 200 response has no usable body
        """
        try:
            response = self.session.post(
                self.url,
                json=request.to_payload(),
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkFailureError(
                f"Could not reach random.org: {str(e)}", original_error=e
            ) from e

        if response.status_code != requests.codes.ok:
            raise ServiceError(
                f"Response code {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                "empty or invalid response", original_error=e
            ) from e

        if not body:
            raise MalformedResponseError("empty or invalid response")

        try:
            parsed = RandomOrgResponse.model_validate(body)
        except ValidationError as e:
            raise MalformedResponseError(
                "empty or invalid response", original_error=e
            ) from e

        if parsed.error is not None:
            raise ServiceError(
                parsed.error.message,
                status_code=response.status_code,
                body=response.text,
            )

        if parsed.result is None:
            raise MalformedResponseError("empty or invalid response")

        return parsed

    def close(self) -> None:
        with self._session_lock:
            self._closed = True
            if self._session is not None:
                self._session.close()
                self._session = None


def decode_hex_tokens(tokens: List[Any]) -> str:
    """Join random.org base-16 byte samples into one hex string.

    Each sample contributes exactly two hex digits; surrounding quotes are
    stripped and short samples are zero padded.
    """
    hex_digits = []
    for token in tokens:
        if isinstance(token, bool):
            raise MalformedResponseError(f"Invalid random byte sample: {token!r}")
        if isinstance(token, int):
            if not 0 <= token <= 255:
                raise MalformedResponseError(f"Invalid random byte sample: {token!r}")
            hex_digits.append(format(token, "02x"))
            continue

        text = str(token).replace('"', "").strip()
        if not 1 <= len(text) <= 2 or not all(c in string.hexdigits for c in text):
            raise MalformedResponseError(f"Invalid random byte sample: {token!r}")

        hex_digits.append(text.zfill(2))

    return "".join(hex_digits)


class RemotePasswordGenerator:
    """Asynchronous password generator backed by random.org."""

    def __init__(
        self,
        client: Optional[RandomOrgClient] = None,
        api_key: Optional[str] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        max_workers: int = 4,
        audit_logger: Optional[StructuredAuditLogger] = None,
    ):
        self.client = client or RandomOrgClient()
        self.api_key = api_key
        self.worker = BackgroundWorker(
            executor=executor,
            max_workers=max_workers,
            thread_name_prefix="keymint-random-org",
        )
        self.audit_logger = audit_logger or get_audit_logger()

    def generate_async(
        self,
        length: int,
        api_key: Optional[str] = None,
        listener: Optional[PasswordListener] = None,
    ) -> Future:
        """
        Generate a hex password of ``length`` characters from random.org.

        Validation failures resolve the returned future immediately and make
        no network call. Otherwise the request runs on the worker pool and the
        future resolves with the password or a ``CredentialError``. When a
        listener is given, exactly one of its methods is called once.

        Args:
            length: Number of hex characters, 1 to 4096
            api_key: random.org API key, defaults to the generator's key
            listener: Optional listener notified with the outcome

        Returns:
            Future resolving to the password
        """
        api_key = api_key or self.api_key
        try:
            validate_length(length)
            if not api_key:
                raise CredentialError(
                    "A random.org API key is required", error_code="missing_api_key"
                )
        except CredentialError as e:
            self.audit_logger.log_failure(
                AuditAction.GENERATE_REMOTE_PASSWORD, e, details={"length": length}
            )
            future = failed_future(e)
            if listener is not None:
                notify_listener(future, listener)
            return future

        # Whole bytes only: odd lengths fetch one extra hex digit and drop it.
        requested_length = length + 1 if length % 2 else length

        future = self.worker.submit(self._generate, length, requested_length, api_key)
        if listener is not None:
            notify_listener(future, listener)
        return future

    def _generate(self, length: int, requested_length: int, api_key: str) -> str:
        sample_count = requested_length // 2
        details = {"length": length, "sample_count": sample_count}
        logger.debug(f"Requesting {sample_count} random bytes from random.org")

        try:
            request = RandomOrgRequest.for_samples(api_key, sample_count)
            response = self.client.invoke(request)
            hex_string = decode_hex_tokens(response.result.random.data)
            if len(hex_string) != requested_length:
                raise MalformedResponseError(
                    f"Expected {requested_length} hex characters, "
                    f"received {len(hex_string)}"
                )
        except CredentialError as e:
            logger.error(f"random.org password generation failed: {e.message}")
            self.audit_logger.log_failure(
                AuditAction.GENERATE_REMOTE_PASSWORD, e, details=details
            )
            raise

        self.audit_logger.log_generation_event(
            action=AuditAction.GENERATE_REMOTE_PASSWORD,
            result=AuditResult.SUCCESS,
            details=details,
        )
        return hex_string[:length]

    def close(self) -> None:
        self.worker.close()
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
