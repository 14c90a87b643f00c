"""Listener interfaces and the executor plumbing behind async generation."""

import logging
from abc import ABC, abstractmethod
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from ..models.key_pair import RSAKeyPair

logger = logging.getLogger(__name__)


class PasswordListener(ABC):
    """Receives the outcome of an asynchronous password generation."""

    @abstractmethod
    def on_generated(self, password: str) -> None:
        pass

    @abstractmethod
    def on_failure(self, message: str, cause: BaseException) -> None:
        pass


class KeyPairListener(ABC):
    """Receives the outcome of an asynchronous key pair generation."""

    @abstractmethod
    def on_generated(self, key_pair: RSAKeyPair) -> None:
        pass

    @abstractmethod
    def on_failure(self, message: str, cause: BaseException) -> None:
        pass


def notify_listener(future: Future, listener: Any) -> Future:
    """Route the single outcome of ``future`` to exactly one listener method.

    If the future is already done the listener is called immediately on the
    calling thread, otherwise on whichever thread completes the future.
    """

    def _deliver(done: Future) -> None:
        if done.cancelled():
            listener.on_failure("Generation cancelled", CancelledError())
            return

        error = done.exception()
        if error is None:
            listener.on_generated(done.result())
        else:
            listener.on_failure(getattr(error, "message", str(error)), error)

    future.add_done_callback(_deliver)
    return future


def failed_future(error: BaseException) -> Future:
    """Build a future that is already resolved with ``error``."""
    future: Future = Future()
    future.set_exception(error)
    return future


class BackgroundWorker:
    """Owns or borrows the thread pool that async generators dispatch to."""

    def __init__(
        self,
        executor: Optional[ThreadPoolExecutor] = None,
        max_workers: int = 4,
        thread_name_prefix: str = "keymint",
    ):
        self._executor = executor
        self._owns_executor = executor is None
        self.max_workers = max_workers
        self.thread_name_prefix = thread_name_prefix

    @property
    def executor(self) -> ThreadPoolExecutor:
        """Lazy initialization of the thread pool."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix=self.thread_name_prefix,
            )
        return self._executor

    def submit(self, fn: Callable[..., Any], *args: Any) -> Future:
        return self.executor.submit(fn, *args)

    def close(self, wait: bool = True) -> None:
        """Shut down the pool if this worker created it."""
        if self._owns_executor and self._executor is not None:
            logger.debug(f"Shutting down {self.thread_name_prefix} worker pool")
            self._executor.shutdown(wait=wait)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
