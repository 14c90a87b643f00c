"""Cryptographically secure randomness shared by the generators."""

import secrets
import string
from threading import Lock
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

STANDARD_SYMBOLS = (
    string.digits
    + string.ascii_uppercase
    + string.ascii_lowercase
    + "!@#$%^&*()_+-=[]{}|;:,.<>?/~"
)


class SecureRandomSource:
    """Thread-safe handle on the operating system CSPRNG."""

    def __init__(self, rng: Optional[secrets.SystemRandom] = None):
        self._rng = rng or secrets.SystemRandom()
        self._lock = Lock()

    def randbelow(self, upper: int) -> int:
        """Return a uniformly distributed integer in ``[0, upper)``."""
        if upper < 1:
            raise ValueError("Upper bound must be positive")
        with self._lock:
            return self._rng.randrange(upper)

    def choice(self, population: Sequence[T]) -> T:
        return population[self.randbelow(len(population))]


_default_source: Optional[SecureRandomSource] = None
_default_source_lock = Lock()


def default_random_source() -> SecureRandomSource:
    """Get the process-wide random source, creating it on first use."""
    global _default_source
    with _default_source_lock:
        if _default_source is None:
            _default_source = SecureRandomSource()
        return _default_source
