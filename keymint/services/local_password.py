"""Local password generation backed by the operating system CSPRNG."""

import logging
from typing import Optional, Sequence

from ..errors import CredentialError
from ..models.audit_log import AuditAction, AuditResult
from ..schemas.options import PasswordOptions
from ..utils.crypto import (
    STANDARD_SYMBOLS,
    SecureRandomSource,
    default_random_source,
)
from .audit_logger import StructuredAuditLogger, get_audit_logger

logger = logging.getLogger(__name__)


class LocalPasswordGenerator:
    """Synchronous password generator drawing symbols from a CSPRNG."""

    def __init__(
        self,
        random_source: Optional[SecureRandomSource] = None,
        audit_logger: Optional[StructuredAuditLogger] = None,
    ):
        self.random_source = random_source or default_random_source()
        self.audit_logger = audit_logger or get_audit_logger()

    def generate(self, length: int, symbols: Optional[Sequence[str]] = None) -> str:
        """
        Generate a password of ``length`` symbols.

        Args:
            length: Number of symbols, 1 to 4096
            symbols: Symbols to draw from, defaults to ``STANDARD_SYMBOLS``

        Returns:
            The generated password

        Raises:
            InvalidLengthError: If length is out of range
            InvalidSymbolsError: If the symbol set is empty
        """
        try:
            options = PasswordOptions(
                length=length,
                symbols=STANDARD_SYMBOLS if symbols is None else symbols,
            )
        except CredentialError as e:
            self.audit_logger.log_failure(
                AuditAction.GENERATE_LOCAL_PASSWORD, e, details={"length": length}
            )
            raise

        return self.generate_from(options)

    def generate_from(self, options: PasswordOptions) -> str:
        """Generate a password from already validated options."""
        symbols = options.symbols
        password = "".join(
            self.random_source.choice(symbols) for _ in range(options.length)
        )

        logger.debug(
            f"Generated local password of length {options.length} "
            f"from {len(symbols)} symbols"
        )
        self.audit_logger.log_generation_event(
            action=AuditAction.GENERATE_LOCAL_PASSWORD,
            result=AuditResult.SUCCESS,
            details={"length": options.length, "symbol_count": len(symbols)},
        )
        return password
