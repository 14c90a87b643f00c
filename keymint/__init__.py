"""keymint - local and true-random password generation plus RSA key pairs."""

__version__ = "0.1.0"
__author__ = "keymint Team"
__description__ = (
    "Credential generation: CSPRNG and random.org passwords, RSA key pairs"
)

from .errors import (  # noqa: E402
    CredentialError,
    InvalidKeySizeError,
    InvalidLengthError,
    InvalidSymbolsError,
    KeyGenerationError,
    MalformedResponseError,
    NetworkFailureError,
    ServiceError,
)
from .keys import CredentialKeys, gen_secure_random_password  # noqa: E402
from .models.key_pair import KeySize, RSAKeyPair  # noqa: E402
from .services.listeners import KeyPairListener, PasswordListener  # noqa: E402

__all__ = [
    "CredentialKeys",
    "gen_secure_random_password",
    "KeySize",
    "RSAKeyPair",
    "PasswordListener",
    "KeyPairListener",
    "CredentialError",
    "InvalidLengthError",
    "InvalidSymbolsError",
    "InvalidKeySizeError",
    "NetworkFailureError",
    "ServiceError",
    "MalformedResponseError",
    "KeyGenerationError",
]
