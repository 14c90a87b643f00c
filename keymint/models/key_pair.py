"""Key pair model wrapping the RSA primitive's output."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


class KeySize(IntEnum):
    """Enumeration of supported RSA modulus sizes."""

    RSA_2048 = 2048
    RSA_4096 = 4096


@dataclass(frozen=True)
class RSAKeyPair:
    """Public/private RSA key pair as produced by ``cryptography``."""

    private_key: rsa.RSAPrivateKey = field(repr=False)
    public_key: rsa.RSAPublicKey = field(repr=False)

    @classmethod
    def from_private_key(cls, private_key: rsa.RSAPrivateKey) -> "RSAKeyPair":
        return cls(private_key=private_key, public_key=private_key.public_key())

    @property
    def key_size(self) -> int:
        return self.private_key.key_size

    def private_pem(self) -> str:
        """Serialize the private key as unencrypted PKCS8 PEM."""
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("utf-8")

    def public_pem(self) -> str:
        """Serialize the public key as SubjectPublicKeyInfo PEM."""
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("utf-8")

    def public_openssh(self) -> str:
        """Serialize the public key in OpenSSH ``authorized_keys`` format."""
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.OpenSSH,
            format=serialization.PublicFormat.OpenSSH,
        ).decode("utf-8")

    def to_dict(self, include_public: bool = True) -> Dict[str, str]:
        result = {"private_key": self.private_pem()}
        if include_public:
            result["public_key"] = self.public_pem()
        return result

    def __repr__(self) -> str:
        return f"<RSAKeyPair {self.key_size} bits>"
