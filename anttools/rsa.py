"""RSA PKCS#1 v1.5 encryption with PEM keys and base64 ciphertext."""

from __future__ import annotations

import base64
import re
from dataclasses import dataclass

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey, RSAPublicKey

_PEM_BEGIN = re.compile(rb"-----BEGIN ([^-\r\n]+)-----")


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def _pem_label(data: bytes) -> str | None:
    match = _PEM_BEGIN.search(data)
    return match.group(1).decode("ascii", "replace") if match else None


@dataclass
class Rsa:
    """A pair of PEM keys: a PKIX public key and a PKCS#1 private key."""

    public_key: bytes = b""
    private_key: bytes = b""

    def __post_init__(self) -> None:
        self.public_key = _as_bytes(self.public_key)
        self.private_key = _as_bytes(self.private_key)

    def encrypt(self, data: str | bytes) -> str:
        """Encrypt ``data`` with the public key and return it base64 encoded."""
        if _pem_label(self.public_key) is None:
            raise ValueError("public key error")
        key = serialization.load_pem_public_key(self.public_key)
        if not isinstance(key, RSAPublicKey):
            raise ValueError("public key is not an RSA key")
        encrypted = key.encrypt(_as_bytes(data), padding.PKCS1v15())
        return base64.b64encode(encrypted).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt base64 ``ciphertext`` with the private key."""
        raw = base64.b64decode(ciphertext)
        label = _pem_label(self.private_key)
        if label is None:
            raise ValueError("decryption failed")
        if label != "RSA PRIVATE KEY":
            raise ValueError("private key is not in PKCS #1 form")
        key = serialization.load_pem_private_key(self.private_key, password=None)
        if not isinstance(key, RSAPrivateKey):
            raise ValueError("private key is not an RSA key")
        return key.decrypt(raw, padding.PKCS1v15()).decode("utf-8", "replace")