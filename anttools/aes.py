"""AES encryption in CBC mode (PKCS#5 padding) and CFB mode."""

from __future__ import annotations

import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16


def _pad(data: bytes) -> bytes:
    padding = BLOCK_SIZE - len(data) % BLOCK_SIZE
    return data + bytes([padding]) * padding


def _unpad(data: bytes) -> bytes:
    if not data:
        raise ValueError("cannot remove padding from empty data")
    padding = data[-1]
    if padding > len(data):
        raise ValueError("invalid padding")
    return data[: len(data) - padding]


def encrypt_cbc(data: bytes, key: bytes) -> bytes:
    """Pad ``data`` and encrypt it in CBC mode; the first block of the key is the IV.

    The key must be 16, 24 or 32 bytes long.
    """
    algorithm = algorithms.AES(key)
    encryptor = Cipher(algorithm, modes.CBC(key[:BLOCK_SIZE])).encryptor()
    return encryptor.update(_pad(data)) + encryptor.finalize()


def decrypt_cbc(encrypted: bytes, key: bytes) -> bytes:
    """Reverse :func:`encrypt_cbc`."""
    algorithm = algorithms.AES(key)
    if not encrypted or len(encrypted) % BLOCK_SIZE:
        raise ValueError("input not full blocks")
    decryptor = Cipher(algorithm, modes.CBC(key[:BLOCK_SIZE])).decryptor()
    return _unpad(decryptor.update(encrypted) + decryptor.finalize())


def encrypt_cfb(data: bytes, key: bytes) -> bytes:
    """Encrypt in CFB mode with a random IV, which is prepended to the result."""
    algorithm = algorithms.AES(key)
    iv = os.urandom(BLOCK_SIZE)
    encryptor = Cipher(algorithm, modes.CFB(iv)).encryptor()
    return iv + encryptor.update(data) + encryptor.finalize()


def decrypt_cfb(encrypted: bytes, key: bytes) -> bytes:
    """Reverse :func:`encrypt_cfb`."""
    algorithm = algorithms.AES(key)
    if len(encrypted) < BLOCK_SIZE:
        raise ValueError("ciphertext too short")
    iv, body = encrypted[:BLOCK_SIZE], encrypted[BLOCK_SIZE:]
    decryptor = Cipher(algorithm, modes.CFB(iv)).decryptor()
    return decryptor.update(body) + decryptor.finalize()