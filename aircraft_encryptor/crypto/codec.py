"""
AES-256-CBC codec for aircraft configuration containers.

- AES-256 in CBC mode with PKCS#7 padding.
- Container layout: [16 bytes IV][ciphertext], read by the simulator-side
  decryptor (OpenSSL EVP_aes_256_cbc with default padding).
"""

import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding

from aircraft_encryptor.core.settings import (
    AES_KEY,
    AES_KEY_SIZE,
    IV_SIZE,
    BLOCK_SIZE,
    MIN_CONTAINER_SIZE,
)
from aircraft_encryptor.crypto.errors import CipherFailure, FormatError, PaddingError


def _new_cipher(key: bytes, iv: bytes) -> Cipher:
    if len(key) != AES_KEY_SIZE:
        raise CipherFailure(f"AES key must be {AES_KEY_SIZE} bytes, got {len(key)}")

    try:
        return Cipher(algorithms.AES(key), modes.CBC(iv))
    except ValueError as e:
        raise CipherFailure(f"Failed to initialize AES-256-CBC: {e}") from e


def encrypt(plaintext: bytes, key: bytes = AES_KEY) -> bytes:
    """
    Encrypts plaintext under a fresh random IV.

    Args:
        plaintext: Data of any length, empty included.
        key: 32-byte AES key. Defaults to the embedded key.

    Returns:
        IV + ciphertext. Length is 16 + 16 * ceil((len(plaintext) + 1) / 16).
    """
    iv = os.urandom(IV_SIZE)
    encryptor = _new_cipher(key, iv).encryptor()

    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    ciphertext = encryptor.update(padded) + encryptor.finalize()

    return iv + ciphertext


def decrypt(container: bytes, key: bytes = AES_KEY) -> bytes:
    """
    Decrypts an IV-prefixed container and strips its padding.

    Raises:
        FormatError: container shorter than IV + 1 byte.
        PaddingError: ciphertext not block aligned, or bad padding
            (corrupted data or wrong key).
    """
    if len(container) < MIN_CONTAINER_SIZE:
        raise FormatError("encrypted data too short")

    iv = container[:IV_SIZE]
    ciphertext = container[IV_SIZE:]

    if len(ciphertext) % BLOCK_SIZE:
        raise PaddingError(
            f"ciphertext length {len(ciphertext)} is not a multiple of {BLOCK_SIZE}"
        )

    decryptor = _new_cipher(key, iv).decryptor()

    try:
        padded = decryptor.update(ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
        return unpadder.update(padded) + unpadder.finalize()

    except ValueError as e:
        raise PaddingError("Decryption failed (wrong key or corrupted data)") from e
