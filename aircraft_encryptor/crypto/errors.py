"""
Error hierarchy for the encryptor.

Every failure is terminal for a single run; the CLI maps them to exit code 1.
"""


class EncryptorError(Exception):
    """Base class for all encryptor failures."""


class UsageError(EncryptorError):
    """Required command-line argument missing or malformed."""


class IOFailure(EncryptorError, OSError):
    """Input file unreadable or output path unwritable."""


class FormatError(EncryptorError, ValueError):
    """Container is structurally invalid (shorter than IV + 1 byte)."""


class CipherFailure(EncryptorError):
    """The AES primitive could not be set up or rejected the data."""


class PaddingError(CipherFailure, ValueError):
    """Ciphertext is not block aligned or its padding is malformed.

    Usually means the container is corrupted or was made with another key.
    """


class ConfigError(EncryptorError, ValueError):
    """config.json is not valid JSON or not an object of string suffixes."""
