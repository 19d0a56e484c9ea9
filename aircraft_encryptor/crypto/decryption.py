import time
from pathlib import Path

from aircraft_encryptor.core.config_manager import load_config
from aircraft_encryptor.core.settings import LOOKUP_SUFFIX
from aircraft_encryptor.core.logging_config import decryption_logger, error_logger
from aircraft_encryptor.crypto import codec
from aircraft_encryptor.utils.checksum import sha256_bytes
from aircraft_encryptor.utils.file_utils import read_bytes, write_bytes, swap_suffix


# ============================================================
# HELPERS
# ============================================================
def read_encrypted_file(path) -> bytes:
    """Whole container in memory. Raises IOFailure if unreadable."""
    return read_bytes(path)


def get_encrypted_path(path):
    """
    Return the encrypted sibling of a plain XML file, if one exists.

    The simulator looks for "<file>.enc" next to "<file>" and prefers it.
    """
    enc_path = Path(str(path) + LOOKUP_SUFFIX)
    if enc_path.exists():
        return enc_path
    return None


def default_output_path(input_path, config=None) -> Path:
    """
    plane.bin     -> plane.xml
    plane.xml.enc -> plane.xml
    other         -> other.xml
    """
    config = config or load_config()
    name = str(input_path)

    if name.endswith(LOOKUP_SUFFIX):
        return Path(name[: -len(LOOKUP_SUFFIX)])

    return swap_suffix(input_path, config["encrypted_suffix"], config["decrypted_suffix"])


# ============================================================
# DECRYPT FILE
# ============================================================
def decrypt_file(input_path, output_path=None) -> Path:
    start = time.perf_counter()
    decryption_logger.info(f"START decrypt | file={input_path}")

    try:
        output_path = Path(output_path) if output_path else default_output_path(input_path)
        container = read_encrypted_file(input_path)
        plaintext = codec.decrypt(container)
        write_bytes(output_path, plaintext)

    except Exception as e:
        error_logger.error(f"FAIL decrypt | {input_path} | {e}", exc_info=True)
        raise

    elapsed = time.perf_counter() - start
    decryption_logger.info(
        f"Decrypted {Path(input_path).name} | sha256={sha256_bytes(container)}"
        f" | {len(plaintext)} bytes | time={elapsed:.3f}s"
    )
    return output_path
