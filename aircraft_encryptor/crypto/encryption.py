import time
from pathlib import Path

from aircraft_encryptor.core.config_manager import load_config
from aircraft_encryptor.core.logging_config import encryption_logger, error_logger
from aircraft_encryptor.crypto import codec
from aircraft_encryptor.utils.checksum import sha256_bytes
from aircraft_encryptor.utils.file_utils import read_bytes, write_bytes, swap_suffix


def default_output_path(input_path, config=None) -> Path:
    """plane.xml -> plane.bin, anything else gets .bin appended"""
    config = config or load_config()
    return swap_suffix(input_path, config["source_suffix"], config["encrypted_suffix"])


# ============================================================
# ENCRYPT FILE
# ============================================================
def encrypt_file(input_path, output_path=None) -> Path:
    """
    Encrypt a whole file into an IV-prefixed container.

    Args:
        input_path: Plain file (usually aircraft XML)
        output_path: Container destination; derived from input_path when None

    Returns:
        Path the container was written to
    """
    start = time.perf_counter()
    encryption_logger.info(f"START encrypt | file={input_path}")

    try:
        output_path = Path(output_path) if output_path else default_output_path(input_path)
        plaintext = read_bytes(input_path)
        container = codec.encrypt(plaintext)
        write_bytes(output_path, container)

    except Exception as e:
        error_logger.error(f"FAIL encrypt | {input_path} | {e}", exc_info=True)
        raise

    elapsed = time.perf_counter() - start
    encryption_logger.info(
        f"SUCCESS | {Path(input_path).name} | {len(plaintext)} -> {len(container)} bytes"
        f" | sha256={sha256_bytes(container)} | {elapsed:.3f}s"
    )
    return output_path
