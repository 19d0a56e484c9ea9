import os
import sys
import logging
from pathlib import Path

# ============================================================
# RUNTIME MODE
# ============================================================

def is_frozen() -> bool:
    """
    True when running as PyInstaller-built executable.
    """
    return getattr(sys, "frozen", False)


# ============================================================
# BASE DIRECTORIES (DEV vs BUILT APP)
# ============================================================

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def is_source_checkout() -> bool:
    """
    True when running from the repository rather than an installed copy.
    """
    return (PROJECT_ROOT / "pyproject.toml").exists()


def default_app_home() -> Path:
    if is_source_checkout() and not is_frozen():
        # ===== DEV MODE =====
        return PROJECT_ROOT

    # ===== BUILT APP (.exe) / INSTALLED PACKAGE =====
    # site-packages may be read-only
    return Path.home() / ".aircraft_encryptor"


APP_HOME = Path(os.environ.get("AIRCRAFT_ENCRYPTOR_HOME") or default_app_home())
LOG_DIR  = Path(os.environ.get("AIRCRAFT_ENCRYPTOR_LOG_DIR", APP_HOME / "logs"))
CONFIG_FILE = Path(os.environ.get("AIRCRAFT_ENCRYPTOR_CONFIG", APP_HOME / "config.json"))

LOG_LEVEL = logging.getLevelName(
    os.environ.get("AIRCRAFT_ENCRYPTOR_LOG_LEVEL", "WARNING").upper()
)
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.WARNING


# ============================================================
# ENCRYPTION / DECRYPTION PARAMETERS
# ============================================================

# AES-256-CBC, PKCS#7 padding
AES_KEY_SIZE = 32        # 256-bit
IV_SIZE      = 16        # one AES block
BLOCK_SIZE   = 16        # AES block, bytes

# smallest container the decryptor accepts: IV + 1 byte
MIN_CONTAINER_SIZE = IV_SIZE + 1

# Pre-shared with the simulator-side decryptor. Must stay byte-identical there.
AES_KEY = bytes([
    0xc7, 0xa1, 0x38, 0x80, 0x09, 0xf7, 0x5e, 0xb7,
    0x83, 0xe6, 0x5c, 0x4b, 0x4c, 0x77, 0x15, 0x85,
    0xc2, 0x22, 0xc0, 0x19, 0xa3, 0xfc, 0x0f, 0x30,
    0xe8, 0x82, 0x45, 0x68, 0xb9, 0x47, 0x31, 0xed,
])


# ============================================================
# FILE NAMING
# ============================================================

SOURCE_SUFFIX    = ".xml"
ENCRYPTED_SUFFIX = ".bin"
DECRYPTED_SUFFIX = ".xml"

# sibling the simulator probes for before loading a plain XML file
LOOKUP_SUFFIX    = ".enc"


# ============================================================
# SELF-TEST
# ============================================================

if __name__ == "__main__":
    print("Frozen      :", is_frozen())
    print("Checkout    :", is_source_checkout())
    print("APP_HOME    :", APP_HOME)
    print("LOG_DIR     :", LOG_DIR)
    print("CONFIG_FILE :", CONFIG_FILE)
    print("LOG_LEVEL   :", logging.getLevelName(LOG_LEVEL))
