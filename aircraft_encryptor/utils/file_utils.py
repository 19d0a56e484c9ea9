from pathlib import Path

from aircraft_encryptor.crypto.errors import IOFailure


def read_bytes(path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise IOFailure(f"Cannot read {path}: {e.strerror or e}") from e


def write_bytes(path, data: bytes):
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise IOFailure(f"Cannot write {path}: {e.strerror or e}") from e


def swap_suffix(path, old: str, new: str) -> Path:
    """
    "plane.xml", ".xml", ".bin" -> "plane.bin"
    "plane.cfg", ".xml", ".bin" -> "plane.cfg.bin"
    """
    name = str(path)
    if old and name.endswith(old):
        return Path(name[: -len(old)] + new)
    return Path(name + new)
