from pathlib import Path

import pytest

from aircraft_encryptor.core import settings
from aircraft_encryptor.core.config_manager import DEFAULT_CONFIG
from aircraft_encryptor.crypto import codec, decryption, encryption
from aircraft_encryptor.crypto.errors import ConfigError, FormatError, IOFailure, PaddingError


def test_encrypt_file_default_output(plane_xml):
    out = encryption.encrypt_file(plane_xml)

    assert out == plane_xml.with_name("plane.bin")
    assert codec.decrypt(out.read_bytes()) == plane_xml.read_bytes()


def test_encrypt_file_explicit_output(plane_xml, tmp_path):
    target = tmp_path / "out.dat"

    assert encryption.encrypt_file(plane_xml, target) == target
    assert codec.decrypt(target.read_bytes()) == plane_xml.read_bytes()


def test_encrypt_empty_file(tmp_path):
    src = tmp_path / "empty.xml"
    src.write_bytes(b"")

    out = encryption.encrypt_file(src)

    assert len(out.read_bytes()) == 32
    assert codec.decrypt(out.read_bytes()) == b""


@pytest.mark.parametrize("name, expected", [
    ("plane.xml", "plane.bin"),
    ("dir/plane.xml", "dir/plane.bin"),
    ("plane.cfg", "plane.cfg.bin"),
    ("plane.XML", "plane.XML.bin"),
    ("plane.xml.bak", "plane.xml.bak.bin"),
])
def test_encryption_default_output_path(name, expected):
    assert encryption.default_output_path(name, DEFAULT_CONFIG) == Path(expected)


@pytest.mark.parametrize("name, expected", [
    ("plane.bin", "plane.xml"),
    ("plane.xml.enc", "plane.xml"),
    ("plane.dat", "plane.dat.xml"),
])
def test_decryption_default_output_path(name, expected):
    assert decryption.default_output_path(name, DEFAULT_CONFIG) == Path(expected)


def test_default_output_path_follows_config():
    config = dict(DEFAULT_CONFIG, encrypted_suffix=".xbin")
    assert encryption.default_output_path("plane.xml", config) == Path("plane.xbin")


def test_encrypt_missing_input(tmp_path):
    with pytest.raises(IOFailure):
        encryption.encrypt_file(tmp_path / "missing.xml")

    assert not (tmp_path / "missing.bin").exists()


def test_encrypt_unwritable_output(plane_xml, tmp_path):
    with pytest.raises(IOFailure):
        encryption.encrypt_file(plane_xml, tmp_path / "no-such-dir" / "plane.bin")


def test_io_failure_is_os_error(tmp_path):
    with pytest.raises(OSError):
        encryption.encrypt_file(tmp_path / "missing.xml")


def test_failure_goes_to_error_log(tmp_path):
    with pytest.raises(IOFailure):
        encryption.encrypt_file(tmp_path / "ghost.xml")

    error_log = Path(settings.LOG_DIR) / "error" / "error.log"
    assert "FAIL encrypt" in error_log.read_text(encoding="utf-8")
    assert "ghost.xml" in error_log.read_text(encoding="utf-8")


def test_success_goes_to_encryption_log(plane_xml):
    encryption.encrypt_file(plane_xml)

    log = Path(settings.LOG_DIR) / "crypto" / "encryption.log"
    assert "SUCCESS | plane.xml" in log.read_text(encoding="utf-8")


def test_decrypt_file_round_trip(plane_xml, tmp_path):
    container = encryption.encrypt_file(plane_xml, tmp_path / "plane.bin")
    restored = decryption.decrypt_file(container, tmp_path / "restored.xml")

    assert restored.read_bytes() == plane_xml.read_bytes()


def test_decrypt_file_default_output(tmp_path):
    container = tmp_path / "c172.bin"
    container.write_bytes(codec.encrypt(b"<fdm_config/>"))

    out = decryption.decrypt_file(container)

    assert out == tmp_path / "c172.xml"
    assert out.read_bytes() == b"<fdm_config/>"


def test_decrypt_file_too_short(tmp_path):
    container = tmp_path / "short.bin"
    container.write_bytes(b"\x00" * 16)

    with pytest.raises(FormatError):
        decryption.decrypt_file(container)

    assert not (tmp_path / "short.xml").exists()


def test_decrypt_file_corrupted(plane_xml, tmp_path):
    container = encryption.encrypt_file(plane_xml)
    data = container.read_bytes()
    container.write_bytes(data[:-3])

    with pytest.raises(PaddingError):
        decryption.decrypt_file(container, tmp_path / "out.xml")


def test_read_encrypted_file(tmp_path):
    path = tmp_path / "a.bin"
    path.write_bytes(b"\x01\x02\x03")

    assert decryption.read_encrypted_file(path) == b"\x01\x02\x03"


def test_read_encrypted_file_missing(tmp_path):
    with pytest.raises(IOFailure):
        decryption.read_encrypted_file(tmp_path / "nope.bin")


def test_get_encrypted_path(plane_xml):
    assert decryption.get_encrypted_path(plane_xml) is None

    sibling = plane_xml.with_name("plane.xml.enc")
    encryption.encrypt_file(plane_xml, sibling)

    assert decryption.get_encrypted_path(plane_xml) == sibling
    assert codec.decrypt(decryption.read_encrypted_file(sibling)) == plane_xml.read_bytes()


def test_bad_config_is_logged_as_failure(plane_xml, tmp_path, monkeypatch):
    config_file = tmp_path / "config.json"
    config_file.write_text("[]", encoding="utf-8")
    monkeypatch.setattr(settings, "CONFIG_FILE", config_file)

    with pytest.raises(ConfigError):
        encryption.encrypt_file(plane_xml)

    error_log = Path(settings.LOG_DIR) / "error" / "error.log"
    assert f"FAIL encrypt | {plane_xml}" in error_log.read_text(encoding="utf-8")
    assert not plane_xml.with_name("plane.bin").exists()


def test_bad_config_fails_decrypt(tmp_path, monkeypatch):
    config_file = tmp_path / "config.json"
    config_file.write_text("{broken", encoding="utf-8")
    monkeypatch.setattr(settings, "CONFIG_FILE", config_file)

    container = tmp_path / "c172.bin"
    container.write_bytes(codec.encrypt(b"<fdm_config/>"))

    with pytest.raises(ConfigError):
        decryption.decrypt_file(container)

    error_log = Path(settings.LOG_DIR) / "error" / "error.log"
    assert f"FAIL decrypt | {container}" in error_log.read_text(encoding="utf-8")
