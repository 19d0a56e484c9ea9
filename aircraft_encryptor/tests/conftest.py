# aircraft_encryptor/tests/conftest.py
import os
import tempfile

import pytest

# settings reads these at import time, so they must be set before any test
# module imports the package
_SANDBOX = tempfile.mkdtemp(prefix="aircraft-encryptor-tests-")
os.environ.setdefault("AIRCRAFT_ENCRYPTOR_HOME", _SANDBOX)
os.environ.setdefault("AIRCRAFT_ENCRYPTOR_LOG_DIR", os.path.join(_SANDBOX, "logs"))
os.environ.setdefault("AIRCRAFT_ENCRYPTOR_CONFIG", os.path.join(_SANDBOX, "config.json"))


@pytest.fixture
def plane_xml(tmp_path):
    path = tmp_path / "plane.xml"
    path.write_bytes(b'<?xml version="1.0"?>\n<fdm_config name="c172"/>\n')
    return path
