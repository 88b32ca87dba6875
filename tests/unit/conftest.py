"""
Unit test fixtures: a throwaway app module directory with signing files.
"""

import pytest

VALID_PROPERTIES = """\
# Release signing
keyAlias=upload
keyPassword=key-secret
storeFile=upload-keystore.jks
storePassword=store-secret
"""


@pytest.fixture
def project_dir(tmp_path):
    """An app module directory containing nothing yet."""
    return tmp_path


@pytest.fixture
def write_properties(project_dir):
    """Write key.properties (or another file) into the project directory."""
    def _write(content=VALID_PROPERTIES, name="key.properties"):
        path = project_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def keystore(project_dir):
    """An (empty) keystore file matching storeFile in VALID_PROPERTIES."""
    path = project_dir / "upload-keystore.jks"
    path.write_bytes(b"\xfe\xed\xfe\xed")
    return path
