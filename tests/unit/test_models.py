"""Tests for signing and app configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from release_signing.build.config.models import (
    REDACTED,
    AndroidAppConfig,
    BuildVariantConfig,
    SigningCredentials,
)


@pytest.fixture
def credentials():
    return SigningCredentials(
        keyAlias="upload",
        keyPassword="key-secret",
        storeFile="upload-keystore.jks",
        storePassword="store-secret",
    )


def test_credentials_accept_python_names():
    creds = SigningCredentials(key_alias="a", key_password="b", store_file="c", store_password="d")
    assert creds.store_file == "c"


def test_credentials_are_read_only(credentials):
    with pytest.raises(ValidationError):
        credentials.key_alias = "other"


def test_credentials_reject_empty_fields():
    with pytest.raises(ValidationError):
        SigningCredentials(keyAlias="", keyPassword="b", storeFile="c", storePassword="d")


def test_store_path_relative_to_module_dir(credentials, tmp_path):
    assert credentials.store_path(tmp_path) == tmp_path / "upload-keystore.jks"


def test_store_path_absolute_is_kept(tmp_path):
    absolute = tmp_path / "keys" / "upload.jks"
    creds = SigningCredentials(keyAlias="a", keyPassword="b", storeFile=str(absolute), storePassword="d")
    assert creds.store_path(Path("/elsewhere")) == absolute


def test_redacted_masks_passwords(credentials):
    assert credentials.redacted() == {
        "keyAlias": "upload",
        "keyPassword": REDACTED,
        "storeFile": "upload-keystore.jks",
        "storePassword": REDACTED,
    }


def test_repr_does_not_leak_passwords(credentials):
    text = repr(credentials) + str(credentials)
    assert "key-secret" not in text
    assert "store-secret" not in text


def test_variant_to_dict_redacts_signing(credentials):
    variant = BuildVariantConfig(name="release", signing=credentials, minify_enabled=True)
    data = variant.to_dict()
    assert data["signing"]["storePassword"] == REDACTED
    assert data["minify_enabled"] is True


def test_app_config_defaults_match_flutter_module():
    config = AndroidAppConfig()
    assert config.namespace == "com.triflash.tri_flash"
    assert config.application_id == "com.triflash.tri_flash"
    assert config.ndk_version == "27.0.12077973"
    assert config.java_version == 11
    assert config.key_properties == "key.properties"
    assert config.release.minify_enabled is True
    assert config.release.shrink_resources is True


def test_app_config_rejects_bad_sdk_order():
    with pytest.raises(ValidationError, match="min_sdk <= target_sdk <= compile_sdk"):
        AndroidAppConfig(min_sdk=30, target_sdk=29, compile_sdk=35)


@pytest.mark.parametrize("name", ["tri_flash", "com..app", "com.1app", "com.tri-flash"])
def test_app_config_rejects_bad_package_names(name):
    with pytest.raises(ValidationError):
        AndroidAppConfig(namespace=name)


def test_app_config_rejects_zero_version_code():
    with pytest.raises(ValidationError):
        AndroidAppConfig(version_code=0)
