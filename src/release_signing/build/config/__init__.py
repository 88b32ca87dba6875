"""
Signing and build configuration for release builds.
"""

from .app_config import load_app_config
from .exceptions import (
    ConfigException,
    MissingKeyError,
    MalformedPropertiesError,
    ReleaseSigningRequiredError,
    InvalidVariantError,
    KeystoreNotFoundError,
    AppConfigError,
)
from .loading import exists, load, resolve, load_signing_credentials
from .models import SigningCredentials, BuildVariantConfig, AndroidAppConfig, AndroidBuildConfig
from .properties import parse_properties, dump_properties
from .variants import configure_build_types, load_build_config, verify_keystore


__all__ = [
    'ConfigException',
    'MissingKeyError',
    'MalformedPropertiesError',
    'ReleaseSigningRequiredError',
    'InvalidVariantError',
    'KeystoreNotFoundError',
    'AppConfigError',
    'SigningCredentials',
    'BuildVariantConfig',
    'AndroidAppConfig',
    'AndroidBuildConfig',
    'exists',
    'load',
    'resolve',
    'load_signing_credentials',
    'load_app_config',
    'parse_properties',
    'dump_properties',
    'configure_build_types',
    'load_build_config',
    'verify_keystore',
]
