"""
Build type configuration: debug and release variants with release signing.
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .app_config import DEFAULT_APP_CONFIG, load_app_config
from .exceptions import InvalidVariantError, KeystoreNotFoundError, ReleaseSigningRequiredError
from .loading import load_signing_credentials
from .models import AndroidAppConfig, AndroidBuildConfig, BuildVariantConfig, SigningCredentials

logger = logging.getLogger(__name__)

DEBUG = "debug"
RELEASE = "release"


def validate_variant(variant: BuildVariantConfig) -> BuildVariantConfig:
    """
    Check a variant for configuration errors.

    Raises:
        ReleaseSigningRequiredError: If the release variant has no credentials
        InvalidVariantError: If shrink_resources is set without minify_enabled
    """
    if variant.name == RELEASE and variant.signing is None:
        raise ReleaseSigningRequiredError("Release build requires a signing configuration")
    if variant.shrink_resources and not variant.minify_enabled:
        raise InvalidVariantError(
            "shrink_resources requires minify_enabled", variant_name=variant.name)
    return variant


def configure_build_types(app_config: AndroidAppConfig,
                          credentials: Optional[SigningCredentials]) -> Dict[str, BuildVariantConfig]:
    """Build the debug and release variants, attaching the signing config to release."""
    debug = BuildVariantConfig(name=DEBUG, debuggable=True)
    release = BuildVariantConfig(
        name=RELEASE,
        signing=credentials,
        minify_enabled=app_config.release.minify_enabled,
        shrink_resources=app_config.release.shrink_resources,
    )
    return {name: validate_variant(v) for name, v in ((DEBUG, debug), (RELEASE, release))}


def verify_keystore(credentials: SigningCredentials, base_dir: Path = None) -> Path:
    """Return the resolved keystore path, raising KeystoreNotFoundError if it is absent."""
    store_path = credentials.store_path(base_dir)
    if not store_path.is_file():
        raise KeystoreNotFoundError(f"Keystore not found: {store_path}", path=str(store_path))
    return store_path


def load_build_config(config_path: Union[str, Path] = DEFAULT_APP_CONFIG,
                      project_dir: Union[str, Path] = None) -> AndroidBuildConfig:
    """
    Load app config, release credentials and build variants.

    Relative paths (the config file, key_properties) resolve against
    project_dir, which defaults to the current working directory.
    """
    project_dir = Path(project_dir) if project_dir else Path.cwd()
    config_path = Path(config_path)
    if not config_path.is_absolute():
        config_path = project_dir / config_path

    app_config = load_app_config(config_path)
    properties_path = Path(app_config.key_properties)
    if not properties_path.is_absolute():
        properties_path = project_dir / properties_path

    credentials = load_signing_credentials(properties_path)
    variants = configure_build_types(app_config, credentials)
    logger.debug(f"Configured build types: {', '.join(variants)}")
    return AndroidBuildConfig(app=app_config, variants=variants)
