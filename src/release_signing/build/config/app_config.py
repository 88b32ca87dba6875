"""
App configuration loading utilities.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .exceptions import AppConfigError
from .models import AndroidAppConfig

logger = logging.getLogger(__name__)

DEFAULT_APP_CONFIG = "android.yaml"
ENV_PROPERTIES_FILE = "SIGNING_PROPERTIES_FILE"


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise AppConfigError(f"Invalid YAML: {e}", path=str(path))

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise AppConfigError("Top level must be a mapping", path=str(path))
    # Allow the settings to be nested under an 'android' key
    if set(data) == {'android'}:
        data = data['android'] or {}
        if not isinstance(data, dict):
            raise AppConfigError("'android' must be a mapping", path=str(path))
    return data


def load_app_config(path: Union[str, Path] = DEFAULT_APP_CONFIG) -> AndroidAppConfig:
    """
    Load the android app configuration from a YAML file.

    A missing file yields the defaults. SIGNING_PROPERTIES_FILE, when set,
    overrides key_properties.

    Args:
        path: Path to android.yaml

    Returns:
        AndroidAppConfig instance

    Raises:
        AppConfigError: If the file is not valid YAML or has invalid values
    """
    path = Path(path)
    if path.exists():
        logger.debug(f"Loading app config from {path}")
        data = _read_yaml(path)
    else:
        logger.debug(f"No app config at {path}, using defaults")
        data = {}

    override = os.environ.get(ENV_PROPERTIES_FILE)
    if override:
        logger.debug(f"{ENV_PROPERTIES_FILE} overrides key_properties: {override}")
        data = {**data, 'key_properties': override}

    try:
        return AndroidAppConfig.model_validate(data)
    except ValidationError as e:
        raise AppConfigError(str(e), path=str(path))
