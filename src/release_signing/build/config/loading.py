"""
Signing configuration loading from key.properties.

Replaces the script-global Properties object of the Gradle build with an
explicit function that takes a path and returns typed credentials or raises.
"""
import logging
from pathlib import Path
from typing import Dict, Mapping, Union

from .exceptions import MalformedPropertiesError, MissingKeyError
from .models import SigningCredentials
from .properties import parse_properties

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def exists(path: PathLike) -> bool:
    """True if the properties file is present on disk right now."""
    return Path(path).is_file()


def load(path: PathLike) -> Dict[str, str]:
    """
    Load a properties file into a dictionary.

    An absent file yields an empty dictionary; the failure is deferred to
    resolve(), which reports the first missing key.

    Args:
        path: Path to the properties file

    Returns:
        Dictionary of key/value pairs

    Raises:
        MalformedPropertiesError: If the file is unreadable, not UTF-8, or has a bad escape
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            text = f.read()
    except FileNotFoundError:
        # Also covers the file disappearing after an exists() check
        logger.debug(f"No properties file at {path}, using empty mapping")
        return {}
    except UnicodeDecodeError as e:
        raise MalformedPropertiesError(f"File is not valid UTF-8: {e}", path=str(path))
    except OSError as e:
        raise MalformedPropertiesError(f"Cannot read file: {e}", path=str(path))

    try:
        properties = parse_properties(text)
    except MalformedPropertiesError as e:
        raise MalformedPropertiesError(str(e), path=str(path), line_number=e.line_number)

    logger.debug(f"Loaded {len(properties)} properties from {path}")
    return properties


def resolve(mapping: Mapping[str, str], path: PathLike = None, file_found: bool = True) -> SigningCredentials:
    """
    Build SigningCredentials from a properties mapping.

    Keys are checked in the order keyAlias, keyPassword, storeFile,
    storePassword; blank values count as missing.

    Args:
        mapping: Properties loaded from key.properties
        path: Source path, used only for error messages
        file_found: Whether the source file existed, used only for error messages

    Raises:
        MissingKeyError: Naming the first absent or blank key
    """
    source = str(path) if path is not None else None
    values = {}
    for key in SigningCredentials.REQUIRED_KEYS:
        value = mapping.get(key)
        if value is None:
            raise MissingKeyError(
                f"Required signing key '{key}' is missing",
                key_name=key, path=source, file_found=file_found,
            )
        if not value.strip():
            raise MissingKeyError(
                f"Required signing key '{key}' is empty",
                key_name=key, path=source, empty=True,
            )
        values[key] = value
    return SigningCredentials(**values)


def log_file_status(path: PathLike) -> bool:
    """Emit the two diagnostic lines about the properties file and return exists(path)."""
    path = Path(path)
    logger.info(f"Checking if {path.name} file exists at: {path.absolute()}")
    found = exists(path)
    if found:
        logger.info(f"{path.name} file found.")
    else:
        logger.info(f"{path.name} file not found.")
    return found


def load_signing_credentials(path: PathLike) -> SigningCredentials:
    """
    Load release signing credentials from a key.properties file.

    Logs whether the file exists, loads it regardless, then resolves the
    required keys. Called once per build invocation.

    Raises:
        MissingKeyError: If a required key is absent or blank (including
            when the file itself is absent)
        MalformedPropertiesError: If the file cannot be parsed
    """
    found = log_file_status(path)
    properties = load(path)
    credentials = resolve(properties, path=path, file_found=found)
    logger.debug(f"Resolved signing credentials for alias '{credentials.key_alias}'")
    return credentials
