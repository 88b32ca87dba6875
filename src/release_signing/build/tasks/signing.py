"""
Release signing tasks.

Check key.properties before handing off to Gradle, and write a template for it.
"""

import sys
import logging
from pathlib import Path
from invoke import task

from release_signing.build.config.app_config import load_app_config, DEFAULT_APP_CONFIG
from release_signing.build.config.loading import exists, load_signing_credentials
from release_signing.build.config.models import SigningCredentials
from release_signing.build.config.properties import dump_properties
from release_signing.build.config.variants import verify_keystore
from . import setup_logging
from .decorators import config_errors

logger = logging.getLogger(__name__)

TEMPLATE_COMMENTS = [
    "Release signing configuration. Do not commit this file.",
    "storeFile is relative to the app module directory.",
]


@task(help={
    'properties': "Path to key.properties (default: from android.yaml)",
    'project_dir': "App module directory that relative paths resolve against",
    'debug': "Enable debug logging",
})
@config_errors
def check(ctx, properties=None, project_dir=None, debug=False):
    """
    Verify that release signing credentials and the keystore are usable.

    Outputs:
        stderr: Redacted credential summary
    """
    setup_logging(debug)
    base_dir = Path(project_dir) if project_dir else Path.cwd()
    if properties is None:
        properties = load_app_config(base_dir / DEFAULT_APP_CONFIG).key_properties
    properties_path = Path(properties)
    if not properties_path.is_absolute():
        properties_path = base_dir / properties_path

    credentials = load_signing_credentials(properties_path)
    store_path = verify_keystore(credentials, base_dir)

    print("✅ Release signing configuration is valid", file=sys.stderr)
    for key, value in credentials.redacted().items():
        print(f"   {key:14} {value}", file=sys.stderr)
    print(f"📍 Keystore: {store_path}", file=sys.stderr)
    return credentials


@task(help={
    'path': "Where to write the template (default: key.properties)",
    'force': "Overwrite an existing file",
})
def template(ctx, path="key.properties", force=False):
    """Write a key.properties template with the four required keys."""
    target = Path(path)
    if exists(target) and not force:
        print(f"❌ {target} already exists, use --force to overwrite", file=sys.stderr)
        sys.exit(1)

    # Blank passwords make signing.check fail until they are filled in
    placeholders = {key: "" for key in SigningCredentials.REQUIRED_KEYS}
    placeholders['keyAlias'] = "upload"
    placeholders['storeFile'] = "upload-keystore.jks"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dump_properties(placeholders, comments=TEMPLATE_COMMENTS), encoding='utf-8')
    logger.debug(f"Wrote signing template to {target}")
    print(f"📝 Wrote {target}, fill in the values and run: invoke signing.check", file=sys.stderr)
