"""
Configuration Display Task

Shows the resolved build configuration with diagnostic information.
"""

import sys
import yaml
from invoke import task

from release_signing.build.config.app_config import DEFAULT_APP_CONFIG
from release_signing.build.config.variants import load_build_config, RELEASE
from . import setup_logging
from .decorators import config_errors


@task(help={
    'config': "Path to android.yaml",
    'project_dir': "App module directory that relative paths resolve against",
    'debug': "Enable debug logging",
})
@config_errors
def show_config(ctx, config=DEFAULT_APP_CONFIG, project_dir=None, debug=False):
    """
    Show the resolved android build configuration.

    Outputs:
        stdout: YAML configuration (parseable, passwords redacted)
        stderr: Diagnostic information
    """
    setup_logging(debug)
    print(f"🔍 Loading build configuration from {config}", file=sys.stderr)

    build_config = load_build_config(config, project_dir)
    release = build_config.variants[RELEASE]

    print("✅ Configuration loaded successfully", file=sys.stderr)
    print(f"📦 Application ID: {build_config.app.application_id}", file=sys.stderr)
    print(f"🔑 Release key alias: {release.signing.key_alias}", file=sys.stderr)
    print(f"🗜️  Minify: {release.minify_enabled}, shrink resources: {release.shrink_resources}", file=sys.stderr)

    yaml.dump(build_config.to_dict(), sys.stdout, default_flow_style=False, sort_keys=True)
