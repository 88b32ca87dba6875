"""Task namespace for release-signing.

An app's own tasks.py can expose these with:

    from release_signing.tasks import ns
"""

from release_signing import namespace as ns
from release_signing.build.tasks.signing import check, template
from release_signing.build.tasks.config_show import show_config

__all__ = ['ns', 'check', 'template', 'show_config']
