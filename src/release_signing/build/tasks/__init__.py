"""
Release signing tasks package.

Modules are collected by the package __init__.py using Collection.from_module().
"""

import logging
import sys

from release_signing.build.config.logging import bootstrap_logging


def setup_logging(debug=False):
    """Set up logging configuration based on debug flag."""
    bootstrap_logging()
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)
        logging.getLogger('release_signing').setLevel(logging.DEBUG)
        print("🐛 Debug logging enabled", file=sys.stderr)
