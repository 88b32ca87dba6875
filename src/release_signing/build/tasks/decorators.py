"""
Task decorators for configuration error handling.
"""
import functools
import sys

from release_signing.build.config.exceptions import ConfigException


def config_errors(func):
    """Decorator that prints a ConfigException's guidance and exits 1.

    Other exceptions bubble up unchanged.
    """
    @functools.wraps(func)
    def wrapper(ctx, *args, **kwargs):
        try:
            return func(ctx, *args, **kwargs)
        except ConfigException as e:
            print(e.guidance, file=sys.stderr)
            sys.exit(1)
    return wrapper
