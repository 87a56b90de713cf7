"""Process-level settings read from the environment.

polypath has no configuration files. The only inputs are:

- ``POLYPATH_DEBUG``: when truthy, :py:func:`polypath.Path` reports every path kind that parses a string.
- the host operating system, which decides which built-in path kinds recognize unforced input.
"""

import os

DEBUG_ENV_VAR = "POLYPATH_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def debug_enabled() -> bool:
    """Return whether debug dispatch is enabled via the environment.

    >>> os.environ["POLYPATH_DEBUG"] = "yes"
    >>> debug_enabled()
    True

    :returns: True if ``POLYPATH_DEBUG`` holds a truthy value, False otherwise
    """
    value = os.environ.get(DEBUG_ENV_VAR)
    if not value:
        return False

    return value.strip().lower() in _TRUTHY


def is_windows_host() -> bool:
    """Return whether the current process runs on Windows."""
    return os.name == "nt"


def is_posix_host() -> bool:
    """Return whether the current process runs on a POSIX system."""
    return os.name == "posix"
