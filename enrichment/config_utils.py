"""
Environment configuration helpers.

Numeric settings are read once at import time; a malformed value falls back
to the default with a warning instead of breaking the import.
"""

import os


def env_number(name: str, default, cast=float):
    """
    Read a numeric environment variable.

    Examples:
        >>> env_number('FETCH_TIMEOUT', 30, int)   # unset
        30
    """
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        print(f"Invalid {name}={raw!r}, using default {default}")
        return default
