"""Typed environment variable lookups."""

import os

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


def env_str(key: str, default: str = "") -> str:
    """Return the variable's value, or default when it is not set."""
    return os.environ.get(key, default)


def env_bool(key: str, default: bool = False) -> bool:
    """Parse a boolean variable; unrecognised values give the default."""
    value = os.environ.get(key)
    if value is None:
        return default

    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default
