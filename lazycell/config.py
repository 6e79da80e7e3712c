"""lazycell configuration

Settings are read from environment variables at import time,
and can be changed at runtime with the set_* functions.
"""

import os
import logging

from .core.status import ConfigurationError

logger = logging.getLogger(__name__)

_true_values = ("1", "true", "yes", "on")
_false_values = ("0", "false", "no", "off")


def _parse_bool(envname, default):
    value = os.environ.get(envname)
    if value is None:
        return default
    v = value.strip().lower()
    if v in _true_values:
        return True
    if v in _false_values:
        return False
    raise ConfigurationError(
        f"environment variable {envname} must be a boolean, not '{value}'"
    )


# Keep a visited set during an invalidation pass,
#  so that a cell reachable along several paths is released only once.
deduplicate_invalidation: bool = _parse_bool(
    "LAZYCELL_DEDUPLICATE_INVALIDATION", False
)

# Install numpy arrays as read-only views
freeze_arrays: bool = _parse_bool("LAZYCELL_FREEZE_ARRAYS", True)


def set_deduplicate_invalidation(flag):
    """Use a per-pass visited set when propagating invalidation.
    This only saves redundant release() calls in diamond-shaped graphs."""
    global deduplicate_invalidation
    if not isinstance(flag, bool):
        raise ConfigurationError(type(flag))
    deduplicate_invalidation = flag
    logger.debug("deduplicate_invalidation: %s", flag)


def set_freeze_arrays(flag):
    """Make numpy arrays read-only when they are stored in a cell"""
    global freeze_arrays
    if not isinstance(flag, bool):
        raise ConfigurationError(type(flag))
    freeze_arrays = flag
    logger.debug("freeze_arrays: %s", flag)
