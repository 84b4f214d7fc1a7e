"""Configuration utilities for dashup.

The helpers themselves take all of their settings as arguments. The only
environment-driven setting is the console log level used by
`dashup.logging.config_console_handler`.
"""

import logging
import os

from dashup.errors import InvalidLogLevelError

LOG_LEVEL_ENVVAR = "DASHUP_LOG_LEVEL"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING


def get_log_level() -> int:
    """Get the console log level from the environment.

    Returns:
        The numeric logging level named by `DASHUP_LOG_LEVEL` (case-insensitive),
        or WARNING when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable does not name a logging level.
    """
    if not (name := os.environ.get(LOG_LEVEL_ENVVAR, "").strip()):
        return DEFAULT_LOG_LEVEL
    if not isinstance(level := getattr(logging, name.upper(), None), int):
        raise InvalidLogLevelError(name)
    return level
