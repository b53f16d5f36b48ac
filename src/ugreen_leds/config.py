"""Environment-based configuration and logging setup.

The tool reads no configuration files; the few tunables come from
environment variables:

* ``UGREEN_LEDS_LOG_LEVEL``: root log level (default ``WARNING``).
* ``UGREEN_LEDS_DEBUG``: truthy value forces DEBUG logging.
* ``UGREEN_LEDS_CONTROLLER``: only try the transport with this name.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "UGREEN_LEDS_LOG_LEVEL"
ENV_DEBUG = "UGREEN_LEDS_DEBUG"
ENV_CONTROLLER = "UGREEN_LEDS_CONTROLLER"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def get_env_str(name: str, default: str | None = None) -> str | None:
    """Get a stripped environment variable, treating blank as unset."""
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def get_env_bool(name: str, default: bool) -> bool:
    """Get boolean environment variable.

    Args:
        name: Environment variable name
        default: Default value if not found or not understood

    Returns:
        Boolean value from environment or default
    """
    raw = get_env_str(name)
    if raw is None:
        return default

    lowered = raw.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False

    logger.warning(
        "Invalid boolean value for %s: '%s'. Using default: %s",
        name,
        raw,
        default,
    )
    return default


def get_log_level(verbose: bool = False) -> int:
    """Resolve the effective log level from flags and environment."""
    if verbose or get_env_bool(ENV_DEBUG, False):
        return logging.DEBUG

    name = (get_env_str(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL) or "").upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level

    logger.warning(
        "Invalid log level for %s: '%s'. Using default: %s",
        ENV_LOG_LEVEL,
        name,
        DEFAULT_LOG_LEVEL,
    )
    return logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Install a stderr handler unless the host application already did."""
    level = get_log_level(verbose)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("ugreen_leds").setLevel(level)


def get_preferred_controller() -> str | None:
    """Return the transport name forced through the environment, if any."""
    return get_env_str(ENV_CONTROLLER)
