"""
Handles configuration for applications talking to MCP342x converters.

This module is responsible for:
- Configuring logging (coloredlogs on the root logger, level taken from LOG_LEVEL).
- Providing I2C settings (bus number, slave address, buffer length policy) from
  environment variables.
"""

import logging
import os

import coloredlogs

from mcp342x.codec import address

# ── Logging Configuration ──────────────────────────────────────────────────
# This logger is for messages originating from the config.py module itself.
module_logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "mcp342x"

_TRUTHY = ("1", "true", "yes", "on")

# Valid 7-bit I2C addresses
_ADDRESS_RANGE = range(0x00, 0x80)


def configure_logger(level: int | str | None = None, package_only: bool = False):
    """
    Installs a coloredlogs console handler and returns the logger it was installed on.

    `level` overrides LOG_LEVEL. With `package_only`, only the "mcp342x" logger is
    configured and the root logger of the host application is left untouched.
    """
    target_logger = logging.getLogger(PACKAGE_LOGGER) if package_only else logging.getLogger()

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, int):
        log_level_int = level
    else:
        log_level_str = level.upper()
        log_level_int = getattr(logging, log_level_str, None)
        if not isinstance(log_level_int, int):
            module_logger.warning(f"Invalid LOG_LEVEL '{log_level_str}'. Defaulting to INFO.")
            log_level_int = logging.INFO

    log_format = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"

    # Handlers filter on their own level, the logger itself lets everything through.
    target_logger.setLevel(logging.DEBUG)

    for handler in list(target_logger.handlers):
        target_logger.removeHandler(handler)

    if package_only:
        # records must not reach the host application's root handlers twice
        target_logger.propagate = False

    coloredlogs.install(
        level=log_level_int,
        fmt=log_format,
        logger=target_logger,
        reconfigure=True,
    )

    return target_logger


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


# ── I2C Configuration ──────────────────────────────────────────────────────
def get_i2c_config():
    """
    Retrieves I2C settings from environment variables.

    The slave address is MCP342X_ADDRESS when set (decimal or 0x-prefixed hex) and
    within 0x00-0x7F, otherwise it is computed from the MCP342X_A0, MCP342X_A1 and MCP342X_A2 pin flags.

    Returns:
        dict: A dictionary containing:
              - 'bus': The I2C bus number (e.g., 1 for /dev/i2c-1).
              - 'address': The 7-bit slave address.
              - 'strict_buffers': Whether short read buffers raise instead of being zero-filled.
    """
    slave_address = address(
        _env_flag("MCP342X_A0"),
        _env_flag("MCP342X_A1"),
        _env_flag("MCP342X_A2"),
    )
    address_override = os.getenv("MCP342X_ADDRESS")
    if address_override:
        try:
            override = int(address_override, 0)
        except ValueError:
            override = None
        if override in _ADDRESS_RANGE:
            slave_address = override
        else:
            module_logger.warning(
                f"Invalid MCP342X_ADDRESS '{address_override}'. "
                f"Using address from pins: 0x{slave_address:02X}"
            )

    return {
        "bus": int(os.getenv("MCP342X_I2C_BUS", "1")),
        "address": slave_address,
        "strict_buffers": _env_flag("MCP342X_STRICT_BUFFERS"),
    }
