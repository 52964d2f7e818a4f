"""
Unit tests for the configuration module (mcp342x.config).

These tests cover:
- Logger configuration (`configure_logger`):
    - Default log level.
    - Log level overrides via environment variables.
    - Handling of invalid log level settings.
    - Clearing of existing log handlers.
    - Explicit level argument and package-only installation.
- I2C settings (`get_i2c_config`):
    - Default bus, address and buffer policy.
    - Address computed from pin flags.
    - Explicit address override, including unparsable and out-of-range values.
    - Strict buffer policy flag.
"""

import logging
import os
from unittest.mock import MagicMock, call, patch

import pytest

from mcp342x.config import configure_logger, get_i2c_config
from mcp342x.config import module_logger as config_module_logger


@pytest.fixture
def mock_root_logger():
    root_logger = MagicMock(spec=logging.Logger)
    root_logger.handlers = []
    return root_logger


@patch("mcp342x.config.coloredlogs.install")
@patch("mcp342x.config.logging.getLogger")
def test_configure_logger_defaults(mock_get_logger, mock_coloredlogs_install, mock_root_logger):
    """
    Test `configure_logger` with default LOG_LEVEL (INFO). Ensures correct setup of
    root logger and coloredlogs.
    """
    mock_get_logger.return_value = mock_root_logger

    returned_logger = configure_logger()

    mock_get_logger.assert_called_once_with()
    mock_root_logger.setLevel.assert_called_once_with(logging.DEBUG)
    mock_coloredlogs_install.assert_called_once()
    args, kwargs = mock_coloredlogs_install.call_args
    assert kwargs["level"] == logging.INFO
    assert kwargs["logger"] == mock_root_logger
    assert kwargs["reconfigure"] is True
    assert returned_logger == mock_root_logger


@patch("mcp342x.config.coloredlogs.install")
@patch("mcp342x.config.logging.getLogger")
def test_configure_logger_with_env_var_debug(
    mock_get_logger, mock_coloredlogs_install, mock_root_logger
):
    mock_get_logger.return_value = mock_root_logger
    os.environ["LOG_LEVEL"] = "debug"

    configure_logger()

    args, kwargs = mock_coloredlogs_install.call_args
    assert kwargs["level"] == logging.DEBUG


@patch("mcp342x.config.coloredlogs.install")
@patch("mcp342x.config.logging.getLogger")
@patch.object(config_module_logger, "warning")
def test_configure_logger_invalid_env_var(
    mock_config_logger_warning, mock_get_logger, mock_coloredlogs_install, mock_root_logger
):
    """
    Test `configure_logger` handles an invalid LOG_LEVEL, defaulting to INFO and
    logging a warning.
    """
    mock_get_logger.return_value = mock_root_logger
    os.environ["LOG_LEVEL"] = "INVALID_LEVEL"

    configure_logger()

    args, kwargs = mock_coloredlogs_install.call_args
    assert kwargs["level"] == logging.INFO
    mock_config_logger_warning.assert_called_once_with(
        "Invalid LOG_LEVEL 'INVALID_LEVEL'. Defaulting to INFO."
    )


@patch("mcp342x.config.coloredlogs.install")
@patch("mcp342x.config.logging.getLogger")
def test_configure_logger_handler_clearing(
    mock_get_logger, mock_coloredlogs_install, mock_root_logger
):
    mock_handler1 = MagicMock(spec=logging.Handler)
    mock_handler2 = MagicMock(spec=logging.Handler)
    mock_root_logger.handlers = [mock_handler1, mock_handler2]
    mock_get_logger.return_value = mock_root_logger

    configure_logger()

    mock_root_logger.removeHandler.assert_has_calls(
        [call(mock_handler1), call(mock_handler2)], any_order=True
    )
    assert mock_root_logger.removeHandler.call_count == 2


# --- Tests for get_i2c_config ---


def test_get_i2c_config_defaults():
    assert get_i2c_config() == {"bus": 1, "address": 0x0D, "strict_buffers": False}


def test_get_i2c_config_address_pins():
    os.environ["MCP342X_A1"] = "1"
    os.environ["MCP342X_A2"] = "yes"
    os.environ["MCP342X_A0"] = "off"

    assert get_i2c_config()["address"] == 0x0F


@pytest.mark.parametrize("value, expected", [("0x68", 0x68), ("104", 104)])
def test_get_i2c_config_address_override(value, expected):
    os.environ["MCP342X_A1"] = "true"
    os.environ["MCP342X_ADDRESS"] = value

    assert get_i2c_config()["address"] == expected


@patch.object(config_module_logger, "warning")
def test_get_i2c_config_invalid_address_override(mock_config_logger_warning):
    os.environ["MCP342X_ADDRESS"] = "sixty-eight"

    assert get_i2c_config()["address"] == 0x0D
    mock_config_logger_warning.assert_called_once_with(
        "Invalid MCP342X_ADDRESS 'sixty-eight'. Using address from pins: 0x0D"
    )


def test_get_i2c_config_bus_and_strict():
    os.environ["MCP342X_I2C_BUS"] = "0"
    os.environ["MCP342X_STRICT_BUFFERS"] = "TRUE"

    config = get_i2c_config()

    assert config["bus"] == 0
    assert config["strict_buffers"] is True


@patch("mcp342x.config.coloredlogs.install")
@patch("mcp342x.config.logging.getLogger")
def test_configure_logger_explicit_level_overrides_env(
    mock_get_logger, mock_coloredlogs_install, mock_root_logger
):
    mock_get_logger.return_value = mock_root_logger
    os.environ["LOG_LEVEL"] = "ERROR"

    configure_logger(level="warning")
    assert mock_coloredlogs_install.call_args.kwargs["level"] == logging.WARNING

    configure_logger(level=logging.DEBUG)
    assert mock_coloredlogs_install.call_args.kwargs["level"] == logging.DEBUG


@patch("mcp342x.config.coloredlogs.install")
@patch("mcp342x.config.logging.getLogger")
def test_configure_logger_package_only(mock_get_logger, mock_coloredlogs_install):
    """
    Test `configure_logger(package_only=True)` installs on the package logger and
    stops propagation to the root logger.
    """
    package_logger = MagicMock(spec=logging.Logger)
    package_logger.handlers = []
    package_logger.propagate = True
    mock_get_logger.return_value = package_logger

    returned_logger = configure_logger(package_only=True)

    mock_get_logger.assert_called_once_with("mcp342x")
    assert returned_logger is package_logger
    assert package_logger.propagate is False
    assert mock_coloredlogs_install.call_args.kwargs["logger"] is package_logger


@pytest.mark.parametrize("value", ["0x200", "128", "-1"])
@patch.object(config_module_logger, "warning")
def test_get_i2c_config_address_override_out_of_range(mock_config_logger_warning, value):
    os.environ["MCP342X_A1"] = "1"
    os.environ["MCP342X_ADDRESS"] = value

    assert get_i2c_config()["address"] == 0x0F
    mock_config_logger_warning.assert_called_once_with(
        f"Invalid MCP342X_ADDRESS '{value}'. Using address from pins: 0x0F"
    )
