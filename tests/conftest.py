import os

import pytest

ENV_VARS = (
    "LOG_LEVEL",
    "MCP342X_I2C_BUS",
    "MCP342X_A0",
    "MCP342X_A1",
    "MCP342X_A2",
    "MCP342X_ADDRESS",
    "MCP342X_STRICT_BUFFERS",
)


@pytest.fixture(autouse=True)
def clean_env():
    """
    Removes every environment variable read by mcp342x.config before each test
    and restores the original values afterwards.
    """
    saved = {name: os.environ.pop(name) for name in ENV_VARS if name in os.environ}
    yield
    for name in ENV_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)


@pytest.fixture
def mock_bus(mocker):
    """Provides a stand-in for an smbus2.SMBus instance."""
    return mocker.MagicMock(name="SMBus")
