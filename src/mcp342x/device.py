"""
Talks to MCP342x converters over an smbus2 bus.

This module is responsible for:
- Opening the configured I2C bus.
- Writing a configuration byte to a slave device.
- Reading a measure from a slave device and decoding it into a Reading.

IO operations raise whatever the bus raises (usually OSError). Nothing is retried here.
"""

import logging

from smbus2 import SMBus, i2c_msg

from mcp342x.codec import parameters_to_byte
from mcp342x.config import get_i2c_config
from mcp342x.conversion import byte_count, process
from mcp342x.models import DEFAULTS, Reading, Resolution

logger = logging.getLogger(__name__)


def open_bus(bus_number: int | None = None) -> SMBus:
    """
    Opens an I2C bus, by default the one given by MCP342X_I2C_BUS.
    """
    if bus_number is None:
        bus_number = get_i2c_config()["bus"]
    logger.info(f"Opening I2C bus {bus_number}")
    return SMBus(bus_number)


def configure(bus, slave_address: int, params=None) -> int:
    """
    Configures a slave device by writing a configuration byte.

    In absence of a parameter, its default value is used (see DEFAULTS).

    Returns:
        int: The configuration byte written.
    """
    b = parameters_to_byte(params)
    bus.write_byte(slave_address, b)
    logger.debug(f"Wrote configuration byte 0x{b:02X} to slave 0x{slave_address:02X}")
    return b


def read_channel(
    bus,
    slave_address: int,
    resolution: Resolution = DEFAULTS.resolution,
    strict: bool | None = None,
) -> Reading:
    """
    Reads a measure and returns the parameters under which it has been done along
    with the input voltage.

    `resolution` must match the one the device has been configured with, since it
    determines how many bytes are read. When `strict` is None, the policy for short
    buffers comes from MCP342X_STRICT_BUFFERS.
    """
    if strict is None:
        strict = get_i2c_config()["strict_buffers"]
    msg = i2c_msg.read(slave_address, byte_count(resolution))
    bus.i2c_rdwr(msg)
    reading = process(list(msg), strict=strict)
    logger.debug(
        f"Slave 0x{slave_address:02X} channel {reading.channel}: {reading.micro_volt} µV"
    )
    return reading
