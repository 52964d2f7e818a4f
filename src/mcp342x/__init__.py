"""
mcp342x
=======

Library for talking to the MCP342x family of A/D converters using I2C.

Those devices are configured using a single byte, which the device also appends
to every measure it sends back. This package converts that byte to and from
Parameters and turns raw read buffers into input voltages.

Modules:
    - models: Pydantic models and enums for parameters and readings
    - codec: Configuration byte encoding/decoding and slave addresses
    - conversion: Read buffer framing, output codes and input voltages
    - device: Configuring and reading a device over an smbus2 bus
    - config: Logging and environment configuration
    - exceptions: Errors raised by this package
"""

from ._version import VERSION
from .codec import address, byte_to_parameters, config_flag, parameters_to_byte
from .conversion import byte_count, data_buffer, input_voltage, output_code, process
from .exceptions import InvalidBufferLengthError, InvalidParameterError, MCP342xError
from .models import DEFAULTS, Gain, Mode, Parameters, Reading, Resolution

__all__ = [
    "VERSION",
    "DEFAULTS",
    "Gain",
    "Mode",
    "Parameters",
    "Reading",
    "Resolution",
    "address",
    "byte_to_parameters",
    "config_flag",
    "parameters_to_byte",
    "byte_count",
    "data_buffer",
    "input_voltage",
    "output_code",
    "process",
    "InvalidBufferLengthError",
    "InvalidParameterError",
    "MCP342xError",
]
