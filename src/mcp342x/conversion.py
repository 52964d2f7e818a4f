"""
mcp342x.conversion

Framing of read buffers and computation of output codes and input voltages.

A read buffer holds 2 data bytes (12, 14 and 16-bit resolutions) or 3 data bytes
(18-bit resolution), big-endian, followed by the configuration byte.

Functions:
    - byte_count: Number of bytes to read for a resolution
    - data_buffer: Zero-filled buffer sized for a resolution
    - output_code: Extracts the signed output code from a read buffer
    - input_voltage: Converts an output code into microvolts
    - process: Decodes a full read buffer into a Reading

Notes:
    - Buffers shorter than a full frame are zero-filled at the missing indices unless
      `strict` is requested, in which case InvalidBufferLengthError is raised.
"""

import logging
from collections.abc import Sequence
from types import MappingProxyType

from mcp342x.codec import byte_to_parameters
from mcp342x.exceptions import InvalidBufferLengthError
from mcp342x.models import Gain, Reading, Resolution

logger = logging.getLogger(__name__)

BYTE_COUNTS = MappingProxyType(
    {
        Resolution.BITS_12: 3,
        Resolution.BITS_14: 3,
        Resolution.BITS_16: 3,
        Resolution.BITS_18: 4,
    }
)

# Microvolts represented by one increment of the output code.
LSB_MICRO_VOLTS = MappingProxyType(
    {
        Resolution.BITS_12: 1000.0,
        Resolution.BITS_14: 250.0,
        Resolution.BITS_16: 62.5,
        Resolution.BITS_18: 15.625,
    }
)

GAIN_DIVISORS = MappingProxyType({Gain.X1: 1, Gain.X2: 2, Gain.X4: 4, Gain.X8: 8})

# (mask of the most significant data byte, sign bit) for 2-byte resolutions
_TWO_BYTE_CODES = MappingProxyType(
    {
        Resolution.BITS_12: (0x0F, 11),
        Resolution.BITS_14: (0x3F, 13),
        Resolution.BITS_16: (0xFF, 15),
    }
)


def _ubyte(buffer: Sequence[int], i: int, mask: int = 0xFF, shift_left: int = 0) -> int:
    """
    Gets an 'unsigned' byte from a buffer and shifts it to the left if needed.
    Missing indices read as 0.
    """
    if i >= len(buffer):
        return 0
    return (buffer[i] & mask) << shift_left


def _sign(i: int, value: int) -> int:
    return -value if (value >> i) & 1 else value


def byte_count(resolution: Resolution) -> int:
    """Number of bytes to read, configuration byte included, for the given resolution."""
    return BYTE_COUNTS[Resolution(resolution)]


def data_buffer(resolution: Resolution) -> bytearray:
    """Creates a zero-filled buffer sized for reading data at the given resolution."""
    return bytearray(byte_count(resolution))


def _check_length(resolution: Resolution, buffer: Sequence[int]) -> None:
    expected = byte_count(resolution)
    if len(buffer) < expected:
        raise InvalidBufferLengthError(expected, len(buffer))


def output_code(resolution: Resolution, buffer: Sequence[int], strict: bool = False) -> int:
    """
    Given the resolution, computes the signed output code held by a read buffer.

    When the sign bit of the resolution is set, the output code is the negation of
    the masked magnitude.

    Raises:
        InvalidBufferLengthError: `strict` is True and the buffer is too short.
    """
    resolution = Resolution(resolution)
    if strict:
        _check_length(resolution, buffer)

    if resolution is Resolution.BITS_18:
        return _sign(
            17,
            _ubyte(buffer, 2) | _ubyte(buffer, 1, 0xFF, 8) | _ubyte(buffer, 0, 0x03, 16),
        )
    mask, msb = _TWO_BYTE_CODES[resolution]
    return _sign(msb, _ubyte(buffer, 1) | _ubyte(buffer, 0, mask, 8))


def input_voltage(resolution: Resolution, gain: Gain, code: int) -> float:
    """Given the resolution, the gain and the output code, computes the input voltage in microvolts."""
    return float(code * LSB_MICRO_VOLTS[Resolution(resolution)] / GAIN_DIVISORS[Gain(gain)])


def process(buffer: Sequence[int], strict: bool = False) -> Reading:
    """
    Processes a read buffer in order to get the parameters and the input voltage.

    The last byte is decoded as the configuration byte. Its resolution determines how
    the data bytes are interpreted and, along with its gain, how the voltage is scaled.

    Raises:
        InvalidBufferLengthError: `strict` is True and the buffer is shorter than the
            frame prescribed by the decoded resolution.
    """
    if strict and not buffer:
        raise InvalidBufferLengthError(min(BYTE_COUNTS.values()), 0)
    params = byte_to_parameters(buffer[-1] if buffer else 0x00)
    code = output_code(params.resolution, buffer, strict=strict)
    micro_volt = input_voltage(params.resolution, params.gain, code)
    logger.debug(
        f"Processed {bytes(b & 0xFF for b in buffer).hex().upper()}: "
        f"output code {code}, {micro_volt} µV ({params.resolution.value}, {params.gain.value})"
    )
    return Reading(**params.model_dump(), micro_volt=micro_volt)
