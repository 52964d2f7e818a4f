"""
mcp342x.codec

Conversion between the MCP342x configuration byte and Parameters, and computation
of slave addresses.

The configuration byte is the only register of the converter. The master writes it
to select the channel, the conversion mode, the gain and the resolution, and the
slave appends it to every measure it sends back.

Functions:
    - address: Computes the I2C address of a slave from its address pins
    - config_flag: Gets the bit flag of a single parameter value
    - parameters_to_byte: Encodes Parameters (or a partial mapping) into a configuration byte
    - byte_to_parameters: Decodes a configuration byte into Parameters
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import ValidationError

from mcp342x.exceptions import InvalidParameterError
from mcp342x.models import DEFAULTS, Gain, Mode, Parameters, Resolution

logger = logging.getLogger(__name__)

BASE_ADDRESS = 0x0D

# Bit flags for the configuration byte, per parameter.
FLAGS = MappingProxyType(
    {
        "channel": MappingProxyType({1: 0x00, 2: 0x20, 3: 0x40, 4: 0x60}),
        "converting": MappingProxyType({True: 0x80, False: 0x00}),
        "mode": MappingProxyType({Mode.CONTINUOUS: 0x10, Mode.ONE_SHOT: 0x00}),
        "gain": MappingProxyType({Gain.X1: 0x00, Gain.X2: 0x01, Gain.X4: 0x02, Gain.X8: 0x03}),
        "resolution": MappingProxyType(
            {
                Resolution.BITS_12: 0x00,
                Resolution.BITS_14: 0x04,
                Resolution.BITS_16: 0x08,
                Resolution.BITS_18: 0x0C,
            }
        ),
    }
)

_ENUM_PARAMETERS = MappingProxyType({"mode": Mode, "gain": Gain, "resolution": Resolution})

# Bit pairs are keyed as (high bit, low bit).
_CHANNEL_BITS = MappingProxyType(
    {(False, False): 1, (False, True): 2, (True, False): 3, (True, True): 4}
)
_GAIN_BITS = MappingProxyType(
    {
        (False, False): Gain.X1,
        (False, True): Gain.X2,
        (True, False): Gain.X4,
        (True, True): Gain.X8,
    }
)
_RESOLUTION_BITS = MappingProxyType(
    {
        (False, False): Resolution.BITS_12,
        (False, True): Resolution.BITS_14,
        (True, False): Resolution.BITS_16,
        (True, True): Resolution.BITS_18,
    }
)


def _bit(b: int, i: int) -> bool:
    return bool((b >> i) & 1)


def address(a0: bool = False, a1: bool = False, a2: bool = False) -> int:
    """
    Returns the address of a slave device.

    Pins `a0`, `a1` and `a2` modify the base address (0x0D) when set.
    """
    return (
        BASE_ADDRESS
        | (0x01 if a0 else 0x00)
        | (0x02 if a1 else 0x00)
        | (0x04 if a2 else 0x00)
    )


def config_flag(parameter: str, value) -> int:
    """
    Given a parameter name and a value, gets the related bit flag.

    Raises:
        InvalidParameterError: the parameter is unknown or the value has no flag.
    """
    flags = FLAGS.get(parameter)
    if flags is None:
        raise InvalidParameterError(parameter, value)
    enum_type = _ENUM_PARAMETERS.get(parameter)
    if enum_type is not None:
        try:
            value = enum_type(value)
        except ValueError:
            raise InvalidParameterError(parameter, value) from None
    elif isinstance(value, bool) != (parameter == "converting"):
        # bools are ints, channel=True must not resolve to channel 1
        raise InvalidParameterError(parameter, value)
    try:
        return flags[value]
    except (KeyError, TypeError):
        raise InvalidParameterError(parameter, value) from None


def parameters_to_byte(params: Parameters | Mapping | None = None) -> int:
    """
    Given parameters, returns a configuration byte.

    `params` may be a Parameters instance, a mapping holding only some of the fields,
    or None. Missing fields take their value from DEFAULTS.

    Raises:
        InvalidParameterError: a field is unknown or holds a value outside its set.
    """
    if params is None:
        params = DEFAULTS
    elif not isinstance(params, Parameters):
        unknown = [name for name in params if name not in FLAGS]
        if unknown:
            raise InvalidParameterError(unknown[0], params[unknown[0]])
        try:
            params = Parameters(**{**DEFAULTS.model_dump(), **params})
        except ValidationError as e:
            error = e.errors()[0]
            raise InvalidParameterError(error["loc"][0], error.get("input")) from e

    b = 0x00
    for parameter in FLAGS:
        b |= config_flag(parameter, getattr(params, parameter))
    logger.debug(f"Encoded {params!r} as configuration byte 0x{b:02X}")
    return b


def byte_to_parameters(b: int) -> Parameters:
    """
    Converts a configuration byte into Parameters.

    Every byte decodes to valid Parameters. Only the low 8 bits of `b` are considered,
    so a signed byte (e.g. -128) decodes like its unsigned counterpart (0x80).
    """
    b &= 0xFF
    return Parameters(
        channel=_CHANNEL_BITS[(_bit(b, 6), _bit(b, 5))],
        converting=_bit(b, 7),
        mode=Mode.CONTINUOUS if _bit(b, 4) else Mode.ONE_SHOT,
        gain=_GAIN_BITS[(_bit(b, 1), _bit(b, 0))],
        resolution=_RESOLUTION_BITS[(_bit(b, 3), _bit(b, 2))],
    )
