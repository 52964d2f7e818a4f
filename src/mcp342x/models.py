"""
mcp342x.models

Pydantic models and enums describing the MCP342x configuration byte and the
readings decoded from the converter.

Models:
    - Mode: Conversion mode (continuous or one-shot)
    - Gain: Programmable Gain Amplifier setting
    - Resolution: Number of bits the input voltage is represented by
    - Parameters: Every field held by the configuration byte
    - Reading: Parameters under which a measure was done, plus the input voltage

Constants:
    - DEFAULTS: Parameters used for any field left out by the caller
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Mode(str, Enum):
    """
    In continuous mode the converter measures the input voltage constantly, whereas in
    one-shot mode the measure only happens when the master writes a configuration byte
    with `converting` set to True.
    """

    CONTINUOUS = "continuous"
    ONE_SHOT = "one-shot"


class Gain(str, Enum):
    """Programmable Gain Amplifier."""

    X1 = "x1"
    X2 = "x2"
    X4 = "x4"
    X8 = "x8"


class Resolution(str, Enum):
    """Number of bits of an output code. Available values depend on the model."""

    BITS_12 = "12-bit"
    BITS_14 = "14-bit"
    BITS_16 = "16-bit"
    BITS_18 = "18-bit"


class Parameters(BaseModel):
    """
    Parameters

    Represents the content of a configuration byte.

    Attributes:
        channel (int): Selected channel, from 1 to 4 depending on the model.
        converting (bool): When writing, True initiates a new measure in one-shot mode
            (it does not matter in continuous mode). When reading, the converter
            clears it once a new conversion is ready.
        mode (Mode): Continuous or one-shot conversion.
        gain (Gain): Programmable Gain Amplifier.
        resolution (Resolution): Number of bits of the output code.
    """

    model_config = ConfigDict(frozen=True)

    # strict: True must not pass as channel 1, nor "yes" as converting
    channel: int = Field(1, ge=1, le=4, strict=True)
    converting: bool = Field(True, strict=True)
    mode: Mode = Mode.CONTINUOUS
    gain: Gain = Gain.X1
    resolution: Resolution = Resolution.BITS_12


class Reading(Parameters):
    """Parameters a measure has been done under, along with the input voltage."""

    micro_volt: float = Field(
        ..., allow_inf_nan=False, description="Input voltage in microvolts."
    )

    @property
    def volt(self) -> float:
        return self.micro_volt / 1_000_000


DEFAULTS = Parameters()
