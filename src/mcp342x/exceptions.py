"""
mcp342x.exceptions

Errors raised while encoding configuration bytes or framing read buffers.

I/O failures are not wrapped: whatever the bus object raises (usually OSError)
reaches the caller unchanged.
"""


class MCP342xError(Exception):
    """Base class for every error raised by this package."""


class InvalidParameterError(MCP342xError, ValueError):
    """A configuration parameter or its value has no bit flag."""

    def __init__(self, parameter, value):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Bit flag not found for parameter '{parameter}' with value '{value}'.")


class InvalidBufferLengthError(MCP342xError, ValueError):
    """A read buffer is shorter than a full data + configuration frame."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Read buffer holds {actual} byte(s), expected at least {expected}.")
