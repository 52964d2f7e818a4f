"""
tests

Test suite for the mcp342x package.

Modules:
    - test_models: Parameters/Reading models and enums
    - test_codec: Configuration byte encoding/decoding and addresses
    - test_conversion: Buffer framing, output codes, voltages and the read pipeline
    - test_device: Configuring and reading a device through a mocked bus
    - test_config: Logging and environment configuration
"""
