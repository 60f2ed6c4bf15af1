"""
Encodings of UncGas for persistence and schema tooling.

- Binary: the base-unit count as a fixed 8-byte unsigned little-endian integer, no framing.
- JSON: the base-unit count as a decimal string, e.g. "1000000000000" for 1 Tgas. A string
  is used because JSON numbers lose precision above 2⁵³ in most readers.
- Schema: BINARY_SCHEMA names the binary layout, json_schema() describes the JSON value.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .gas import UncGas
from .tools import fmt_type, fmt_value
from .units import U64_MAX

BINARY_SIZE = 8
BINARY_SCHEMA = "u64"

_JSON_DIGITS_RE = re.compile(r"[0-9]+")


# Methods --------------------------------------------------------------------------------------------------------------

def to_bytes(gas: UncGas) -> bytes:
    """
    Encode as 8 bytes, unsigned little-endian.

    Examples:
        >>> to_bytes(UncGas.from_gas(1))
        b'\\x01\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    """
    return gas.as_gas().to_bytes(BINARY_SIZE, "little", signed=False)


def from_bytes(data: bytes | bytearray | memoryview) -> UncGas:
    """
    Decode 8 bytes, unsigned little-endian.

    Raises:
        TypeError: If data is not bytes-like.
        ValueError: If data is not exactly 8 bytes long.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, but found {fmt_type(data)}")
    data = bytes(data)
    if len(data) != BINARY_SIZE:
        raise ValueError(f"expected exactly {BINARY_SIZE} bytes, but found {len(data)}")
    return UncGas.from_gas(int.from_bytes(data, "little", signed=False))


def to_json_value(gas: UncGas) -> str:
    """
    Encode as a decimal string of base units.

    Examples:
        >>> to_json_value(UncGas.from_tgas(1))
        '1000000000000'
    """
    return str(gas.as_gas())


def from_json_value(value: Any) -> UncGas:
    """
    Decode a decimal string of base units.

    Raises:
        TypeError: If value is not a str.
        ValueError: If value is not a plain digit string or exceeds 2⁶⁴-1.
    """
    if not isinstance(value, str):
        raise TypeError(f"gas JSON value must be a str, but found {fmt_type(value)}")
    if not _JSON_DIGITS_RE.fullmatch(value):
        raise ValueError(f"gas JSON value must be a string of digits, but found {fmt_value(value)}")

    inner = int(value)
    if inner > U64_MAX:
        raise ValueError(f"gas JSON value exceeds 2**64-1: {fmt_value(value)}")
    return UncGas.from_gas(inner)


def json_schema() -> dict[str, Any]:
    """JSON Schema of the value produced by to_json_value()."""
    return {
        "title": "UncGas",
        "description": "Amount of gas as a decimal string of base units.",
        "type": "string",
        "pattern": "^[0-9]+$",
    }
