#
# UNC Gas - Codec Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import json
import re
import struct

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from unc_gas.codec import (
    BINARY_SCHEMA, BINARY_SIZE, from_bytes, from_json_value, json_schema, to_bytes, to_json_value,
)
from unc_gas.gas import MAX, ZERO, UncGas
from unc_gas.units import U64_MAX


# Tests ----------------------------------------------------------------------------------------------------------------

class TestBinary:

    def test_layout(self):
        assert BINARY_SIZE == 8
        assert BINARY_SCHEMA == "u64"
        assert to_bytes(UncGas.from_gas(1)) == b"\x01" + b"\x00" * 7
        assert to_bytes(ZERO) == b"\x00" * 8
        assert to_bytes(MAX) == b"\xff" * 8

    @pytest.mark.parametrize("value", [0, 1, 10**12, 2**63, U64_MAX])
    def test_matches_struct_u64_le(self, value):
        gas = UncGas.from_gas(value)
        assert to_bytes(gas) == struct.pack("<Q", value)
        assert from_bytes(struct.pack("<Q", value)) == gas

    def test_accepts_bytes_like(self):
        data = bytearray(struct.pack("<Q", 42))
        assert from_bytes(data) == UncGas.from_gas(42)
        assert from_bytes(memoryview(data)) == UncGas.from_gas(42)

    @pytest.mark.parametrize("data", [b"", b"\x00" * 7, b"\x00" * 9])
    def test_wrong_length(self, data):
        with pytest.raises(ValueError, match="expected exactly 8 bytes"):
            from_bytes(data)

    def test_wrong_type(self):
        with pytest.raises(TypeError, match="must be bytes-like"):
            from_bytes("\x00" * 8)


class TestJson:

    def test_value(self):
        assert to_json_value(UncGas.from_tgas(1)) == "1000000000000"
        assert to_json_value(MAX) == str(U64_MAX)
        assert from_json_value("1000000000000") == UncGas.from_tgas(1)

    def test_in_document(self):
        doc = json.dumps({"gas": to_json_value(UncGas.from_ggas(300))})
        assert doc == '{"gas": "300000000000"}'
        assert from_json_value(json.loads(doc)["gas"]) == UncGas.from_ggas(300)

    @pytest.mark.parametrize("value", ["", "-1", "1.5", " 1", "1 Tgas", str(U64_MAX + 1)])
    def test_invalid_value(self, value):
        with pytest.raises(ValueError):
            from_json_value(value)

    @pytest.mark.parametrize("value", [1, 1.0, None, b"1"])
    def test_invalid_type(self, value):
        with pytest.raises(TypeError, match="must be a str"):
            from_json_value(value)

    def test_schema(self):
        schema = json_schema()
        assert schema["type"] == "string"
        assert re.fullmatch(schema["pattern"].strip("^$"), to_json_value(MAX))
