#
# UNC Gas - Message Formatting Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from unc_gas.gas import UncGas
from unc_gas.tools import fmt_type, fmt_value


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFmtType:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<type: int>", id="instance"),
            pytest.param(int, "<type: int>", id="type"),
            pytest.param(ValueError("x"), "<type: ValueError>", id="exception"),
            pytest.param(UncGas(), "<type: UncGas>", id="gas"),
        ],
    )
    def test_basic(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_truncate(self):
        assert fmt_type(ValueError, max_repr=5) == "<type: Value...>"


class TestFmtValue:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<int: 42>", id="int"),
            pytest.param("5 Xgas", "<str: '5 Xgas'>", id="str"),
            pytest.param(UncGas.from_gas(5), "<UncGas: UncGas(inner=5)>", id="gas"),
        ],
    )
    def test_basic(self, obj, expected):
        assert fmt_value(obj) == expected

    def test_escapes_angle_bracket(self):
        assert fmt_value("a>b") == "<str: 'a\\>b'>"

    def test_truncate_quoted(self):
        assert fmt_value("hello world", max_repr=8) == "<str: 'hell'...>"

    def test_broken_repr(self):
        class BrokenRepr:
            def __repr__(self):
                raise RuntimeError("boom")

        assert fmt_value(BrokenRepr()) == "<BrokenRepr: <BrokenRepr object (repr failed: RuntimeError)\\>>"
