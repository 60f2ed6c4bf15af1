#
# UNC Gas Amount
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .convert import format_tgas, parse_decimal_number, split_unit
from .errors import DecimalNumberParsingError, IncorrectNumberError, IncorrectUnitError
from .tools import fmt_type, fmt_value
from .units import ONE_GIGA_GAS, ONE_TERA_GAS, U64_MAX, unit_multiplier

_log = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class UncGas:
    """
    An amount of gas: an exact, non-negative count of base gas units that fits in 64 bits.

    Instances are immutable and compare, order and hash by their base-unit count.

    Construction from scaled values (from_ggas(), from_tgas()) does NOT check for overflow:
    the product wraps modulo 2⁶⁴ the same way unsigned 64-bit multiplication does, so passing
    a scaled value too large for the type is a caller error that goes unreported. Runtime
    arithmetic is different, it is always either checked (checked_* return None) or
    saturating (saturating_* clamp to [0, 2⁶⁴-1]).

    Examples:
        >>> UncGas.from_gas(10**12) == UncGas.from_tgas(1) == UncGas.from_ggas(1000)
        True
        >>> str(UncGas.from_ggas(1500))
        '1.5 Tgas'
        >>> UncGas.from_str("1.5 Tgas").as_gas()
        1500000000000
    """

    inner: int = 0

    def __post_init__(self):
        _ensure_u64(self.inner, "inner")

    def __str__(self):
        return format_tgas(self.inner)

    # ----- Construction -----

    @classmethod
    def from_gas(cls, inner: int) -> Self:
        """Create from a number of whole gas units."""
        return cls(inner)

    @classmethod
    def from_ggas(cls, inner: int) -> Self:
        """
        Create from a number of whole Ggas (10⁹ gas).

        Unchecked: a product above 2⁶⁴-1 wraps around instead of raising.
        """
        _ensure_u64(inner, "inner")
        return cls((inner * ONE_GIGA_GAS) & U64_MAX)

    @classmethod
    def from_tgas(cls, inner: int) -> Self:
        """
        Create from a number of whole Tgas (10¹² gas).

        Unchecked: a product above 2⁶⁴-1 wraps around instead of raising.
        """
        _ensure_u64(inner, "inner")
        return cls((inner * ONE_TERA_GAS) & U64_MAX)

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Parse an amount with a unit, e.g. "1.5 Tgas", "250 Ggas" or "21000 gas".

        Raises:
            IncorrectUnitError: If the unit suffix is missing or unknown.
            IncorrectNumberError: If the number is malformed, too precise for the unit, or too large.
        """
        number, unit = split_unit(text)

        multiplier = unit_multiplier(unit)
        if multiplier is None:
            _log.debug("Rejected gas amount %r: unknown unit %r", text, unit)
            raise IncorrectUnitError(unit or text)

        try:
            inner = parse_decimal_number(number, multiplier)
        except DecimalNumberParsingError as err:
            _log.debug("Rejected gas amount %r: %r", text, err)
            raise IncorrectNumberError(err) from err

        return cls(inner)

    # ----- Accessors -----

    def as_gas(self) -> int:
        """Total number of whole gas units."""
        return self.inner

    def as_ggas(self) -> int:
        """Whole part of the amount in Ggas, the remainder below 10⁹ gas is discarded."""
        return self.inner // ONE_GIGA_GAS

    def as_tgas(self) -> int:
        """Whole part of the amount in Tgas, the remainder below 10¹² gas is discarded."""
        return self.inner // ONE_TERA_GAS

    # ----- Checked arithmetic -----

    def checked_add(self, rhs: "UncGas") -> Self | None:
        """
        Computes self + rhs, returning None if overflow occurred.

        Examples:
            >>> UncGas.from_gas(U64_MAX - 2).checked_add(UncGas.from_gas(2)) == MAX
            True
            >>> UncGas.from_gas(U64_MAX - 2).checked_add(UncGas.from_gas(3)) is None
            True
        """
        result = self.inner + _ensure_gas(rhs).inner
        return type(self)(result) if result <= U64_MAX else None

    def checked_sub(self, rhs: "UncGas") -> Self | None:
        """Computes self - rhs, returning None if the result would be negative."""
        result = self.inner - _ensure_gas(rhs).inner
        return type(self)(result) if result >= 0 else None

    def checked_mul(self, rhs: int) -> Self | None:
        """Computes self * rhs, returning None if overflow occurred."""
        result = self.inner * _ensure_u64(rhs, "rhs")
        return type(self)(result) if result <= U64_MAX else None

    def checked_div(self, rhs: int) -> Self | None:
        """Computes self // rhs, returning None if rhs == 0."""
        if _ensure_u64(rhs, "rhs") == 0:
            return None
        return type(self)(self.inner // rhs)

    # ----- Saturating arithmetic -----

    def saturating_add(self, rhs: "UncGas") -> Self:
        """Computes self + rhs, clamped to 2⁶⁴-1."""
        return type(self)(min(self.inner + _ensure_gas(rhs).inner, U64_MAX))

    def saturating_sub(self, rhs: "UncGas") -> Self:
        """Computes self - rhs, clamped to 0."""
        return type(self)(max(self.inner - _ensure_gas(rhs).inner, 0))

    def saturating_mul(self, rhs: int) -> Self:
        """Computes self * rhs, clamped to 2⁶⁴-1."""
        return type(self)(min(self.inner * _ensure_u64(rhs, "rhs"), U64_MAX))

    def saturating_div(self, rhs: int) -> Self:
        """
        Computes self // rhs.

        Division by zero yields the zero amount, not the maximum and not an error.

        Examples:
            >>> UncGas.from_gas(10).saturating_div(2)
            UncGas(inner=5)
            >>> UncGas.from_gas(10).saturating_div(0)
            UncGas(inner=0)
        """
        if _ensure_u64(rhs, "rhs") == 0:
            return type(self)(0)
        return type(self)(self.inner // rhs)


# Methods --------------------------------------------------------------------------------------------------------------

def parse_gas(text: str) -> UncGas:
    """
    Parse an amount of gas from text with a mandatory unit suffix.

    Accepted units (case-insensitive): gas, Ggas / gigagas, Tgas / teragas.
    The number may carry a fraction as long as the unit represents it exactly.

    Raises:
        IncorrectUnitError: If the unit suffix is missing or unknown.
        IncorrectNumberError: If the number is malformed, too precise for the unit, or too large.

    Examples:
        >>> parse_gas("1.1 Tgas").as_gas()
        1100000000000
        >>> parse_gas("0.5ggas").as_gas()
        500000000
    """
    return UncGas.from_str(text)


# Private Methods ------------------------------------------------------------------------------------------------------

def _ensure_u64(value: int, name: str) -> int:
    """Validate that value is an int (not bool) in the unsigned 64-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, but found {fmt_type(value)}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be in range [0, 2**64-1], but found {fmt_value(value)}")
    return value


def _ensure_gas(value: UncGas) -> UncGas:
    if not isinstance(value, UncGas):
        raise TypeError(f"rhs must be an UncGas, but found {fmt_type(value)}")
    return value


# Constants ------------------------------------------------------------------------------------------------------------

ZERO = UncGas(0)
MAX = UncGas(U64_MAX)
