"""
Decimal text conversion for gas amounts.

Parsing turns a decimal literal such as ``"1.5"`` plus a unit multiplier into an exact
base-unit count. Precision is never dropped: a fraction that the unit cannot represent
exactly is an error, as is any result that does not fit in an unsigned 64-bit integer.

Formatting renders a base-unit count in Tgas, always rounding UP to the displayed
precision so the shown cost never understates the real one:

    0                      -> "0 Tgas"
    1 .. 10⁹-1             -> "<0.001 Tgas"
    10⁹ .. 999×10⁹         -> "0.DDD Tgas"  (ceil to whole Ggas)
    above 999×10⁹          -> "W.F Tgas"    (ceil to 0.1 Tgas)
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidNumberError, LongFractionalError, LongWholeError
from .tools import fmt_type
from .units import ONE_GIGA_GAS, U64_MAX, scale_digits, unit_symbol, units_conf

_U64_DIGITS = len(str(U64_MAX))

_DECIMAL_RE = re.compile(r"(?P<whole>[0-9]+)(?:\.(?P<fraction>[0-9]+))?")
_UNIT_SUFFIX_RE = re.compile(r"(?P<number>.*?)\s*(?P<unit>[A-Za-z]*)", re.DOTALL)


# Methods --------------------------------------------------------------------------------------------------------------

def split_unit(text: str) -> tuple[str, str]:
    """
    Split surrounding-whitespace-stripped text into its numeric part and its trailing unit token.

    The unit token is the trailing run of ASCII letters; whitespace between the number and
    the unit is dropped. Either part may come back empty, validation is up to the caller.

    Examples:
        >>> split_unit(" 1.5 Tgas ")
        ('1.5', 'Tgas')
        >>> split_unit("10GGAS")
        ('10', 'GGAS')
        >>> split_unit("42")
        ('42', '')
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, but found {fmt_type(text)}")

    match = _UNIT_SUFFIX_RE.fullmatch(text.strip())
    return match.group("number"), match.group("unit")


def parse_decimal_number(text: str, multiplier: int) -> int:
    """
    Parse a decimal literal scaled by a unit multiplier into an exact base-unit count.

    The literal must match ``[0-9]+(\\.[0-9]+)?`` as a whole: no sign, no exponent, no
    whitespace, no empty whole or fraction part. The fraction is right-padded with zeros
    to the number of zeros in the multiplier, so "5" under 10⁹ contributes 500000000.

    Args:
        text: The numeric literal, without unit.
        multiplier: One of the unit multipliers 1, 10⁹ or 10¹².

    Returns:
        int: whole * multiplier + padded fraction, within [0, 2⁶⁴-1].

    Raises:
        InvalidNumberError: If text is not a plain decimal literal.
        LongFractionalError: If the fraction has more digits than the multiplier has zeros.
        LongWholeError: If the result does not fit in an unsigned 64-bit integer.
        ValueError: If multiplier is not a unit multiplier.

    Examples:
        >>> parse_decimal_number("1.1", 10**12)
        1100000000000
        >>> parse_decimal_number("5", 10**9)
        5000000000
        >>> parse_decimal_number("0.5", 10**9)
        500000000
    """
    digits = scale_digits(multiplier)

    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        raise InvalidNumberError(text)

    whole = match.group("whole")
    fraction = match.group("fraction") or ""

    if len(fraction) > digits:
        raise LongFractionalError(fraction)

    # Leading zeros are insignificant; more digits than 2⁶⁴-1 has cannot fit
    significant = whole.lstrip("0") or "0"
    if len(significant) > _U64_DIGITS:
        raise LongWholeError(whole)

    result = int(significant) * multiplier + int(fraction.ljust(digits, "0") or "0")
    if result > U64_MAX:
        raise LongWholeError(whole)
    return result


def format_tgas(value: int) -> str:
    """
    Render a base-unit gas count as a Tgas display string, rounded up.

    Examples:
        >>> format_tgas(0)
        '0 Tgas'
        >>> format_tgas(999_999_999)
        '<0.001 Tgas'
        >>> format_tgas(1_000_000_001)
        '0.002 Tgas'
        >>> format_tgas(1_000_000_000_001)
        '1.1 Tgas'
    """
    unit = unit_symbol(units_conf.DISPLAY_MULTIPLIER)

    if value == 0:
        return f"0 {unit}"
    elif value < ONE_GIGA_GAS:
        return f"<0.001 {unit}"
    elif value <= units_conf.FINE_LIMIT:
        ggas = _ceil_div(value, ONE_GIGA_GAS)
        return f"0.{ggas:03} {unit}"
    else:
        # Tenths of Tgas, i.e. hundreds of Ggas
        tenths = _ceil_div(value, 100 * ONE_GIGA_GAS)
        return f"{tenths // 10}.{tenths % 10} {unit}"


def _ceil_div(value: int, divisor: int) -> int:
    """Ceiling division with the addition saturating at 2⁶⁴-1, as the fixed-width count would."""
    return min(value + divisor - 1, U64_MAX) // divisor
