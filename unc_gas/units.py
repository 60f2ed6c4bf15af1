#
# UNC Gas Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
from types import MappingProxyType
from typing import Final, Mapping


# @formatter:off

U64_MAX: Final[int] = 2**64 - 1

ONE_GAS: Final[int] = 1
ONE_GIGA_GAS: Final[int] = 10**9
ONE_TERA_GAS: Final[int] = 10**12


class GasUnitsConf:
    """
    Static unit configuration shared by the parser, the display formatter and the CLI help.

    Attributes:
        TOKENS (dict)             : Accepted unit tokens (upper case) mapped to their multiplier
        SYMBOLS (dict)            : Canonical unit symbol of each multiplier
        DISPLAY_MULTIPLIER (int)  : Multiplier of the unit used by the display formatter
        FINE_LIMIT (int)          : Largest base-unit value shown with three decimals
    """
    TOKENS = {
        "GAS": ONE_GAS,
        "GGAS": ONE_GIGA_GAS, "GIGAGAS": ONE_GIGA_GAS,
        "TGAS": ONE_TERA_GAS, "TERAGAS": ONE_TERA_GAS,
    }
    SYMBOLS = {
        ONE_GAS: "gas", ONE_GIGA_GAS: "Ggas", ONE_TERA_GAS: "Tgas",
    }
    DISPLAY_MULTIPLIER = ONE_TERA_GAS
    FINE_LIMIT = 999 * ONE_GIGA_GAS


units_conf = GasUnitsConf()

UNIT_TOKENS: Final[Mapping[str, int]] = MappingProxyType(dict(GasUnitsConf.TOKENS))
UNIT_SYMBOLS: Final[Mapping[int, str]] = MappingProxyType(dict(GasUnitsConf.SYMBOLS))

valid_multipliers = tuple(sorted(set(UNIT_TOKENS.values())))
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def unit_multiplier(token: str) -> int | None:
    """
    Return the multiplier of a unit token, or None when the token is not recognized.

    Matching is case-insensitive.

    Examples:
        >>> unit_multiplier("Tgas")
        1000000000000
        >>> unit_multiplier("gigagas")
        1000000000
        >>> unit_multiplier("Xgas") is None
        True
    """
    return UNIT_TOKENS.get(token.upper())


def unit_tokens() -> tuple[str, ...]:
    """Accepted unit tokens ordered by multiplier, then alphabetically."""
    return tuple(sorted(UNIT_TOKENS, key=lambda t: (UNIT_TOKENS[t], t)))


def scale_digits(multiplier: int) -> int:
    """
    Number of decimal zeros in a unit multiplier, i.e. the fractional digits it can represent exactly.

    Raises:
        ValueError: If multiplier is not one of the fixed unit multipliers.

    Examples:
        >>> scale_digits(ONE_TERA_GAS)
        12
        >>> scale_digits(ONE_GAS)
        0
    """
    if multiplier not in valid_multipliers:
        raise ValueError(
            f"Invalid unit multiplier: {multiplier!r}, expected one of {valid_multipliers}"
        )
    return len(str(multiplier)) - 1


def unit_symbol(multiplier: int) -> str:
    """
    Canonical unit symbol for a multiplier.

    Raises:
        ValueError: If multiplier is not one of the fixed unit multipliers.

    Examples:
        >>> unit_symbol(ONE_TERA_GAS)
        'Tgas'
    """
    scale_digits(multiplier)
    return UNIT_SYMBOLS[multiplier]


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every multiplier has exactly one canonical symbol.
if set(UNIT_SYMBOLS.keys()) != set(valid_multipliers):
    raise AssertionError(
        "Configuration Error: unit tokens and canonical unit symbols must cover the same multipliers."
    )

# Every canonical symbol is itself an accepted token for its own multiplier.
if not all(UNIT_TOKENS.get(symbol.upper()) == mult for mult, symbol in UNIT_SYMBOLS.items()):
    raise AssertionError(
        "Configuration Error: every canonical unit symbol must be an accepted token for its multiplier."
    )
