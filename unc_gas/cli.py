"""
UNC Gas CLI Tools
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import re
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import UncGasError
from .gas import UncGas
from .tools import fmt_value
from .units import U64_MAX, UNIT_TOKENS, scale_digits, unit_symbol, unit_tokens

_COUNT_RE = re.compile(r"[0-9]+")
_U64_DIGITS = len(str(U64_MAX))


# Methods --------------------------------------------------------------------------------------------------------------

def gas_type(text: str) -> UncGas:
    """
    Argparse ``type=`` callable that parses a gas amount with unit.

    Parse errors are re-raised as argparse.ArgumentTypeError so argparse reports them
    as a usage error instead of a traceback.

    Examples:
        >>> parser = argparse.ArgumentParser()
        >>> _ = parser.add_argument("--gas", type=gas_type)
        >>> parser.parse_args(["--gas", "30 Tgas"]).gas.as_tgas()
        30
    """
    try:
        return UncGas.from_str(text)
    except UncGasError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def gas_count_type(text: str) -> UncGas:
    """
    Argparse ``type=`` callable that reads a plain count of base gas units.

    Examples:
        >>> gas_count_type("1500000000000")
        UncGas(inner=1500000000000)
    """
    if not _COUNT_RE.fullmatch(text):
        raise argparse.ArgumentTypeError(f"gas count must be a string of digits, but found {fmt_value(text)}")
    significant = text.lstrip("0") or "0"
    if len(significant) > _U64_DIGITS or int(significant) > U64_MAX:
        raise argparse.ArgumentTypeError(f"gas count exceeds 2**64-1: {fmt_value(text, max_repr=40)}")
    return UncGas.from_gas(int(significant))


def units_help() -> str:
    """
    Help text listing the accepted unit tokens grouped under their canonical symbol.

    Examples:
        >>> units_help()
        'accepted units (case-insensitive): gas (GAS) = 1 gas; Ggas (GGAS, GIGAGAS) = 10^9 gas; Tgas (TERAGAS, TGAS) = 10^12 gas'
    """
    groups: dict[int, list[str]] = {}
    for token in unit_tokens():
        groups.setdefault(UNIT_TOKENS[token], []).append(token)

    parts = []
    for multiplier, tokens in groups.items():
        digits = scale_digits(multiplier)
        scale = "1" if digits == 0 else f"10^{digits}"
        parts.append(f"{unit_symbol(multiplier)} ({', '.join(tokens)}) = {scale} gas")
    return "accepted units (case-insensitive): " + "; ".join(parts)


def add_gas_argument(parser: argparse.ArgumentParser, *flags: str, **kwargs: Any) -> argparse.Action:
    """
    Add an argument parsed as UncGas; the accepted units are appended to its help text.

    A string default is parsed by argparse like any command-line value.
    """
    help_text = kwargs.pop("help", None)
    kwargs["help"] = f"{help_text} ({units_help()})" if help_text else units_help()
    kwargs.setdefault("metavar", "AMOUNT")
    return parser.add_argument(*flags, type=gas_type, **kwargs)
