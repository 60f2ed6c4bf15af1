"""
Exceptions raised when gas amounts are parsed from text.

Two error kinds reach the caller of ``parse_gas`` / ``UncGas.from_str``:

- IncorrectNumberError: the numeric part is malformed, too precise for the unit, or does not fit in 64 bits.
  The low-level ``DecimalNumberParsingError`` is available as ``.cause`` (and as ``__cause__``).
- IncorrectUnitError: the unit suffix is missing or unknown.

Both derive from ``UncGasError``, which is a ``ValueError``.
"""


# Classes --------------------------------------------------------------------------------------------------------------

class DecimalNumberParsingError(ValueError):
    """Low-level failure to turn a decimal literal into an exact base-unit count."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(text)


class InvalidNumberError(DecimalNumberParsingError):
    """The literal is not of the form <digits>[.<digits>]."""


class LongWholeError(DecimalNumberParsingError):
    """The scaled value does not fit in an unsigned 64-bit integer."""


class LongFractionalError(DecimalNumberParsingError):
    """The fraction has more digits than the unit multiplier can represent exactly."""


class UncGasError(ValueError):
    """Base class for gas parsing errors."""


class IncorrectNumberError(UncGasError):

    def __init__(self, cause: DecimalNumberParsingError):
        self.cause = cause
        super().__init__(f"Incorrect number: {cause!r}")


class IncorrectUnitError(UncGasError):

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Incorrect unit: {unit}")
