#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# @formatter:off
DISPLAY_TABLE = [
    (0,                         "0 Tgas"),
    (1,                         "<0.001 Tgas"),
    (999_999_999,               "<0.001 Tgas"),
    (1_000_000_000,             "0.001 Tgas"),
    (1_000_000_001,             "0.002 Tgas"),
    (2_000_000_000,             "0.002 Tgas"),
    (200_000_000_000,           "0.200 Tgas"),
    (999_000_000_000,           "0.999 Tgas"),
    (999_000_000_001,           "1.0 Tgas"),
    (999_999_999_999,           "1.0 Tgas"),
    (1_000_000_000_000,         "1.0 Tgas"),
    (1_000_000_000_001,         "1.1 Tgas"),
    (1_234_567_000_000,         "1.3 Tgas"),
    (1_500_000_000_000,         "1.5 Tgas"),
    (10_000_000_000_000,        "10.0 Tgas"),
    (10_500_000_000_000,        "10.5 Tgas"),
    (99_999_999_999_999,        "100.0 Tgas"),
    (100_000_000_000_000,       "100.0 Tgas"),
    (100_500_000_000_000,       "100.5 Tgas"),
    (1_000_500_000_000_000,     "1000.5 Tgas"),
    (1_000_000_500_000_000_000, "1000000.5 Tgas"),
]
# @formatter:on


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def display_table() -> list[tuple[int, str]]:
    """Base-unit counts paired with their expected rounded-up display strings."""
    return list(DISPLAY_TABLE)
