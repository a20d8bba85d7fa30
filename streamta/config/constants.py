"""
Centralized constants for the indicator engine.

Periods are unsigned bytes: every period parameter must be strictly below
PERIOD_MAX, even though PERIOD_MAX itself is representable.
"""

PERIOD_MAX = 255

# Seed for moving averages and the value emitted when a ratio has no denominator
NEUTRAL_VALUE = 0.0


def parse_period(value: str) -> int:
    """
    Parse a period from its textual form.

    Only checks that the number is representable (0..PERIOD_MAX); whether it
    is legal for a given parameter is decided by the config's validate().

    Raises:
        ValueError: If value is not an integer in [0, PERIOD_MAX].
    """
    period = int(value.strip())
    if period < 0 or period > PERIOD_MAX:
        raise ValueError(f"Period must be in [0, {PERIOD_MAX}], got {period}")
    return period
