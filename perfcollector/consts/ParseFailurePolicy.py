from enum import Enum


class ParseFailurePolicy(Enum):
    """What to record when an expected numeric field cannot be parsed."""
    ZERO = "zero"
    DROP = "drop"
