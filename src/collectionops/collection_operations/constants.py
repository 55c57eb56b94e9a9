"""Constants and enumerations for collection operations."""

from enum import Enum


class MergingOperation(str, Enum):
    """How numeric selector results are combined.

    Attributes:
        SUM: Plain total of the per-element sums
        AVERAGE: Total divided by the number of elements
    """

    SUM = "SUM"
    AVERAGE = "AVERAGE"

    @classmethod
    def _missing_(cls, value: object) -> "MergingOperation | None":
        if isinstance(value, str):
            normalized = value.strip().upper()
            aliases = {
                "SUMMING": "SUM",
                "AVERAGING": "AVERAGE",
                "AVG": "AVERAGE",
                "MEAN": "AVERAGE",
            }
            normalized = aliases.get(normalized, normalized)
            for member in cls:
                if member.value == normalized:
                    return member
        return None
