"""Missing data policy enumeration."""

from enum import Enum


class MissingDataPolicy(str, Enum):
    """How to score an observation that lacks one or more values."""

    ZERO = "zero"  # substitute 0.0 for absent values
    SKIP = "skip"  # do not score, leave the location unscored
