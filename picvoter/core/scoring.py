"""
Vote scoring policy.

confidence is the lower bound of the Wilson score interval for the share of
upvotes. sorting is the rank key stored next to it and indexed for feed
reads; it currently equals confidence. Any replacement must remain monotonic
in confidence for fixed vote totals.

Dependencies: math (stdlib)
System role: Pure (upvotes, downvotes) -> (confidence, sorting) function
"""

import math
from dataclasses import dataclass

Z_95 = 1.959963984540054


@dataclass(frozen=True)
class Score:
    """Derived ranking values for one image."""

    confidence: float
    sorting: float


def wilson_lower_bound(upvotes: int, downvotes: int, z: float = Z_95) -> float:
    """
    Lower bound of the Wilson score interval for upvotes / (upvotes + downvotes).

    Args:
        upvotes: Positive vote count
        downvotes: Negative vote count
        z: Standard normal quantile for the desired confidence level

    Returns:
        float: Value in [0, 1]; 0 when there are no upvotes

    Raises:
        ValueError: If either count is negative
    """
    if upvotes < 0 or downvotes < 0:
        raise ValueError(
            f"Vote counts must be non-negative (upvotes={upvotes}, downvotes={downvotes})"
        )

    if upvotes == 0:
        return 0.0

    n = upvotes + downvotes
    p = upvotes / n
    z2 = z * z
    centre = p + z2 / (2 * n)
    margin = z * math.sqrt((p * (1 - p) + z2 / (4 * n)) / n)
    bound = (centre - margin) / (1 + z2 / n)
    return min(1.0, max(0.0, bound))


@dataclass(frozen=True)
class ScoringPolicy:
    """Computes the persisted score columns from vote counters."""

    z: float = Z_95

    def score(self, upvotes: int, downvotes: int) -> Score:
        confidence = wilson_lower_bound(upvotes, downvotes, self.z)
        return Score(confidence=confidence, sorting=confidence)
