"""Checked vitality arithmetic."""
from __future__ import annotations

from tick_encounter.types import MAX_VITALITY, VitalityOverflowError


def safe_add(a: int, b: int, limit: int = MAX_VITALITY) -> int:
    """Add two vitalities. Raises VitalityOverflowError instead of truncating."""
    if a < 0 or b < 0:
        raise ValueError(f"operands must be >= 0, got {a} and {b}")
    total = a + b
    if total > limit:
        raise VitalityOverflowError(a, b, limit)
    return total
