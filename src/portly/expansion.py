"""Scan ceiling expansion policy."""

from .config import HIGHEST_PORT

MIN_INCREMENT = 50
MAX_INCREMENT = 2000
EXPANSION_RATIO_PERCENT = 10

# Ceilings worth a warning when first crossed
ADVISORY_THRESHOLDS = (60000, 65000)


def raw_increment(current_max: int) -> int:
    """Ten percent of the ports left above the ceiling, rounded half up."""
    remaining = max(HIGHEST_PORT - current_max, 0)
    return (remaining * EXPANSION_RATIO_PERCENT + 50) // 100


def next_ceiling(current_max: int) -> int | None:
    """Compute the next scan ceiling after a failed scan.

    The increment is clamped to [MIN_INCREMENT, MAX_INCREMENT] so small
    ranges grow by a useful amount without one step swallowing the whole
    port space. The result never exceeds HIGHEST_PORT.

    Args:
        current_max: Highest port of the range just scanned

    Returns:
        New ceiling, or None if current_max is already HIGHEST_PORT
    """
    if current_max >= HIGHEST_PORT:
        return None
    increment = min(max(raw_increment(current_max), MIN_INCREMENT), MAX_INCREMENT)
    return min(current_max + increment, HIGHEST_PORT)


def crossed_thresholds(old_max: int, new_max: int) -> list[int]:
    """Get advisory thresholds passed by moving the ceiling from old to new."""
    return [t for t in ADVISORY_THRESHOLDS if old_max <= t < new_max]
