"""
Transition Models

Easing used by the smooth radius transition.
"""

MIN_SPEED_MODIFIER = 0.001


def speed_modifier(range_: float, to_go: float, minimum: float = MIN_SPEED_MODIFIER) -> float:
    """
    Triangular ease for radius transitions

    Speed ramps up from near zero, peaks when half of the distance is left,
    then ramps back down towards the target. Never returns less than
    `minimum` so a transition always makes progress.

    Args:
        range_: Total distance of the transition (absolute)
        to_go: Distance still left (absolute)
        minimum: Floor for the returned modifier

    Returns:
        Speed factor in [minimum, 1.0]

    Example:
        speed_modifier(100, 100)  # 0.001 (just started)
        speed_modifier(100, 50)   # 1.0   (midpoint)
        speed_modifier(100, 10)   # 0.2   (almost there)
    """
    half = abs(range_) / 2
    if half == 0:
        return 1.0

    modifier = abs(to_go) / half
    if modifier > 1:
        # Start bringing the modifier back down past the midpoint
        modifier = 2 - modifier
    return max(modifier, minimum)


def progress_fraction(range_: float, to_go: float) -> float:
    """Share of the transition already covered, clamped to [0, 1]"""
    if range_ == 0:
        return 1.0
    return max(0.0, min(1.0, 1 - abs(to_go) / abs(range_)))
