import math

def all_finite(*values: float) -> bool:
    """Check that none of the values is NaN or infinite."""
    return all(math.isfinite(v) for v in values)

def round_half_up(value: float, decimals: int = 0, scale: float = 1.0) -> float:
    """Scale ``value`` and round it to ``decimals`` places, halves going up.

    The multiplier is folded before touching ``value`` so that
    ``round_half_up(x, 2, 100)`` is exactly ``floor(x * 10000 + 0.5) / 100``.
    Non-finite values, and finite ones that overflow once scaled, come back
    scaled but unrounded.
    """
    if not math.isfinite(value):
        return value * scale
    places = 10 ** decimals
    scaled = value * (scale * places)
    if not math.isfinite(scaled):
        return scaled / places
    return math.floor(scaled + 0.5) / places
