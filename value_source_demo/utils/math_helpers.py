def lerp(a: float, b: float, t: float) -> float:
    """Blend from a to b by factor t. No clamping; t outside 0..1 extrapolates."""
    return a + (b - a) * t


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value into [min_val, max_val], both ends inclusive."""
    return max(min_val, min(max_val, value))


def clamp_unit(value: float) -> float:
    """Clamp value into the unit interval 0.0..1.0."""
    return clamp(value, 0.0, 1.0)
