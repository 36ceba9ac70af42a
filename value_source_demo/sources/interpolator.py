from value_source_demo.utils.math_helpers import lerp, clamp_unit


class LinearInterpolator:
    """Value source mapping an absolute time in 0..1 onto a min..max blend.

    Time is pushed in from outside with set_time() rather than accumulated,
    which is the reactive alternative to advance(). Because time is absolute
    the caller can also rewind it.
    """

    def __init__(self, min_value: float, max_value: float):
        self._min = min_value
        self._max = max_value
        self._time = 0.0
        self._value = min_value

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    @property
    def time(self) -> float:
        """Last time passed to set_time(), after clamping."""
        return self._time

    def get_current_value(self) -> float:
        return self._value

    def set_time(self, t: float):
        """Clamp t into 0..1 (ends inclusive) and cache the blended value."""
        self._time = clamp_unit(t)
        self._value = lerp(self._min, self._max, self._time)

    def __repr__(self):
        return (f"LinearInterpolator(min={self._min!r}, max={self._max!r}, "
                f"time={self._time!r})")
