class LinearAccumulator:
    """Dynamic value source that integrates a constant velocity over time."""

    def __init__(self, start: float, velocity: float):
        self._value = start
        self._velocity = velocity

    @property
    def velocity(self) -> float:
        return self._velocity

    def get_current_value(self) -> float:
        return self._value

    def advance(self, dt: float):
        self._value += self._velocity * dt

    def __repr__(self):
        return f"LinearAccumulator(value={self._value!r}, velocity={self._velocity!r})"
