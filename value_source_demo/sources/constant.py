class ConstantValueSource:
    """Dynamic value source that never moves.

    This is the static-value case from the value_source module notes: doing
    nothing in advance() is a valid implementation. advance() is accepted and
    ignored, so an object wired for the update/render loop can be parked at a
    fixed position.
    """

    def __init__(self, value: float):
        self._value = value

    def get_current_value(self) -> float:
        return self._value

    def advance(self, dt: float):
        pass

    def __repr__(self):
        return f"ConstantValueSource({self._value!r})"
