import sys
from typing import Optional, TextIO

LABEL = "Classic object"


class MovingObject:
    """Plain game object: owns its position and velocity and moves itself."""

    def __init__(self, start: float, velocity: float):
        self.position = start
        self.velocity = velocity

    def advance(self, dt: float):
        self.position += self.velocity * dt

    def render(self, out: Optional[TextIO] = None) -> str:
        line = f"{LABEL} position: {self.position:g}"
        print(line, file=out if out is not None else sys.stdout)
        return line
