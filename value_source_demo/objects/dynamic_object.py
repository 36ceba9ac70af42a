"""1-axis moving object driven by a dynamic value source.

The object keeps no position of its own. The world calls advance() to move
the simulation forward and render() to show it; both are delegated to
whatever source is attached, so a linear accumulator can be swapped for a
spring, a spline or a network feed without touching this class.
"""

import logging
import sys
from typing import Optional, TextIO

from value_source_demo.sources.value_source import DynamicValueSource

log = logging.getLogger("value-source-demo")

LABEL = "Value-source object"


class MovingObject:
    """Update/render style object whose position comes from a DynamicValueSource."""

    def __init__(self, position: Optional[DynamicValueSource[float]] = None):
        self._position = position

    @property
    def is_attached(self) -> bool:
        return self._position is not None

    @property
    def position_source(self) -> Optional[DynamicValueSource[float]]:
        return self._position

    def attach_position_source(self, position: DynamicValueSource[float]):
        """Hand control of our position to another source. The caller keeps ownership."""
        self._position = position
        log.debug(f"{LABEL}: attached {position!r}")

    def detach_position_source(self):
        self._position = None

    def advance(self, dt: float):
        if self._position is not None:
            self._position.advance(dt)

    def render(self, out: Optional[TextIO] = None) -> Optional[str]:
        """Print the current position. Returns the line, or None when unattached."""
        if self._position is None:
            log.debug(f"{LABEL}: no position source attached, skipping render")
            return None
        line = f"{LABEL} position: {self._position.get_current_value():g}"
        print(line, file=out if out is not None else sys.stdout)
        return line
