"""Moving object for the reactive style.

There is no advance() here. Time is driven into the value source from
outside (see Simulation.tick), so the object only ever reads.
"""

import logging
import sys
from typing import Optional, TextIO

from value_source_demo.sources.value_source import ValueSource

log = logging.getLogger("value-source-demo")

LABEL = "Reactive programming object"


class MovingObject:
    def __init__(self, position: Optional[ValueSource[float]] = None):
        self._position = position

    @property
    def is_attached(self) -> bool:
        return self._position is not None

    @property
    def position_source(self) -> Optional[ValueSource[float]]:
        return self._position

    def attach_position_source(self, position: ValueSource[float]):
        self._position = position
        log.debug(f"{LABEL}: attached {position!r}")

    def detach_position_source(self):
        self._position = None

    def render(self, out: Optional[TextIO] = None) -> Optional[str]:
        if self._position is None:
            log.debug(f"{LABEL}: no position source attached, skipping render")
            return None
        line = f"{LABEL} position: {self._position.get_current_value():g}"
        print(line, file=out if out is not None else sys.stdout)
        return line
