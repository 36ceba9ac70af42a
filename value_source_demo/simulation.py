"""Fixed-step driver for the three moving-object styles.

All three styles share one update/present loop, which shows they can be
mixed freely in the same world. The simulation owns every value source;
the moving objects only borrow them.
"""

import logging
import math
import sys
from typing import Optional, TextIO

from value_source_demo.config import Config
from value_source_demo.objects import classic_object, dynamic_object, reactive_object
from value_source_demo.sources.accumulator import LinearAccumulator
from value_source_demo.sources.interpolator import LinearInterpolator

log = logging.getLogger("value-source-demo")

# Absorbs float error in end_time / dt so 1.0 / 0.1 counts as 10 ticks
_TICK_EPSILON = 1e-9


def tick_count(dt: float, end_time: float) -> int:
    """Number of ticks whose post-increment time (n * dt) does not exceed end_time."""
    if dt <= 0:
        raise ValueError(f"time step must be positive, got {dt}")
    if end_time < dt:
        return 0
    return int(math.floor(end_time / dt + _TICK_EPSILON))


class Simulation:
    """Builds the demo world from config and steps it at a fixed rate."""

    def __init__(self, config: Config, out: Optional[TextIO] = None):
        self._cfg = config
        self._out = out if out is not None else sys.stdout
        self._dt = config.simulation.dt
        self._total_ticks = tick_count(self._dt, config.simulation.end_time)

        self.tick_number = 0
        self.time = 0.0

        # Classic style: the object owns its state
        self.classic = classic_object.MovingObject(
            config.classic.start, config.classic.velocity
        )

        # Update/render style: the source owns the state, the object borrows it
        self.movement = LinearAccumulator(
            config.accumulator.start, config.accumulator.velocity
        )
        self.dynamic = dynamic_object.MovingObject()
        self.dynamic.attach_position_source(self.movement)

        # Reactive style: min and max instead of start and velocity
        self.lerp = LinearInterpolator(config.interpolator.min, config.interpolator.max)
        self.reactive = reactive_object.MovingObject()
        self.reactive.attach_position_source(self.lerp)

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def total_ticks(self) -> int:
        return self._total_ticks

    @property
    def finished(self) -> bool:
        return self.tick_number >= self._total_ticks

    def tick(self):
        """Advance the clock one step, update everything, then render everything."""
        self.tick_number += 1
        self.time = self.tick_number * self._dt
        print(f"Tick at {self.time:g}", file=self._out)

        self.classic.advance(self._dt)
        self.dynamic.advance(self._dt)

        self.lerp.set_time(self.time)

        self.classic.render(self._out)
        self.dynamic.render(self._out)
        self.reactive.render(self._out)

        log.debug(
            f"tick {self.tick_number}: classic={self.classic.position} "
            f"dynamic={self.movement.get_current_value()} "
            f"reactive={self.lerp.get_current_value()}"
        )

    def run(self) -> int:
        """Run the remaining ticks. Returns how many were executed."""
        log.info(f"Running {self._total_ticks - self.tick_number} ticks at dt={self._dt}")
        executed = 0
        while not self.finished:
            self.tick()
            executed += 1
        log.info(f"Simulation finished at t={self.time:g}")
        return executed
