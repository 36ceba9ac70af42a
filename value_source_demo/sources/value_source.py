"""Value source capabilities.

Instead of storing a quantity directly, an object reads it through a value
source, so the thing producing the data can vary: static coordinates, a
path, a seek behaviour, a replicated network value, and so on.

Two capability sets are defined here:

    ValueSource         get_current_value()
    DynamicValueSource  get_current_value(), advance(dt)

The second one suits a traditional update/render loop: the world advances
its sources by a time step and then reads them. An implementation may do
nothing in advance() (a static value) or feed its state through any number
of indirections before it lands in the source.
"""

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ValueSource(Protocol[T_co]):
    """Anything that can report the current value of a quantity."""

    def get_current_value(self) -> T_co:
        """Return the current value. Must not change any state."""
        ...


@runtime_checkable
class DynamicValueSource(ValueSource[T_co], Protocol[T_co]):
    """A value source that is moved forward explicitly by its owner."""

    def advance(self, dt: float) -> None:
        """Move internal state forward by dt time units."""
        ...
