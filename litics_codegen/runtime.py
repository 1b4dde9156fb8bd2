"""
Runtime contract of the generated Python bindings.

Generated dispatch classes build TrackingEvent values and hand them to
EventTracker instances. Delivering events to an analytics backend is
the tracker's job, not this package's.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TrackingEvent:
    """An event name and its parameters, in declaration order."""

    name: str
    params: tuple[TrackingEvent.Parameter, ...] = ()

    @dataclass(frozen=True)
    class Parameter:
        name: str
        value: str

    def as_dict(self) -> dict[str, str]:
        return {param.name: param.value for param in self.params}


class EventTracker(ABC):
    """A sink for tracking events, gated by platform support."""

    def __init__(self, platforms: Iterable[str] = ()):
        self.platforms = frozenset(platforms)

    def supports_event_tracking(self, platforms: Sequence[str]) -> bool:
        """Whether this tracker handles events declared for any of `platforms`."""
        return any(platform in self.platforms for platform in platforms)

    @abstractmethod
    def track_event(self, event: TrackingEvent) -> None:
        """Forward an event to the analytics backend."""
