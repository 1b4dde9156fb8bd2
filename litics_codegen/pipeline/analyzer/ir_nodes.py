"""
IR (Intermediate Representation) node definitions.

These nodes represent fully resolved events, ready for binding
emission. All base references are merged and required flags computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ParamDefinition:
    """A parameter of a generated tracking method."""

    name: str = ""
    type: str = "string"
    description: str | None = None
    is_required: bool = False
    default_value: str | None = None
    example: str | None = None


@dataclass(frozen=True)
class EventDefinition:
    """The canonical, merged description of one trackable event."""

    method_name: str = ""
    description: str = ""
    event_name: str = ""  # Wire-level identifier sent to trackers
    parameters: tuple[ParamDefinition, ...] = ()
    supported_platforms: tuple[str, ...] = ()
    source_path: Path | None = None

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)
