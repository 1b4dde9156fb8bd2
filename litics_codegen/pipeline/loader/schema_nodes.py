"""
Schema node definitions.

Typed representation of event schema documents, built by the
validating front-ends in parser.py. Base references are recorded
but not resolved at this stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class RawSchema:
    """One parsed document and where it came from."""

    path: Path
    tree: dict[str, Any] = field(default_factory=dict)


@dataclass
class ParameterNode:
    """A parameter entry as declared in a document."""

    name: str = ""
    type: str = ""
    description: str | None = None
    required: bool = False  # Only meaningful for locally declared parameters
    default: str | None = None
    example: str | None = None


@dataclass
class BaseReference:
    """A reference from an event to a base parameter group.

    `target` is either a path relative to the referencing file or a
    `#/components/parameters/<group>` pointer into the same document.
    """

    role: str = ""
    target: str = ""

    @property
    def is_local(self) -> bool:
        return self.target.startswith("#")


@dataclass
class BaseGroup:
    """A named, reusable parameter map."""

    name: str = ""
    parameters: list[ParameterNode] = field(default_factory=list)
    source_path: Path | None = None


@dataclass
class EventUnit:
    """One event as declared by a schema unit, before merging."""

    method_name: str = ""
    event_name: str = ""
    description: str = ""
    supported_platforms: list[str] = field(default_factory=list)
    parameters: list[ParameterNode] = field(default_factory=list)
    required: list[str] = field(default_factory=list)
    base_refs: list[BaseReference] = field(default_factory=list)

    # Groups from the same document's components block
    local_groups: dict[str, BaseGroup] = field(default_factory=dict)

    source_path: Path | None = None
