"""
Reference resolver for base parameter groups.

Resolves the base references of an event unit to the parameter maps
they point at. Resolution is one hop deep: references declared inside
a base document are never followed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import BaseReferenceError, SchemaNotFoundError
from ..loader.loader import SchemaLoader
from ..loader.parser import COMPONENTS_PREFIX, SchemaParser
from ..loader.schema_nodes import BaseGroup, BaseReference, EventUnit

logger = logging.getLogger(__name__)


class BaseReferenceResolver:
    """Resolves base references to BaseGroups."""

    def __init__(self, loader: SchemaLoader, parser: SchemaParser | None = None):
        """
        Initialize the resolver.

        Args:
            loader: Loader used to read referenced files (and cache them)
            parser: Parser used to extract the referenced parameter maps
        """
        self.loader = loader
        self.parser = parser or SchemaParser()

    def resolve(self, unit: EventUnit) -> list[BaseGroup]:
        """
        Resolve all base references of an event unit.

        Args:
            unit: The event unit

        Returns:
            Base groups in reference declaration order

        Raises:
            BaseReferenceError: If a reference is dangling or malformed
        """
        groups = []
        for ref in unit.base_refs:
            if ref.is_local:
                group = self._resolve_local_ref(unit, ref)
            else:
                group = self._resolve_external_ref(unit, ref)
            logger.debug("%s: resolved base '%s' -> %s (%d params)", unit.method_name, ref.role, ref.target, len(group.parameters))
            groups.append(group)
        return groups

    def _resolve_local_ref(self, unit: EventUnit, ref: BaseReference) -> BaseGroup:
        """Resolve a `#/components/parameters/<group>` reference."""
        if not ref.target.startswith(COMPONENTS_PREFIX):
            raise BaseReferenceError(
                f"unsupported local reference {ref.target!r}, expected '{COMPONENTS_PREFIX}<group>'",
                path=unit.source_path,
                key=f"{unit.method_name}.{ref.role}",
            )

        group_name = ref.target[len(COMPONENTS_PREFIX) :]
        group = unit.local_groups.get(group_name)
        if group is None:
            raise BaseReferenceError(
                f"unknown parameter group {group_name!r}",
                path=unit.source_path,
                key=f"{unit.method_name}.{ref.role}",
            )
        return group

    def _resolve_external_ref(self, unit: EventUnit, ref: BaseReference) -> BaseGroup:
        """Resolve a reference to a file, relative to the referencing file."""
        base_dir = unit.source_path.parent if unit.source_path else Path.cwd()
        try:
            raw = self.loader.load_file(base_dir / ref.target)
        except SchemaNotFoundError as e:
            raise BaseReferenceError(
                f"referenced base file {ref.target!r} does not exist",
                path=unit.source_path,
                key=f"{unit.method_name}.{ref.role}",
            ) from e

        return self.parser.parse_base_group(raw, ref.role)
