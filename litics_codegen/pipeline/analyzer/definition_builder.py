"""
Definition builder.

Phase 2 of the pipeline: resolve base references, merge parameters and
assemble one immutable EventDefinition per event unit.
"""

from __future__ import annotations

import logging

from ..config import DuplicateParameterPolicy
from ..errors import DuplicateMethodNameError
from ..loader.loader import SchemaLoader
from ..loader.schema_nodes import EventUnit
from .ir_nodes import EventDefinition
from .parameter_merger import ParameterMerger
from .reference_resolver import BaseReferenceResolver

logger = logging.getLogger(__name__)


class DefinitionBuilder:
    """Builds canonical EventDefinitions from event units."""

    def __init__(
        self,
        loader: SchemaLoader,
        policy: DuplicateParameterPolicy = DuplicateParameterPolicy.FIRST_WINS,
    ):
        self.resolver = BaseReferenceResolver(loader)
        self.merger = ParameterMerger(policy)

    def build(self, unit: EventUnit) -> EventDefinition:
        """
        Build the definition of a single event unit.

        Args:
            unit: The event unit

        Returns:
            The merged event definition
        """
        groups = self.resolver.resolve(unit)
        return EventDefinition(
            method_name=unit.method_name,
            description=unit.description,
            event_name=unit.event_name,
            parameters=self.merger.merge(unit, groups),
            supported_platforms=tuple(unit.supported_platforms),
            source_path=unit.source_path,
        )

    def build_all(self, units: list[EventUnit]) -> list[EventDefinition]:
        """
        Build definitions for all units, keeping unit order.

        Raises:
            DuplicateMethodNameError: If two units share a method name
        """
        definitions: list[EventDefinition] = []
        by_name: dict[str, EventDefinition] = {}

        for unit in units:
            previous = by_name.get(unit.method_name)
            if previous is not None:
                raise DuplicateMethodNameError(
                    f"method name already defined in {previous.source_path}",
                    path=unit.source_path,
                    key=unit.method_name,
                )

            definition = self.build(unit)
            by_name[definition.method_name] = definition
            definitions.append(definition)

        logger.info("Built %d event definitions", len(definitions))
        return definitions
