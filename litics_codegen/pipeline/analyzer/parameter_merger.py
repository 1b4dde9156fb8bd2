"""
Parameter merger.

Combines an event's own parameters with the parameters of its base
groups into one ordered, name-deduplicated list.
"""

from __future__ import annotations

import logging

from ..config import DuplicateParameterPolicy
from ..errors import DuplicateParameterError
from ..loader.schema_nodes import BaseGroup, EventUnit, ParameterNode
from .ir_nodes import ParamDefinition

logger = logging.getLogger(__name__)


class ParameterMerger:
    """Merges local and base parameters.

    Order: local parameters in declaration order, then each base group
    in reference order. The first occurrence of a name wins unless the
    policy is DuplicateParameterPolicy.ERROR.

    Required status comes only from the event's own required list, so
    a base parameter is required exactly when the consuming event names it.
    """

    def __init__(self, policy: DuplicateParameterPolicy = DuplicateParameterPolicy.FIRST_WINS):
        self.policy = policy

    def merge(self, unit: EventUnit, groups: list[BaseGroup]) -> tuple[ParamDefinition, ...]:
        """
        Merge parameters of an event unit and its resolved base groups.

        Args:
            unit: The event unit
            groups: Resolved base groups, in reference declaration order

        Returns:
            Merged parameters

        Raises:
            DuplicateParameterError: If a name repeats and the policy is ERROR
        """
        sources: list[tuple[str, list[ParameterNode]]] = [("local", unit.parameters)]
        sources.extend((f"base '{group.name}'", group.parameters) for group in groups)

        required = set(unit.required)
        seen: dict[str, str] = {}
        merged: list[ParamDefinition] = []

        for origin, parameters in sources:
            for param in parameters:
                if param.name in seen:
                    if self.policy == DuplicateParameterPolicy.ERROR:
                        raise DuplicateParameterError(
                            f"parameter {param.name!r} from {origin} already declared by {seen[param.name]}",
                            path=unit.source_path,
                            key=unit.method_name,
                        )
                    logger.debug("%s: dropping %s parameter %r, declared by %s", unit.method_name, origin, param.name, seen[param.name])
                    continue

                seen[param.name] = origin
                merged.append(
                    ParamDefinition(
                        name=param.name,
                        type=param.type,
                        description=param.description,
                        is_required=param.name in required,
                        default_value=param.default,
                        example=param.example,
                    )
                )

        for name in unit.required:
            if name not in seen:
                logger.warning("%s: %s: required parameter %r is not declared", unit.source_path, unit.method_name, name)

        return tuple(merged)
