"""
Schema front-ends that turn raw documents into event units.

Two document shapes are accepted and both produce the same EventUnit
nodes, so everything after this phase is shape-agnostic:

- multi-event documents with a top-level `events` mapping
- one-file-per-event documents whose top-level keys are method names

Documents with a top-level `params` mapping are base group documents
and only become meaningful when referenced.
"""

from __future__ import annotations

import logging
from typing import Any

from ...utils import is_identifier
from ..errors import BaseReferenceError, MalformedDefinitionError
from .schema_nodes import BaseGroup, BaseReference, EventUnit, ParameterNode, RawSchema

logger = logging.getLogger(__name__)

COMPONENTS_PREFIX = "#/components/parameters/"


class SchemaParser:
    """Parses raw schema documents into EventUnits."""

    def parse(self, raw: RawSchema) -> list[EventUnit]:
        """
        Parse one document into event units.

        Args:
            raw: The loaded document

        Returns:
            Event units in declaration order (empty for base group documents)

        Raises:
            MalformedDefinitionError: If a definition misses a required field
            BaseReferenceError: If a base reference is malformed
        """
        tree = raw.tree
        if "events" in tree:
            return self._parse_multi_event(raw)

        if self.is_base_group_document(raw):
            logger.debug("Skipping base group document %s", raw.path)
            return []

        if not tree:
            logger.warning("Empty schema document %s", raw.path)
            return []

        return self._parse_per_event(raw)

    @staticmethod
    def is_base_group_document(raw: RawSchema) -> bool:
        return "params" in raw.tree and "events" not in raw.tree

    def parse_base_group(self, raw: RawSchema, role: str) -> BaseGroup:
        """
        Extract the parameter map of a base group document.

        Base references declared inside the base document are ignored.

        Args:
            raw: The loaded base document
            role: Role name the group fills for the referencing event

        Returns:
            The base group

        Raises:
            BaseReferenceError: If the document has no `params` mapping
        """
        params = raw.tree.get("params")
        if not isinstance(params, dict):
            raise BaseReferenceError("base group document has no 'params' mapping", path=raw.path, key=role)

        return BaseGroup(
            name=role,
            parameters=self._parse_parameters(params, raw, "params"),
            source_path=raw.path,
        )

    # ------------------------------------------------------------------
    # Multi-event documents
    # ------------------------------------------------------------------

    def _parse_multi_event(self, raw: RawSchema) -> list[EventUnit]:
        events = raw.tree["events"]
        if not isinstance(events, dict):
            raise MalformedDefinitionError("'events' must be a mapping", path=raw.path, key="events")

        local_groups = self._parse_components(raw)

        units = []
        for method_name, event in events.items():
            key = f"events.{method_name}"
            self._check_method_name(method_name, raw, key)
            if not isinstance(event, dict):
                raise MalformedDefinitionError("event definition must be a mapping", path=raw.path, key=key)

            event_name = event.get("name")
            if not isinstance(event_name, str) or not event_name:
                raise MalformedDefinitionError("missing event 'name'", path=raw.path, key=key)

            parameters_tree = event.get("parameters") or {}
            if not isinstance(parameters_tree, dict):
                raise MalformedDefinitionError("'parameters' must be a mapping", path=raw.path, key=f"{key}.parameters")
            parameters = self._parse_parameters(parameters_tree, raw, f"{key}.parameters")

            units.append(
                EventUnit(
                    method_name=method_name,
                    event_name=event_name,
                    description=self._parse_description(event, raw, key),
                    supported_platforms=self._parse_platforms(event, raw, key),
                    parameters=parameters,
                    required=self._required_names(event, parameters, raw, key),
                    base_refs=self._parse_bases_block(event.get("bases"), raw, f"{key}.bases"),
                    local_groups=local_groups,
                    source_path=raw.path,
                )
            )
        return units

    def _parse_components(self, raw: RawSchema) -> dict[str, BaseGroup]:
        components = raw.tree.get("components") or {}
        if not isinstance(components, dict):
            raise MalformedDefinitionError("'components' must be a mapping", path=raw.path, key="components")

        groups_tree = components.get("parameters") or {}
        if not isinstance(groups_tree, dict):
            raise MalformedDefinitionError("'components.parameters' must be a mapping", path=raw.path, key="components.parameters")

        groups = {}
        for group_name, params in groups_tree.items():
            key = f"components.parameters.{group_name}"
            if not isinstance(params, dict):
                raise MalformedDefinitionError("parameter group must be a mapping", path=raw.path, key=key)
            groups[str(group_name)] = BaseGroup(
                name=str(group_name),
                parameters=self._parse_parameters(params, raw, key),
                source_path=raw.path,
            )
        return groups

    def _parse_bases_block(self, bases: Any, raw: RawSchema, key: str) -> list[BaseReference]:
        if bases is None:
            return []
        if not isinstance(bases, dict):
            raise BaseReferenceError("'bases' must be a mapping of role to {$ref: ...}", path=raw.path, key=key)

        refs = []
        for role, value in bases.items():
            if not isinstance(value, dict) or "$ref" not in value:
                raise BaseReferenceError("base reference must be a mapping with a '$ref'", path=raw.path, key=f"{key}.{role}")
            refs.append(self._make_reference(str(role), value["$ref"], raw, f"{key}.{role}"))
        return refs

    # ------------------------------------------------------------------
    # One-file-per-event documents
    # ------------------------------------------------------------------

    def _parse_per_event(self, raw: RawSchema) -> list[EventUnit]:
        units = []
        for method_name, body in raw.tree.items():
            key = str(method_name)
            self._check_method_name(method_name, raw, key)
            if not isinstance(body, dict):
                raise MalformedDefinitionError("event definition must be a mapping", path=raw.path, key=key)

            properties = body.get("properties")
            if not isinstance(properties, dict) or not properties:
                raise MalformedDefinitionError("missing 'properties' block", path=raw.path, key=key)

            # The first key of the properties block is the wire-level event name
            event_name, event_body = next(iter(properties.items()))
            event_key = f"{key}.properties.{event_name}"
            if event_body is None:
                event_body = {}
            if not isinstance(event_body, dict):
                raise MalformedDefinitionError("event properties must be a mapping", path=raw.path, key=event_key)
            if len(properties) > 1:
                logger.warning("%s: %s: ignoring extra keys after the event name in 'properties'", raw.path, key)

            params = event_body.get("params") or {}
            if not isinstance(params, dict):
                raise MalformedDefinitionError("'params' must be a mapping", path=raw.path, key=f"{event_key}.params")
            parameters = self._parse_parameters(params, raw, f"{event_key}.params")

            units.append(
                EventUnit(
                    method_name=method_name,
                    event_name=str(event_name),
                    description=self._parse_description(body, raw, key),
                    supported_platforms=self._parse_platforms(body, raw, key),
                    parameters=parameters,
                    required=self._required_names(body, parameters, raw, key),
                    base_refs=self._parse_inline_refs(event_body, raw, event_key),
                    source_path=raw.path,
                )
            )
        return units

    def _parse_inline_refs(self, event_body: dict[str, Any], raw: RawSchema, key: str) -> list[BaseReference]:
        """Every non-`params` key holding a `$ref` mapping declares a base role."""
        refs = []
        for role, value in event_body.items():
            if role == "params":
                continue
            if isinstance(value, dict) and "$ref" in value:
                refs.append(self._make_reference(str(role), value["$ref"], raw, f"{key}.{role}"))
            else:
                logger.warning("%s: %s.%s: ignoring unknown key", raw.path, key, role)
        return refs

    # ------------------------------------------------------------------
    # Shared field parsing
    # ------------------------------------------------------------------

    def _make_reference(self, role: str, target: Any, raw: RawSchema, key: str) -> BaseReference:
        if not isinstance(target, str) or not target:
            raise BaseReferenceError("'$ref' must be a non-empty string", path=raw.path, key=key)
        return BaseReference(role=role, target=target)

    def _check_method_name(self, method_name: Any, raw: RawSchema, key: str) -> None:
        if not isinstance(method_name, str) or not is_identifier(method_name):
            raise MalformedDefinitionError(f"invalid method name {method_name!r}", path=raw.path, key=key)

    def _parse_description(self, body: dict[str, Any], raw: RawSchema, key: str) -> str:
        description = body.get("description")
        if description is None:
            return ""
        if not isinstance(description, str):
            raise MalformedDefinitionError("'description' must be a string", path=raw.path, key=key)
        return description.strip()

    def _parse_platforms(self, body: dict[str, Any], raw: RawSchema, key: str) -> list[str]:
        platforms = body.get("supported_platforms")
        if platforms is None:
            raise MalformedDefinitionError("missing 'supported_platforms'", path=raw.path, key=key)
        if not isinstance(platforms, list) or not platforms:
            raise MalformedDefinitionError("'supported_platforms' must be a non-empty list", path=raw.path, key=key)

        result: list[str] = []
        for platform in platforms:
            if not isinstance(platform, str) or not platform:
                raise MalformedDefinitionError(f"invalid platform {platform!r}", path=raw.path, key=key)
            if platform not in result:
                result.append(platform)
        return result

    def _required_names(
        self,
        body: dict[str, Any],
        parameters: list[ParameterNode],
        raw: RawSchema,
        key: str,
    ) -> list[str]:
        required = body.get("required") or []
        if not isinstance(required, list) or not all(isinstance(name, str) for name in required):
            raise MalformedDefinitionError("'required' must be a list of parameter names", path=raw.path, key=key)

        names = list(dict.fromkeys(required))
        for parameter in parameters:
            if parameter.required and parameter.name not in names:
                names.append(parameter.name)
        return names

    def _parse_parameters(self, params: dict[Any, Any], raw: RawSchema, key: str) -> list[ParameterNode]:
        """
        Parse a parameter map, keeping declaration order.

        Args:
            params: Mapping of parameter name to parameter entry
            raw: Document the map belongs to
            key: Dotted key of the map (for error messages)

        Returns:
            Parameter nodes in declaration order
        """
        parameters = []
        for name, entry in params.items():
            param_key = f"{key}.{name}"
            if not isinstance(name, str) or not is_identifier(name):
                raise MalformedDefinitionError(f"invalid parameter name {name!r}", path=raw.path, key=param_key)
            if not isinstance(entry, dict):
                raise MalformedDefinitionError("parameter entry must be a mapping", path=raw.path, key=param_key)

            param_type = entry.get("type")
            if not isinstance(param_type, str) or not param_type:
                raise MalformedDefinitionError("parameter has no 'type'", path=raw.path, key=param_key)

            required = entry.get("required", False)
            if not isinstance(required, bool):
                raise MalformedDefinitionError("'required' must be a boolean", path=raw.path, key=param_key)

            parameters.append(
                ParameterNode(
                    name=name,
                    type=param_type,
                    description=_optional_str(entry.get("description")),
                    required=required,
                    default=_optional_str(entry.get("default")),
                    example=_optional_str(entry.get("example")),
                )
            )
        return parameters


def _optional_str(value: Any) -> str | None:
    """YAML scalars such as `1` or `true` are kept as their string form."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
