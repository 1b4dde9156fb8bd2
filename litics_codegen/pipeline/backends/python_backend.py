"""
Python binding backend.

Generates an ABC with one abstract method per event and a subclass
dispatching to EventTracker instances.
"""

from __future__ import annotations

import json
import keyword
from pathlib import Path
from typing import Any

from ...utils import pascal_to_snake_case
from ..analyzer.ir_nodes import EventDefinition, ParamDefinition
from .base import CodeBackend, MethodBinding


class PythonBackend(CodeBackend):
    """Python binding backend.

    Parameters are keyword-only, so required and optional parameters can
    keep their declaration order. Python overrides do not inherit default
    values, so the override repeats the default of the abstract method.
    """

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"
    NULL_LITERAL = "None"
    OVERRIDE_INHERITS_DEFAULTS = False
    LOCAL_NAMES = frozenset(
        {
            "self",
            "params",
            "supported_platforms",
            "tracking_event",
            "event_tracker",
            "tuple",
            "TrackingEvent",
            "EventTracker",
        }
    )

    def api_module_name(self) -> str:
        return pascal_to_snake_case(self.config.api_class_name)

    def api_path(self) -> Path:
        return self.output_dir() / f"{self.api_module_name()}.{self.FILE_EXTENSION}"

    def impl_path(self) -> Path:
        return self.output_dir() / f"{pascal_to_snake_case(self.config.impl_class_name)}.{self.FILE_EXTENSION}"

    def translate_type(self, param: ParamDefinition) -> str:
        # Every tracking parameter is sent as a string
        return "str" if param.is_required else "str | None"

    def format_string_literal(self, value: str) -> str:
        return json.dumps(value, ensure_ascii=False)

    def format_platforms(self, platforms: tuple[str, ...]) -> str:
        literals = [self.format_string_literal(p) for p in platforms]
        if len(literals) == 1:
            return f"({literals[0]},)"
        return "(" + ", ".join(literals) + ")"

    def escape_identifier(self, name: str, is_parameter: bool) -> str:
        if keyword.iskeyword(name) or (is_parameter and name in self.reserved_names()):
            return f"{name}_"
        return name

    def reserved_names(self) -> frozenset[str]:
        # The generated module also binds the class names at module level
        return self.LOCAL_NAMES | {self.config.api_class_name, self.config.impl_class_name}

    def build_doc_lines(self, definition: EventDefinition) -> list[str]:
        """Docstring lines: the description, then an Args section."""
        lines = [self._escape_docstring(line) for line in definition.description.splitlines()]
        documented = [p for p in definition.parameters if p.description]
        if not documented:
            return lines

        if not lines:
            lines.append(f"Track the {self._escape_docstring(definition.event_name)} event.")
        lines.extend(["", "Args:"])
        for param in documented:
            description = self._escape_docstring(" ".join(param.description.split()))
            lines.append(f"    {self.escape_identifier(param.name, is_parameter=True)}: {description}")
        return lines

    @staticmethod
    def _escape_docstring(text: str) -> str:
        text = text.replace("\\", "\\\\").rstrip()
        # A trailing quote would merge with the closing triple quote
        if text.endswith('"'):
            text = text[:-1] + '\\"'
        return text.replace('"""', '\\"\\"\\"')

    def _prepare_context(self, methods: list[MethodBinding], generation_comment: str) -> dict[str, Any]:
        context = super()._prepare_context(methods, generation_comment)
        api_module = self.api_module_name()
        if self.config.namespace:
            api_module = f"{self.config.namespace}.{api_module}"
        context["api_module"] = api_module
        context["runtime_module"] = self.config.python_runtime_module
        return context
