"""
Kotlin binding backend.

Generates an abstract class and its dispatching implementation, the
way the Gradle plugin emits them for Android, iOS (KMP) and JS targets.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..analyzer.ir_nodes import EventDefinition, ParamDefinition
from ..config import TargetPlatform
from .base import CodeBackend, MethodBinding

# Kotlin hard keywords, escaped with backticks
KOTLIN_HARD_KEYWORDS = {
    "as",
    "break",
    "class",
    "continue",
    "do",
    "else",
    "false",
    "for",
    "fun",
    "if",
    "in",
    "interface",
    "is",
    "null",
    "object",
    "package",
    "return",
    "super",
    "this",
    "throw",
    "true",
    "try",
    "typealias",
    "typeof",
    "val",
    "var",
    "when",
    "while",
}

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
}


class KotlinBackend(CodeBackend):
    """Kotlin binding backend."""

    TEMPLATE_LANG = "kotlin"
    FILE_EXTENSION = "kt"
    NULL_LITERAL = "null"
    OVERRIDE_INHERITS_DEFAULTS = True
    LOCAL_NAMES = frozenset(
        {
            "params",
            "supportedPlatforms",
            "trackingEvent",
            "eventTrackers",
            "it",
            "mutableListOf",
            "arrayOf",
            "TrackingEvent",
            "EventTracker",
        }
    )

    def api_path(self) -> Path:
        return self.output_dir() / f"{self.config.api_class_name}.{self.FILE_EXTENSION}"

    def impl_path(self) -> Path:
        return self.output_dir() / f"{self.config.impl_class_name}.{self.FILE_EXTENSION}"

    def translate_type(self, param: ParamDefinition) -> str:
        # Every tracking parameter is sent as a string
        return "String" if param.is_required else "String?"

    def format_string_literal(self, value: str) -> str:
        chars = []
        for ch in value:
            if ch in _STRING_ESCAPES:
                chars.append(_STRING_ESCAPES[ch])
            elif ord(ch) < 0x20:
                chars.append(f"\\u{ord(ch):04x}")
            else:
                chars.append(ch)
        return '"' + "".join(chars) + '"'

    def format_platforms(self, platforms: tuple[str, ...]) -> str:
        return "arrayOf(" + ", ".join(self.format_string_literal(p) for p in platforms) + ")"

    def escape_identifier(self, name: str, is_parameter: bool) -> str:
        if is_parameter and name in self.reserved_names():
            return f"{name}_"
        if name in KOTLIN_HARD_KEYWORDS:
            return f"`{name}`"
        return name

    def build_doc_lines(self, definition: EventDefinition) -> list[str]:
        """KDoc lines: the description, then one @param tag per documented parameter."""
        lines = [self._escape_kdoc(line) for line in definition.description.splitlines()]
        param_lines = [
            f"@param {self.escape_identifier(p.name, is_parameter=True)} {self._escape_kdoc(' '.join(p.description.split()))}"
            for p in definition.parameters
            if p.description
        ]
        if lines and param_lines:
            lines.append("")
        return lines + param_lines

    @staticmethod
    def _escape_kdoc(text: str) -> str:
        return text.replace("*/", "*&#47;").replace("/*", "&#47;*").rstrip()

    def _prepare_context(self, methods: list[MethodBinding], generation_comment: str) -> dict[str, Any]:
        context = super()._prepare_context(methods, generation_comment)
        context["runtime_package"] = self.config.kotlin_runtime_package
        context["js_export"] = self.config.target_platform == TargetPlatform.JS
        return context
