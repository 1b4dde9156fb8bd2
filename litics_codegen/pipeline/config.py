"""
Configuration for the binding generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml

from .errors import SchemaNotFoundError, SchemaParseError


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output files already exist.
    """

    FORCE = "force"  # Default: overwrite generated files
    ERROR_IF_EXISTS = "error"  # Refuse to overwrite existing files


class DuplicateParameterPolicy(str, Enum):
    """How to handle a parameter name declared by more than one source."""

    FIRST_WINS = "first_wins"  # Local beats base, earlier base beats later base
    ERROR = "error"  # Treat as a schema authoring error


class TargetPlatform(str, Enum):
    """Kotlin compilation target of the generated bindings."""

    JVM = "jvm"
    JS = "js"


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for post-processing formatters (Python output only)."""

    # Whether formatting is enabled
    enabled: bool = False

    # Line length for the formatter
    line_length: int = 100

    # Python version target (e.g., "py312", "py313")
    target_version: str = "py312"

    # Whether to use string normalization (convert single quotes to double)
    string_normalization: bool = True

    magic_trailing_comma: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for binding generation."""

    # Package (Kotlin) or dotted module path (Python) of the generated files
    namespace: str = ""

    # Names of the two generated classes
    api_class_name: str = "GeneratedEventsAnalytics"
    impl_class_name: str = "GeneratedEventsAnalyticsImpl"

    # Kotlin compilation target, "js" adds @JsExport
    target_platform: TargetPlatform = TargetPlatform.JVM

    # Where the generated code imports TrackingEvent and EventTracker from
    kotlin_runtime_package: str = "com.deliveryhero.litics"
    python_runtime_module: str = "litics_codegen.runtime"

    duplicate_parameter_policy: DuplicateParameterPolicy = DuplicateParameterPolicy.FIRST_WINS

    # Declared defaults are target-language expressions; set to emit them as string literals instead
    quote_default_values: bool = False

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # File extensions picked up when the source is a directory
    schema_extensions: list[str] = field(default_factory=lambda: [".yaml", ".yml", ".json"])

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.FORCE)),
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif k == "target_platform":
                config.target_platform = TargetPlatform(v)
            elif k == "duplicate_parameter_policy":
                config.duplicate_parameter_policy = DuplicateParameterPolicy(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_file(path: str | Path) -> CodeGeneratorConfig:
        """Load a config from a JSON or YAML file."""
        path = Path(path)
        if not path.exists():
            raise SchemaNotFoundError("config file does not exist", path=path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise SchemaParseError(f"invalid config file: {e}", path=path) from e
        if not isinstance(data, dict):
            raise SchemaParseError("config file must contain a mapping", path=path)
        try:
            return CodeGeneratorConfig.from_dict(data)
        except (TypeError, ValueError) as e:
            raise SchemaParseError(f"invalid config value: {e}", path=path) from e

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "namespace": self.namespace,
            "api_class_name": self.api_class_name,
            "impl_class_name": self.impl_class_name,
            "target_platform": self.target_platform.value,
            "kotlin_runtime_package": self.kotlin_runtime_package,
            "python_runtime_module": self.python_runtime_module,
            "duplicate_parameter_policy": self.duplicate_parameter_policy.value,
            "quote_default_values": self.quote_default_values,
            "add_generation_comment": self.add_generation_comment,
            "schema_extensions": self.schema_extensions,
            "formatter": {
                "enabled": self.formatter.enabled,
                "line_length": self.formatter.line_length,
                "target_version": self.formatter.target_version,
                "string_normalization": self.formatter.string_normalization,
                "magic_trailing_comma": self.formatter.magic_trailing_comma,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }
