"""
Base class for binding emission backends.

Both artifacts (abstract API and dispatch implementation) are rendered
from the same list of MethodBindings, so every abstract method has
exactly one override with the same name and parameter order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jinja2

from ...utils import namespace_to_path
from ..analyzer.ir_nodes import EventDefinition, ParamDefinition
from ..config import CodeGeneratorConfig
from ..errors import DuplicateMethodNameError, MalformedDefinitionError


@dataclass
class ParamBinding:
    """A parameter as it appears in both generated signatures."""

    name: str = ""  # Wire-level parameter name
    identifier: str = ""  # Escaped identifier in the target language
    type: str = ""
    is_nullable: bool = False
    default: str | None = None  # Only rendered in the abstract API
    override_default: str | None = None  # Only set when overrides do not inherit defaults
    description: str | None = None


@dataclass
class MethodBinding:
    """One generated method, shared by the API and the dispatch artifact."""

    name: str = ""
    identifier: str = ""
    event_name: str = ""
    platforms_literal: str = ""
    params: list[ParamBinding] = field(default_factory=list)
    doc_lines: list[str] = field(default_factory=list)


class CodeBackend(ABC):
    """Abstract base class for binding emission backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    NULL_LITERAL: str = ""

    # Whether an override inherits the default values of the method it overrides
    OVERRIDE_INHERITS_DEFAULTS: bool = True

    # Names referred to by the generated method bodies; parameters must not shadow them
    LOCAL_NAMES: frozenset[str] = frozenset()

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        # Add custom filters
        self.jinja_env.filters["string_literal"] = self.format_string_literal

        self.api_template = self.jinja_env.get_template(f"api.{self.FILE_EXTENSION}.jinja2")
        self.impl_template = self.jinja_env.get_template(f"impl.{self.FILE_EXTENSION}.jinja2")

    def render(self, definitions: list[EventDefinition], generation_comment: str = "") -> dict[Path, str]:
        """
        Render both artifacts.

        Args:
            definitions: Event definitions, in emission order
            generation_comment: Comment placed at the top of both files

        Returns:
            Mapping of relative output path to file content, API first
        """
        methods = []
        by_identifier: dict[str, EventDefinition] = {}
        for definition in definitions:
            method = self.bind_method(definition)
            previous = by_identifier.get(method.identifier)
            if previous is not None:
                raise DuplicateMethodNameError(
                    f"method {definition.method_name!r} clashes with {previous.method_name!r} "
                    f"from {previous.source_path} once escaped as {method.identifier!r}",
                    path=definition.source_path,
                    key=definition.method_name,
                )
            by_identifier[method.identifier] = definition
            methods.append(method)

        context = self._prepare_context(methods, generation_comment)

        return {
            self.api_path(): self.api_template.render(context),
            self.impl_path(): self.impl_template.render(context),
        }

    def bind_method(self, definition: EventDefinition) -> MethodBinding:
        """
        Build the shared method model of one event definition.

        Args:
            definition: The event definition

        Returns:
            The method binding

        Raises:
            MalformedDefinitionError: If two parameters escape to the same identifier
        """
        params = []
        identifiers: set[str] = set()
        for param in definition.parameters:
            binding = self.bind_param(param)
            if binding.identifier in identifiers:
                raise MalformedDefinitionError(
                    f"parameter {param.name!r} clashes with another parameter once escaped as {binding.identifier!r}",
                    path=definition.source_path,
                    key=definition.method_name,
                )
            identifiers.add(binding.identifier)
            params.append(binding)

        return MethodBinding(
            name=definition.method_name,
            identifier=self.escape_identifier(definition.method_name, is_parameter=False),
            event_name=definition.event_name,
            platforms_literal=self.format_platforms(definition.supported_platforms),
            params=params,
            doc_lines=self.build_doc_lines(definition),
        )

    def bind_param(self, param: ParamDefinition) -> ParamBinding:
        """Build the binding of one parameter (required means non-nullable)."""
        is_nullable = not param.is_required

        default = None
        if param.default_value is not None:
            default = self.format_default(param.default_value)
        elif is_nullable:
            default = self.NULL_LITERAL

        return ParamBinding(
            name=param.name,
            identifier=self.escape_identifier(param.name, is_parameter=True),
            type=self.translate_type(param),
            is_nullable=is_nullable,
            default=default,
            override_default=None if self.OVERRIDE_INHERITS_DEFAULTS else default,
            description=param.description,
        )

    def format_default(self, value: str) -> str:
        """A declared default is a code fragment of the target language, unless quoting is enabled."""
        if self.config.quote_default_values:
            return self.format_string_literal(value)
        return value

    def reserved_names(self) -> frozenset[str]:
        """Names a parameter must not take, since the generated code refers to them."""
        return self.LOCAL_NAMES

    def _prepare_context(self, methods: list[MethodBinding], generation_comment: str) -> dict[str, Any]:
        """
        Prepare the template context shared by both artifacts.

        Args:
            methods: Method bindings
            generation_comment: Comment placed at the top of both files

        Returns:
            Dictionary of template variables
        """
        return {
            "generation_comment": generation_comment,
            "namespace": self.config.namespace,
            "api_class_name": self.config.api_class_name,
            "impl_class_name": self.config.impl_class_name,
            "methods": methods,
        }

    def output_dir(self) -> Path:
        """Directory of the generated files, relative to the target directory."""
        return namespace_to_path(self.config.namespace)

    @abstractmethod
    def api_path(self) -> Path:
        """Relative path of the abstract API artifact."""

    @abstractmethod
    def impl_path(self) -> Path:
        """Relative path of the dispatch implementation artifact."""

    @abstractmethod
    def translate_type(self, param: ParamDefinition) -> str:
        """
        Translate a parameter to a language-specific type string.

        Args:
            param: The parameter

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def format_string_literal(self, value: str) -> str:
        """Format a string as a literal of the target language."""

    @abstractmethod
    def format_platforms(self, platforms: tuple[str, ...]) -> str:
        """Format the supported platforms as a collection literal."""

    @abstractmethod
    def escape_identifier(self, name: str, is_parameter: bool) -> str:
        """Escape a name that is not usable as-is in the target language."""

    @abstractmethod
    def build_doc_lines(self, definition: EventDefinition) -> list[str]:
        """Build the documentation lines of a generated abstract method."""

    def _get_comment_prefix(self) -> str:
        """Get the comment prefix for the language."""
        return "#" if self.FILE_EXTENSION == "py" else "//"
