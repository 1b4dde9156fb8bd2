"""
Pipeline generator.

Runs the whole transform: load -> parse -> resolve/merge/build -> emit ->
write. Every error is raised before the first output file is touched.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .analyzer import DefinitionBuilder, EventDefinition
from .backends import BACKENDS
from .config import CodeGeneratorConfig, OutputMode
from .formatters import BlackFormatter
from .loader import SchemaLoader, SchemaParser
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates tracking bindings from event schemas."""

    def __init__(self, config: CodeGeneratorConfig | None = None, language: str = "kotlin"):
        """
        Initialize the generator.

        Args:
            config: Code generation configuration
            language: Target language ("kotlin" or "python")
        """
        if language not in BACKENDS:
            raise ValueError(f"Language not supported: {language}")

        self.config = config or CodeGeneratorConfig()
        self.language = language
        self.loader = SchemaLoader(self.config.schema_extensions)
        self.parser = SchemaParser()
        self.builder = DefinitionBuilder(self.loader, self.config.duplicate_parameter_policy)
        self.backend = BACKENDS[language](self.config)
        self.formatter = BlackFormatter() if self.config.formatter.enabled else None
        self.writer = AtomicWriter()

    def load_definitions(self, source: str | Path) -> list[EventDefinition]:
        """
        Load and resolve every event of a schema file or directory.

        Args:
            source: Schema file or directory

        Returns:
            Event definitions in document order
        """
        units = []
        for raw in self.loader.load(source):
            units.extend(self.parser.parse(raw))

        if not units:
            logger.warning("No events found in %s", source)

        return self.builder.build_all(units)

    def render(self, definitions: list[EventDefinition]) -> dict[Path, str]:
        """
        Render both artifacts without writing them.

        Returns:
            Mapping of path (relative to the target directory) to content
        """
        files = self.backend.render(definitions, self._generation_comment())
        if self.formatter is not None:
            files = self.formatter.format_files(files, self.config.formatter)
        return files

    def generate(self, source: str | Path) -> dict[Path, str]:
        """Load, resolve and render, returning the artifacts in memory."""
        return self.render(self.load_definitions(source))

    def write(self, source: str | Path, target_dir: str | Path) -> list[Path]:
        """
        Run the pipeline and write both artifacts under target_dir.

        Args:
            source: Schema file or directory
            target_dir: Root directory of the generated sources

        Returns:
            Paths of the written files

        Raises:
            LiticsCodegenError: On any resolution or emission failure, in
                which case no file is written
        """
        files = self.generate(source)
        target_dir = Path(target_dir)
        outputs = {target_dir / path: code for path, code in files.items()}

        self.writer.write_all(
            outputs,
            self.language,
            validate=self.config.output.validate_before_write,
            overwrite=self.config.output.mode == OutputMode.FORCE,
        )
        return list(outputs)

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""

        from ..litics_codegen import litics_codegen as click_command

        command_line = reconstruct_command_line(click_command)
        comment_prefix = self.backend._get_comment_prefix()
        return f"{comment_prefix} Generated by litics_codegen v{__version__} : {command_line}"
