"""
Schema document loader.

Phase 1 of the pipeline: read YAML (or JSON) documents into raw
mapping trees. No interpretation of the content happens here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import yaml

from ..errors import SchemaNotFoundError, SchemaParseError
from .schema_nodes import RawSchema

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".yaml", ".yml", ".json")


class SchemaLoader:
    """Loads schema documents from a file or a directory."""

    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS):
        """
        Initialize the loader.

        Args:
            extensions: File extensions picked up in directory mode
        """
        self.extensions = tuple(ext.lower() for ext in extensions)
        self._cache: dict[Path, RawSchema] = {}

    def load(self, source: str | Path) -> list[RawSchema]:
        """
        Load a single document or every document of a directory.

        Args:
            source: File or directory path

        Returns:
            One RawSchema per document, directory entries sorted by name

        Raises:
            SchemaNotFoundError: If the path does not exist
            SchemaParseError: If a document is not well-formed
        """
        source = Path(source)
        if not source.exists():
            raise SchemaNotFoundError("schema source does not exist", path=source)

        if source.is_dir():
            return [self.load_file(path) for path in self.list_documents(source)]

        return [self.load_file(source)]

    def list_documents(self, directory: Path) -> list[Path]:
        """List the schema documents directly inside a directory."""
        documents = sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in self.extensions)
        logger.debug("Found %d schema documents in %s", len(documents), directory)
        return documents

    def load_file(self, path: str | Path) -> RawSchema:
        """
        Load one document.

        Args:
            path: Path to a YAML or JSON document

        Returns:
            The parsed document

        Raises:
            SchemaNotFoundError: If the file does not exist
            SchemaParseError: If the file is not a well-formed mapping
        """
        path = Path(path).resolve()
        if path in self._cache:
            return self._cache[path]

        if not path.is_file():
            raise SchemaNotFoundError("schema file does not exist", path=path)

        try:
            with open(path, encoding="utf-8") as f:
                tree = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SchemaParseError(f"malformed document: {e}", path=path) from e

        if tree is None:
            tree = {}
        if not isinstance(tree, dict):
            raise SchemaParseError(f"top-level value must be a mapping, got {type(tree).__name__}", path=path)

        logger.debug("Loaded %s", path)
        raw = RawSchema(path=path, tree=tree)
        self._cache[path] = raw
        return raw
