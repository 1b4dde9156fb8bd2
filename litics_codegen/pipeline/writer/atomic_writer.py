"""
Atomic file writer for generated bindings.

The API and dispatch artifacts must stay structurally correlated, so
they are committed together: either every file is replaced or none is.
"""

from __future__ import annotations

import ast
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import EmissionError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Handles atomic multi-file writes with validation.

    Uses a two-phase commit approach:
    1. Validate every content and write it to a temporary file next to its target
    2. Replace the targets one by one, keeping a backup of each previous file
    3. On failure, restore the backups and delete the temporary files
    """

    def __init__(
        self,
        validate_python: Callable[[str], None] | None = None,
        validate_kotlin: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            validate_python: Optional validation function for Python code
            validate_kotlin: Optional validation function for Kotlin code
        """
        self._validate_python = validate_python or self._default_validate_python
        self._validate_kotlin = validate_kotlin or self._default_validate_kotlin

    def write(self, path: Path, content: str, language: str, validate: bool = True) -> None:
        """Write a single file atomically."""
        self.write_all({path: content}, language, validate)

    def write_all(
        self,
        files: dict[Path, str],
        language: str,
        validate: bool = True,
        overwrite: bool = True,
    ) -> None:
        """Write several files as one unit.

        Args:
            files: Mapping of target path to content
            language: Language for validation ("python" or "kotlin")
            validate: Whether to validate before writing anything
            overwrite: Whether existing targets may be replaced

        Raises:
            EmissionError: If validation fails, a target exists and overwrite
                is False, or the files cannot be written
        """
        if not overwrite:
            for path in files:
                if path.exists():
                    raise EmissionError("output file already exists, use force mode to overwrite", path=path)

        if validate:
            for path, content in files.items():
                self._validate_content(path, content, language)

        staged: list[tuple[Path, Path]] = []
        try:
            for path, content in files.items():
                path.parent.mkdir(parents=True, exist_ok=True)
                staged.append((self._write_temp(path, content), path))
        except OSError as e:
            self._discard([temp for temp, _ in staged])
            raise EmissionError(f"cannot write output: {e}") from e

        self._commit(staged)

    def _write_temp(self, path: Path, content: str) -> Path:
        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)
        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError:
            self._discard([temp_path])
            raise
        return temp_path

    def _commit(self, staged: list[tuple[Path, Path]]) -> None:
        backups: list[tuple[Path, Path | None]] = []
        try:
            for temp_path, path in staged:
                backup = None
                if path.exists():
                    backup = path.with_name(f".{path.name}.bak")
                    os.replace(path, backup)
                backups.append((path, backup))
                os.replace(temp_path, path)
                logger.info("Wrote %s", path)
        except OSError as e:
            self._rollback(backups)
            self._discard([temp for temp, _ in staged])
            raise EmissionError(f"cannot write output: {e}") from e

        for _, backup in backups:
            if backup is not None:
                backup.unlink(missing_ok=True)

    def _rollback(self, backups: list[tuple[Path, Path | None]]) -> None:
        for path, backup in reversed(backups):
            try:
                if backup is not None:
                    os.replace(backup, path)
                else:
                    path.unlink(missing_ok=True)
            except OSError:
                logger.error("Could not restore %s", path)

    @staticmethod
    def _discard(temp_paths: list[Path]) -> None:
        for temp_path in temp_paths:
            try:
                temp_path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", temp_path)

    def _validate_content(self, path: Path, content: str, language: str) -> None:
        try:
            if language == "python":
                self._validate_python(content)
            elif language == "kotlin":
                self._validate_kotlin(content)
        except EmissionError as e:
            raise EmissionError(e.message, path=path) from e

    def _default_validate_python(self, content: str) -> None:
        """Default Python validation.

        Raises:
            EmissionError: If the code does not parse
        """
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise EmissionError(f"generated Python code is not valid: {e}") from e

    def _default_validate_kotlin(self, content: str) -> None:
        """Default Kotlin validation.

        Basic structural checks only, Kotlin is not parsed.

        Raises:
            EmissionError: If the code has no class declaration
        """
        if "class " not in content:
            raise EmissionError("generated Kotlin code has no class declaration")
