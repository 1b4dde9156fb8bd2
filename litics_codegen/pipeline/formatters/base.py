"""
Base class for formatters of generated bindings.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..config import FormatterConfig


class Formatter(ABC):
    """Post-processes the generated artifacts of one language."""

    # Suffix of the artifacts this formatter applies to
    FILE_SUFFIX: str = ""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format one artifact.

        Args:
            code: The generated source
            config: Formatter configuration

        Returns:
            Formatted source
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the formatter's dependencies are installed."""

    def format_files(self, files: dict[Path, str], config: FormatterConfig) -> dict[Path, str]:
        """Format the artifacts with a matching suffix, leaving the others untouched."""
        return {
            path: self.format(code, config) if path.suffix == self.FILE_SUFFIX else code
            for path, code in files.items()
        }
