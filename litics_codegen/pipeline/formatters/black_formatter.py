"""
Black formatter for generated Python bindings.

Generated signatures list every merged parameter on one line; black
splits them one parameter per line.
"""

from __future__ import annotations

import logging

from ..config import FormatterConfig
from .base import Formatter

logger = logging.getLogger(__name__)


class BlackFormatter(Formatter):
    """Formats the Python API and dispatch modules with black."""

    FILE_SUFFIX = ".py"

    def __init__(self):
        self._black = None
        self._available = None

    def is_available(self) -> bool:
        if self._available is None:
            try:
                import black

                self._black = black
                self._available = True
            except ImportError:
                logger.warning("black is not installed, generated Python bindings are left unformatted")
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format a generated Python module.

        Returns:
            The formatted module, or the input unchanged when black is
            missing or cannot parse it
        """
        if not self.is_available():
            return code

        black = self._black
        target = getattr(black.TargetVersion, config.target_version.upper(), None)
        mode = black.Mode(
            target_versions={target} if target is not None else set(),
            line_length=config.line_length,
            string_normalization=config.string_normalization,
            magic_trailing_comma=config.magic_trailing_comma,
        )

        try:
            return black.format_str(code, mode=mode)
        except black.InvalidInput:
            # Left for the writer's syntax check to report with the file path
            return code
