"""
Utility functions for the binding generator.
"""

import re
from pathlib import Path

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z]|[0-9]|$)|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " "))


def pascal_to_snake_case(text: str) -> str:
    """Convert PascalCase or camelCase text to snake_case.

    Examples:
        "GeneratedEventsAnalytics" -> "generated_events_analytics"
        "GeneratedEventsAnalyticsImpl" -> "generated_events_analytics_impl"
        "HTTPTracker" -> "http_tracker"
        "track2Events" -> "track_2_events"

    Args:
        text: The text to convert

    Returns:
        snake_case string
    """
    return "_".join(word.lower() for word in _split_into_words(text))


def is_identifier(text: str) -> bool:
    """Check that text is an ASCII identifier usable in Kotlin and Python."""
    return bool(_IDENTIFIER_PATTERN.match(text))


def namespace_to_path(namespace: str) -> Path:
    """Map a dotted namespace to a relative directory ("a.b" -> a/b)."""
    parts = [part for part in namespace.split(".") if part]
    return Path(*parts) if parts else Path()
