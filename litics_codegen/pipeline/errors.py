"""
Error taxonomy for the generation pipeline.

Every error is fatal to a generation run. Errors carry the offending
file path and schema key so a failing build step can point at the
faulty schema entry.
"""

from __future__ import annotations

from pathlib import Path


class LiticsCodegenError(Exception):
    """Base class for all generation errors.

    Attributes:
        path: File the error originates from (if known)
        key: Schema key the error refers to (if known)
    """

    def __init__(self, message: str, path: str | Path | None = None, key: str | None = None):
        self.message = message
        self.path = str(path) if path is not None else None
        self.key = key
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [p for p in (self.path, self.key) if p]
        parts.append(self.message)
        return ": ".join(parts)


class SchemaNotFoundError(LiticsCodegenError):
    """Raised when an input path does not exist."""


class SchemaParseError(LiticsCodegenError):
    """Raised when a document is not well-formed."""


class BaseReferenceError(LiticsCodegenError):
    """Raised when a base group reference is dangling or malformed.

    This can happen when:
    - The referenced file does not exist
    - The referenced file has no `params` mapping
    - A `#/components/parameters/...` reference names an unknown group
    """


class MalformedDefinitionError(LiticsCodegenError):
    """Raised when an event definition misses a required field."""


class DuplicateParameterError(MalformedDefinitionError):
    """Raised when a parameter name appears twice and the merge policy forbids it."""


class DuplicateMethodNameError(LiticsCodegenError):
    """Raised when two schema units resolve to the same method name."""


class EmissionError(LiticsCodegenError):
    """Raised when generated code fails validation or cannot be written."""
