"""
Pipeline - event schema to tracking bindings generator.

This module provides a multi-phase architecture:

1. Phase 1 (Loader): Read YAML/JSON documents into raw trees
2. Phase 2 (Parser): Validate raw trees into typed event units
3. Phase 3 (Analyzer): Resolve base groups, merge parameters, build definitions
4. Phase 4 (Backend): Render the abstract API and dispatch artifacts
5. Phase 5 (Formatter): Optional post-processing (black for Python)
6. Phase 6 (Writer): Write both artifacts atomically
"""

from __future__ import annotations

from .config import (
    CodeGeneratorConfig,
    DuplicateParameterPolicy,
    FormatterConfig,
    OutputConfig,
    OutputMode,
    TargetPlatform,
)
from .errors import (
    BaseReferenceError,
    DuplicateMethodNameError,
    DuplicateParameterError,
    EmissionError,
    LiticsCodegenError,
    MalformedDefinitionError,
    SchemaNotFoundError,
    SchemaParseError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "DuplicateParameterPolicy",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "TargetPlatform",
    "AtomicWriter",
    "LiticsCodegenError",
    "SchemaNotFoundError",
    "SchemaParseError",
    "BaseReferenceError",
    "MalformedDefinitionError",
    "DuplicateParameterError",
    "DuplicateMethodNameError",
    "EmissionError",
]
