"""Analytics event schema to tracking bindings generator

A Python package for generating typed tracking-call bindings from
declarative analytics event schemas. Supports Kotlin and Python output,
shared base parameter groups, and atomic output writing.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    BaseReferenceError,
    CodeGeneratorConfig,
    DuplicateMethodNameError,
    DuplicateParameterError,
    DuplicateParameterPolicy,
    EmissionError,
    FormatterConfig,
    LiticsCodegenError,
    MalformedDefinitionError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaNotFoundError,
    SchemaParseError,
    TargetPlatform,
)

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
