"""
Analyzer module.

Contains base reference resolution, parameter merging and IR building.
"""

from __future__ import annotations

from .definition_builder import DefinitionBuilder
from .ir_nodes import EventDefinition, ParamDefinition
from .parameter_merger import ParameterMerger
from .reference_resolver import BaseReferenceResolver

__all__ = [
    "EventDefinition",
    "ParamDefinition",
    "BaseReferenceResolver",
    "ParameterMerger",
    "DefinitionBuilder",
]
