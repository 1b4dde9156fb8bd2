"""
Loader module.

Contains the document loader and the schema front-ends.
"""

from __future__ import annotations

from .loader import SchemaLoader
from .parser import SchemaParser
from .schema_nodes import BaseGroup, BaseReference, EventUnit, ParameterNode, RawSchema

__all__ = [
    "SchemaLoader",
    "SchemaParser",
    "RawSchema",
    "ParameterNode",
    "BaseReference",
    "BaseGroup",
    "EventUnit",
]
