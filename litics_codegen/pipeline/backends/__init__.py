"""
Binding emission backends.

Contains language-specific emitters.
"""

from __future__ import annotations

from .base import CodeBackend, MethodBinding, ParamBinding
from .kotlin_backend import KotlinBackend
from .python_backend import PythonBackend

BACKENDS: dict[str, type[CodeBackend]] = {
    "kotlin": KotlinBackend,
    "python": PythonBackend,
}

__all__ = [
    "BACKENDS",
    "CodeBackend",
    "MethodBinding",
    "ParamBinding",
    "KotlinBackend",
    "PythonBackend",
]
