"""
Writer module.

Atomic writing of the generated artifacts.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter

__all__ = [
    "AtomicWriter",
]
