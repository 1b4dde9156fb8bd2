"""
Code formatters for post-processing generated Python code.
"""

from __future__ import annotations

from .base import Formatter
from .black_formatter import BlackFormatter

__all__ = ["Formatter", "BlackFormatter"]
