"""Labeled one-dimensional arrays, the building block for tabular data."""

from .data import LengthMismatch, Series
from .output import RenderConfig

__all__ = ["LengthMismatch", "RenderConfig", "Series"]
