"""Labeled one-dimensional data structures."""

from .errors import LengthMismatch
from .series import Series

__all__ = ["LengthMismatch", "Series"]
