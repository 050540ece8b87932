"""Human-readable output for labeled data."""

from .text import RenderConfig, format_series, render_lines, render_series

__all__ = [
    "RenderConfig",
    "format_series",
    "render_lines",
    "render_series",
]
