"""Plain-text rendering of labeled series for human inspection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, TYPE_CHECKING, Any

import click
from attrs import define

if TYPE_CHECKING:
    from rudas.data.series import Series


@define(slots=True, frozen=True)
class RenderConfig:
    """Formatting options for the ``label<sep>value`` listing."""

    separator: str = "\t"
    show_type: bool = True


DEFAULT_CONFIG = RenderConfig()


def render_lines(series: Series[Any, Any], config: RenderConfig | None = None) -> Iterator[str]:
    """Yield one line per ``(label, value)`` pair, then the value type trailer."""
    config = config or DEFAULT_CONFIG
    for label, value in series.items():
        yield f"{label}{config.separator}{value}"
    if config.show_type:
        yield f"type : {series.value_type}"


def format_series(series: Series[Any, Any], config: RenderConfig | None = None) -> str:
    """Return the full listing as a single newline-joined string."""
    return "\n".join(render_lines(series, config))


def render_series(
    series: Series[Any, Any],
    *,
    file: IO[str] | None = None,
    config: RenderConfig | None = None,
) -> None:
    """Echo the listing to ``file``, or stdout when omitted."""
    for line in render_lines(series, config):
        click.echo(line, file=file, color=True)


__all__ = ["DEFAULT_CONFIG", "RenderConfig", "format_series", "render_lines", "render_series"]
