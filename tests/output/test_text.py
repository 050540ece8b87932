"""Unit tests for the text rendering."""

import io

from rudas import RenderConfig, Series
from rudas.output.text import format_series, render_lines


def test_render_emits_pairs_in_order(capsys):
    """Test that render prints label/value lines then the type trailer."""
    series = Series.from_values_and_labels(["a", "b"], [10, 20])
    series.render()

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["10\ta", "20\tb", "type : str"]


def test_render_to_file():
    """Test that render can target an explicit stream."""
    buffer = io.StringIO()
    Series.from_values([1.5]).render(buffer)
    assert buffer.getvalue() == "0\t1.5\ntype : float\n"


def test_render_empty_series(capsys):
    """Test that an empty Series renders only the trailer."""
    Series.from_values([]).render()
    assert capsys.readouterr().out == "type : object\n"


def test_render_lines_with_config():
    """Test the separator and show_type options."""
    series = Series.from_values_and_labels([1, 2], ["x", "y"])
    config = RenderConfig(separator=" | ", show_type=False)
    assert list(render_lines(series, config)) == ["x | 1", "y | 2"]


def test_format_series_matches_to_text():
    """Test that to_text returns the rendered listing without a trailing newline."""
    series = Series.from_values_and_labels([1, "a"], ["p", "q"])
    assert format_series(series) == "p\t1\nq\ta\ntype : object"
    assert series.to_text() == format_series(series)


def test_render_keeps_escape_sequences():
    """Test that ANSI sequences in values are written unchanged to non-TTY streams."""
    buffer = io.StringIO()
    Series.from_values(["\x1b[31mred\x1b[0m"]).render(buffer)
    assert buffer.getvalue() == "0\t\x1b[31mred\x1b[0m\ntype : str\n"
