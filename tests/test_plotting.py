import io
import math

import pytest
from hypothesis import given, strategies as st

from ofdmkit.plotting import plot_point_per_subchannel


def _plot(*args):
    stream = io.StringIO()
    plot_point_per_subchannel(stream, *args)
    return stream.getvalue()


def test_origin_cell():
    assert _plot(0j, 0, 1.0, 4, 0) == "0.000000 0 0.000000\n"


def test_point_offset_within_cell():
    assert _plot(0.5 + 0.25j, 3, 1.0, 4, 7) == "1.500000 7 1.250000\n"


def test_lines_accumulate():
    stream = io.StringIO()
    plot_point_per_subchannel(stream, 0j, 0, 1.0, 9, 1)
    plot_point_per_subchannel(stream, 0j, 1, 1.0, 9, 1)
    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("1.000000 1 ")


@given(
    k=st.integers(0, 500),
    channels=st.integers(1, 600),
    plot_index=st.integers(-5, 5),
)
def test_cell_grid_layout(k, channels, plot_index):
    line = _plot(0j, k, 2.0, channels, plot_index)
    x_text, index_text, y_text = line.split()
    square = math.ceil(math.sqrt(channels))
    assert int(index_text) == plot_index
    assert float(x_text) == k % square
    assert float(y_text) == k // square


@pytest.mark.parametrize("factor", [1.0, 4.0, 8.0])
def test_normalization_scales_value(factor):
    x_text, _, y_text = _plot(2 - 4j, 0, factor, 1, 0).split()
    assert float(x_text) == pytest.approx(2 / factor, abs=1e-6)
    assert float(y_text) == pytest.approx(-4 / factor, abs=1e-6)