"""Text output of per-subchannel IQ points for an external plotter."""

from __future__ import annotations

import math
from typing import TextIO


def _c_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def plot_point_per_subchannel(
    stream: TextIO,
    value: complex,
    k: int,
    normalization_factor: float,
    channels: int,
    plot_index: int,
) -> None:
    """Write one point into subchannel ``k``'s cell of a roughly square grid.

    Cells run left to right, then bottom to top, from the origin. The
    line holds x, the plot index used for colouring, and y.
    """
    square = math.ceil(math.sqrt(channels))
    row, column = _c_divmod(k, square)
    x = column + value.real / normalization_factor
    y = row + value.imag / normalization_factor
    stream.write("%f %d %f\n" % (x, plot_index, y))