"""Float to signed 16-bit fixed-point conversion."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from spectrabars.config import INT16_MAX, INT16_MIN


def to_int16(x: float) -> int:
    """Quantize a single sample.

    Positive values scale by 32767 and negative values by 32768, so both
    -1.0 and 1.0 land exactly on the ends of the range. Out-of-range input
    saturates instead of wrapping; NaN maps to 0.

    Args:
        x: Sample, nominally in [-1, 1]

    Returns:
        Integer in [-32768, 32767]
    """
    if math.isnan(x):
        return 0
    scaled = x * INT16_MAX if x > 0 else x * -INT16_MIN
    if scaled >= INT16_MAX:
        return INT16_MAX
    if scaled <= INT16_MIN:
        return INT16_MIN
    return int(scaled)


def quantize(samples: ArrayLike) -> NDArray[np.int16]:
    """Quantize a sequence of samples element-wise.

    Vectorized equivalent of :func:`to_int16`. Returns a new array; the
    input is never modified.
    """
    values = np.asarray(samples, dtype=np.float64)
    scaled = np.where(values > 0, values * INT16_MAX, values * -INT16_MIN)
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=INT16_MAX, neginf=INT16_MIN)
    return np.trunc(np.clip(scaled, INT16_MIN, INT16_MAX)).astype(np.int16)
