"""Amplitude normalization of smoothed magnitudes."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def normalize(magnitudes: ArrayLike, sample_size: int, max_int: float) -> NDArray[np.float64]:
    """Scale magnitudes by ``1 / ((sample_size / 2) * max_int)``.

    A full-scale sinusoid centered on a bin has magnitude of about
    ``sample_size / 2 * max_int``, so typical audio lands in [0, 1].
    Values are not clamped.
    """
    if not max_int > 0:
        raise ValueError(f"max_int must be positive, got {max_int}")
    values = np.asarray(magnitudes, dtype=np.float64)
    return values / (sample_size / 2) / max_int
