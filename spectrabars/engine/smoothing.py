"""Inter-bin smoothing of magnitude sequences."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from spectrabars.config import SMOOTHING_PASSES, SMOOTHING_POINTS


def smoothen(
    magnitudes: ArrayLike,
    passes: int = SMOOTHING_PASSES,
    points: int = SMOOTHING_POINTS,
) -> NDArray[np.float64]:
    """Apply a centered moving average repeatedly.

    Each pass replaces every bin with the mean of the ``points`` bins
    around it. Neighbors outside the sequence are clamped to the first or
    last bin, so nothing is read out of range and the length is kept.
    Three passes of a 3-point box approximate a small Gaussian kernel.

    Args:
        magnitudes: Non-negative magnitudes
        passes: Number of averaging passes (0 returns a copy)
        points: Kernel width, odd and >= 1

    Returns:
        New array of the same length
    """
    if points < 1 or points % 2 == 0:
        raise ValueError(f"Smoothing kernel width must be odd and positive, got {points}")

    values = np.array(magnitudes, dtype=np.float64)
    n = len(values)
    if n == 0 or passes <= 0:
        return values

    side = points // 2
    offsets = np.arange(-side, side + 1)
    neighbors = np.clip(np.arange(n)[:, None] + offsets[None, :], 0, n - 1)

    for _ in range(passes):
        values = values[neighbors].mean(axis=1)

    return values
