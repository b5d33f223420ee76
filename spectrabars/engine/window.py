"""Frame-aligned selection of the analysis window."""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def window_range(
    frame: int,
    fps: float,
    sample_rate: float,
    sample_size: int,
) -> tuple[int, int]:
    """Compute the sample range centered on the playback position of a frame.

    Args:
        frame: Output frame index
        fps: Frames per second (> 0)
        sample_rate: Samples per second
        sample_size: Window length

    Returns:
        Tuple of (start, end), end exclusive, with end - start == sample_size
    """
    center = math.floor((frame / fps) * sample_rate)
    start = max(0, center - sample_size // 2)
    return start, start + sample_size


def select_window(
    data: NDArray[np.floating],
    start: int,
    sample_size: int,
) -> NDArray[np.float64]:
    """Copy ``sample_size`` samples starting at ``start``.

    Positions past the end of ``data`` read as silence, so the result is
    always exactly ``sample_size`` long. ``data`` is only read.
    """
    window = np.zeros(sample_size, dtype=np.float64)
    available = max(0, min(sample_size, len(data) - start))
    if available > 0:
        window[:available] = data[start:start + available]
    if available < sample_size:
        logger.debug(
            "Window [%d, %d) exceeds buffer of %d samples, padding %d with silence",
            start, start + sample_size, len(data), sample_size - available,
        )
    return window
