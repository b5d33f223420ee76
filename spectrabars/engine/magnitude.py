"""Complex magnitude extraction."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def fft_mag(phasors: ArrayLike) -> NDArray[np.float64]:
    """Return ``sqrt(re**2 + im**2)`` for each phasor, order preserved."""
    values = np.asarray(phasors, dtype=np.complex128)
    return np.hypot(values.real, values.imag)
