"""Radix-2 Cooley-Tukey fast Fourier transform."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _bit_reverse_indices(n: int) -> NDArray[np.intp]:
    """Index permutation that reorders a sequence into bit-reversed order."""
    bits = n.bit_length() - 1
    indices = np.arange(n, dtype=np.intp)
    reversed_indices = np.zeros(n, dtype=np.intp)
    for _ in range(bits):
        reversed_indices = (reversed_indices << 1) | (indices & 1)
        indices = indices >> 1
    return reversed_indices


def fft(samples: ArrayLike) -> NDArray[np.complex128]:
    """Compute the discrete Fourier transform of a power-of-two sequence.

    Iterative decimation-in-time: the input is copied into a single
    complex buffer in bit-reversed order, then each stage combines
    adjacent even/odd halves of width ``size`` in place using the
    twiddle factors ``exp(-2*pi*i*k/size)``. No scaling is applied.

    Args:
        samples: Real or complex sequence, length a power of two

    Returns:
        Complex coefficients (phasors), same length as the input
    """
    x = np.asarray(samples)
    n = len(x)
    if n == 0 or n & (n - 1):
        raise ValueError(f"FFT length must be a power of two, got {n}")

    out = x[_bit_reverse_indices(n)].astype(np.complex128)

    size = 2
    while size <= n:
        half = size // 2
        twiddles = np.exp(-2j * np.pi * np.arange(half) / size)
        # View: each row is one butterfly group of width `size`
        blocks = out.reshape(-1, size)
        even = blocks[:, :half].copy()
        odd = blocks[:, half:] * twiddles
        blocks[:, :half] = even + odd
        blocks[:, half:] = even - odd
        size *= 2

    return out
