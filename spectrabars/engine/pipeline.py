"""Frame-by-frame frequency bars for audio visualization."""

from __future__ import annotations

import logging
import math
import operator
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from spectrabars.config import MAX_INT
from spectrabars.engine.errors import (
    InsufficientDataError,
    InvalidSampleSizeError,
    MissingFpsError,
)
from spectrabars.engine.fft import fft
from spectrabars.engine.magnitude import fft_mag
from spectrabars.engine.normalize import normalize
from spectrabars.engine.quantize import quantize, to_int16
from spectrabars.engine.smoothing import smoothen
from spectrabars.engine.window import select_window, window_range

if TYPE_CHECKING:
    from spectrabars.audio.data import AudioData

logger = logging.getLogger(__name__)


def _check_sample_size(sample_size) -> int:
    """Return ``sample_size`` as an int, or raise if it is not a power of two."""
    if isinstance(sample_size, bool):
        raise InvalidSampleSizeError(sample_size)
    if isinstance(sample_size, float) and sample_size.is_integer():
        sample_size = int(sample_size)
    try:
        size = operator.index(sample_size)
    except TypeError:
        raise InvalidSampleSizeError(sample_size) from None
    if size <= 0 or size & (size - 1):
        raise InvalidSampleSizeError(sample_size)
    return size


def _check_fps(fps) -> None:
    # `not fps > 0` also rejects NaN
    if fps is None or not fps > 0:
        raise MissingFpsError(fps)


def _check_positive_finite(name: str, value) -> None:
    if value is None or not value > 0 or not math.isfinite(value):
        raise ValueError(f'The argument "{name}" must be a positive finite number. Got instead: {value}')


def get_visualization(
    sample_size: int,
    data: ArrayLike,
    sample_rate: float,
    frame: int,
    fps: float,
    max_int: float = MAX_INT,
) -> NDArray[np.float64]:
    """Compute the frequency bars for one video frame.

    The window of ``sample_size`` samples centered on the frame's playback
    position is quantized to int16, transformed, converted to magnitudes,
    smoothed and normalized. Only the lower half of the spectrum is
    returned; the upper half mirrors it for real input.

    All arguments are validated before any computation. ``data`` is never
    written and may be shared between threads.

    Args:
        sample_size: Window length, a positive power of two
        data: Single-channel float samples, at least ``sample_size`` long
        sample_rate: Samples per second
        frame: Output frame index
        fps: Frames per second (> 0)
        max_int: Normalization divisor, normally the int16 range magnitude

    Returns:
        Read-only array of ``sample_size // 2`` bar heights, nominally in [0, 1]

    Raises:
        InvalidSampleSizeError: ``sample_size`` is not a positive power of two
        MissingFpsError: ``fps`` is missing, zero or negative
        InsufficientDataError: ``data`` is shorter than ``sample_size``
        ValueError: ``sample_rate`` or ``max_int`` is not positive and finite,
            ``frame`` is not finite, or ``data`` is not one-dimensional
    """
    size = _check_sample_size(sample_size)
    _check_fps(fps)
    _check_positive_finite("sample_rate", sample_rate)
    _check_positive_finite("max_int", max_int)
    if not math.isfinite(frame):
        raise ValueError(f'The argument "frame" must be a finite number. Got instead: {frame}')

    samples = np.asarray(data)
    if samples.ndim != 1:
        raise ValueError(f"Expected single-channel 1-D data, got {samples.ndim} dimensions")
    if len(samples) < size:
        raise InsufficientDataError(len(samples), size)

    start, end = window_range(frame, fps, sample_rate, size)
    logger.debug("Frame %s at %s fps: window [%d, %d)", frame, fps, start, end)

    ints = quantize(select_window(samples, start, size))
    phasors = fft(ints)
    magnitudes = fft_mag(phasors)
    smoothed = smoothen(magnitudes)

    bars = normalize(smoothed, size, max_int)[: size // 2].copy()
    bars.setflags(write=False)
    return bars


def max_possible_magnitude(audio: AudioData) -> int:
    """Quantized peak amplitude across all channels.

    Passing this as ``max_int`` scales bars so the loudest moment of the
    track reaches roughly 1.0.
    """
    peak = 0.0
    for waveform in audio.channel_waveforms:
        if len(waveform):
            peak = max(peak, float(np.max(np.abs(waveform))))
    return to_int16(peak)


def visualize_audio(
    audio: AudioData,
    frame: int,
    fps: float,
    number_of_samples: int,
    smoothing: bool = True,
    max_int: float | None = None,
) -> NDArray[np.float64]:
    """Compute ``number_of_samples`` bars for a frame of decoded audio.

    Uses the first channel. With ``smoothing`` the result is the mean of
    the bars for the previous, current and next frame, which steadies the
    animation without keeping any state between calls.

    Args:
        audio: Decoded audio
        frame: Output frame index
        fps: Frames per second
        number_of_samples: Number of bars, a positive power of two
        smoothing: Average with neighboring frames
        max_int: Normalization divisor (default: :func:`max_possible_magnitude`)

    Returns:
        Read-only array of ``number_of_samples`` bar heights
    """
    _check_sample_size(number_of_samples)
    if audio.number_of_channels == 0:
        raise InsufficientDataError(0, int(number_of_samples) * 2)

    if max_int is None:
        # Silent audio has no peak; any positive divisor leaves zeros at zero
        max_int = max(max_possible_magnitude(audio), 1)

    frames = [frame - 1, frame, frame + 1] if smoothing else [frame]
    all_bars = [
        get_visualization(
            sample_size=int(number_of_samples) * 2,
            data=audio.channel_waveforms[0],
            sample_rate=audio.sample_rate,
            frame=f,
            fps=fps,
            max_int=max_int,
        )
        for f in frames
    ]

    result = np.mean(all_bars, axis=0)
    result.setflags(write=False)
    return result


def visualize_frames(
    audio: AudioData,
    frames: Iterable[int],
    fps: float,
    number_of_samples: int,
    smoothing: bool = True,
    max_int: float | None = None,
    workers: int | None = None,
) -> list[NDArray[np.float64]]:
    """Compute bars for many frames in parallel.

    Frames are independent, so they are spread over a thread pool. Results
    are returned in the order of ``frames``.

    Args:
        audio: Decoded audio
        frames: Frame indices
        fps: Frames per second
        number_of_samples: Number of bars per frame
        smoothing: Average with neighboring frames
        max_int: Normalization divisor (default: :func:`max_possible_magnitude`)
        workers: Thread count (None lets the executor decide)
    """
    if max_int is None:
        max_int = max(max_possible_magnitude(audio), 1)

    def _one(frame: int) -> NDArray[np.float64]:
        return visualize_audio(audio, frame, fps, number_of_samples, smoothing, max_int)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(_one, frames))
