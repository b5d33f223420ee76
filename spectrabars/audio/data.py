"""Decoded audio container."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True, eq=False)
class AudioData:
    """Per-channel waveforms of a decoded audio file.

    Waveforms are read-only float32 arrays so they can be shared between
    threads computing different frames.
    """
    channel_waveforms: tuple[NDArray[np.float32], ...]
    sample_rate: int

    @classmethod
    def from_array(cls, audio: ArrayLike, sample_rate: int) -> AudioData:
        """Build from a mono ``(samples,)`` or ``(samples, channels)`` array.

        Args:
            audio: Sample array, as returned by ``soundfile.read``
            sample_rate: Sample rate in Hz

        Returns:
            AudioData owning read-only copies of each channel
        """
        array = np.asarray(audio, dtype=np.float32)
        if array.ndim == 1:
            array = array[:, None]
        elif array.ndim != 2:
            raise ValueError(f"Expected 1-D or 2-D audio array, got {array.ndim} dimensions")

        waveforms = []
        for c in range(array.shape[1]):
            channel = np.ascontiguousarray(array[:, c]).copy()
            channel.setflags(write=False)
            waveforms.append(channel)
        return cls(channel_waveforms=tuple(waveforms), sample_rate=int(sample_rate))

    @property
    def number_of_channels(self) -> int:
        """Number of channels."""
        return len(self.channel_waveforms)

    @property
    def length(self) -> int:
        """Samples per channel."""
        if not self.channel_waveforms:
            return 0
        return len(self.channel_waveforms[0])

    @property
    def duration_in_seconds(self) -> float:
        """Duration in seconds."""
        return self.length / self.sample_rate

    def frame_count(self, fps: float) -> int:
        """Number of whole video frames the audio spans at ``fps``."""
        return int(self.duration_in_seconds * fps)
