"""Audio file loading."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import threading
from pathlib import Path

import numpy as np
import soundfile as sf
from cachetools import LRUCache

from spectrabars.audio.data import AudioData
from spectrabars.config import MAX_CACHED_AUDIO

logger = logging.getLogger(__name__)


class AudioLoadError(Exception):
    """An audio file could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load audio from {path}: {reason}")


@contextlib.contextmanager
def suppress_stderr():
    """Suppress stderr output (e.g., decoder warnings)."""
    try:
        stderr_fd = sys.stderr.fileno()
    except (AttributeError, OSError, ValueError):
        # stderr replaced by an object without a descriptor (test runners)
        yield
        return
    old_stderr = os.dup(stderr_fd)
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, stderr_fd)
    try:
        yield
    finally:
        os.dup2(old_stderr, stderr_fd)
        os.close(old_stderr)
        os.close(devnull)


class AudioLoader:
    """Loads audio files into AudioData, keeping recent files decoded."""

    def __init__(self, max_cached: int = MAX_CACHED_AUDIO) -> None:
        """Initialize the loader.

        Args:
            max_cached: Number of decoded files kept in memory
        """
        self._cache: LRUCache[Path, AudioData] = LRUCache(maxsize=max_cached)
        self._cache_lock = threading.Lock()

    def load(self, path: str | Path) -> AudioData:
        """Load an audio file, keeping channels separate.

        Args:
            path: Path to any format libsndfile can decode

        Returns:
            Decoded audio

        Raises:
            AudioLoadError: The file is missing or cannot be decoded
        """
        path = Path(path).resolve()

        with self._cache_lock:
            if path in self._cache:
                return self._cache[path]

        if not path.exists():
            raise AudioLoadError(path, "file does not exist")

        try:
            with suppress_stderr():
                audio, sr = sf.read(path, dtype=np.float32, always_2d=True)
        except RuntimeError as e:
            raise AudioLoadError(path, str(e)) from e

        data = AudioData.from_array(audio, sr)
        logger.debug(
            "Loaded %s: %d channel(s), %d Hz, %.2fs",
            path.name, data.number_of_channels, data.sample_rate, data.duration_in_seconds,
        )
        if data.length == 0:
            logger.warning("%s contains no samples", path.name)

        with self._cache_lock:
            self._cache[path] = data

        return data

    def is_cached(self, path: str | Path) -> bool:
        """Check whether a file is held decoded in memory."""
        with self._cache_lock:
            return Path(path).resolve() in self._cache

    def clear_cache(self) -> None:
        """Clear the audio cache."""
        with self._cache_lock:
            self._cache.clear()
