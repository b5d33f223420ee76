"""Audio sample buffers and loading."""

from spectrabars.audio.data import AudioData
from spectrabars.audio.loader import AudioLoader, AudioLoadError

__all__ = ["AudioData", "AudioLoader", "AudioLoadError"]
