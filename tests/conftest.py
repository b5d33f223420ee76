"""Pytest fixtures for Spectrabars tests."""

import numpy as np
import pytest
import soundfile as sf

from spectrabars.audio.data import AudioData


SAMPLE_RATE = 44100


@pytest.fixture
def sample_audio_mono():
    """Create sample mono audio data."""
    # 1 second of 440Hz sine wave at 44100Hz
    t = np.arange(SAMPLE_RATE) / SAMPLE_RATE
    return (0.5 * np.sin(2 * np.pi * 440 * t)).astype(np.float32)


@pytest.fixture
def bin_centered_sine():
    """Sine wave landing exactly on bin 8 of a 64-sample window."""
    n = np.arange(SAMPLE_RATE)
    return (0.5 * np.sin(2 * np.pi * 8 * n / 64)).astype(np.float32)


@pytest.fixture
def silent_audio():
    """Create silent audio data."""
    return np.zeros(SAMPLE_RATE, dtype=np.float32)


@pytest.fixture
def noise_audio():
    """Create deterministic white noise."""
    rng = np.random.default_rng(1234)
    return rng.uniform(-0.5, 0.5, SAMPLE_RATE).astype(np.float32)


@pytest.fixture
def stereo_audio_data():
    """Create stereo AudioData with different tones per channel."""
    t = np.arange(SAMPLE_RATE) / SAMPLE_RATE
    left = 0.5 * np.sin(2 * np.pi * 440 * t)
    right = 0.25 * np.sin(2 * np.pi * 2000 * t)
    return AudioData.from_array(np.column_stack((left, right)), SAMPLE_RATE)


@pytest.fixture
def wav_file(tmp_path):
    """Write one second of stereo sine to a WAV file."""
    t = np.arange(SAMPLE_RATE) / SAMPLE_RATE
    left = 0.5 * np.sin(2 * np.pi * 440 * t)
    right = 0.5 * np.sin(2 * np.pi * 880 * t)
    path = tmp_path / "tone.wav"
    sf.write(path, np.column_stack((left, right)).astype(np.float32), SAMPLE_RATE)
    return path
