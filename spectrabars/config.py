"""Configuration constants for Spectrabars."""

# Audio settings
SAMPLE_RATE = 44100

# Quantization range (signed 16-bit)
INT16_MAX = 32767
INT16_MIN = -32768
MAX_INT = 32768  # Magnitude of the quantization range, default normalization divisor

# Visualization settings
VIZ_FPS = 30
DEFAULT_SAMPLE_SIZE = 64  # Window length; yields DEFAULT_SAMPLE_SIZE // 2 bars
BARS_HEIGHT = 8

# Smoothing settings
SMOOTHING_PASSES = 3
SMOOTHING_POINTS = 3  # Odd kernel width

# Loader settings
MAX_CACHED_AUDIO = 4  # Decoded files kept in memory

# Color themes
COLOR_THEMES = {
    "cyan": {"primary": "cyan", "secondary": "blue"},
    "purple": {"primary": "magenta", "secondary": "purple"},
    "green": {"primary": "green", "secondary": "cyan"},
    "warm": {"primary": "yellow", "secondary": "orange3"},
    "mono": {"primary": "white", "secondary": "grey70"},
}

DEFAULT_THEME = "cyan"
