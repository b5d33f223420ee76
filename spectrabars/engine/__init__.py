"""Visualization pipeline components."""

from spectrabars.engine.errors import (
    InsufficientDataError,
    InvalidSampleSizeError,
    MissingFpsError,
    VisualizationError,
)
from spectrabars.engine.pipeline import (
    get_visualization,
    max_possible_magnitude,
    visualize_audio,
    visualize_frames,
)

__all__ = [
    "get_visualization",
    "max_possible_magnitude",
    "visualize_audio",
    "visualize_frames",
    "VisualizationError",
    "InvalidSampleSizeError",
    "MissingFpsError",
    "InsufficientDataError",
]
