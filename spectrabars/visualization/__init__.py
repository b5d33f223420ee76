"""Terminal rendering of frequency bars."""

from spectrabars.visualization.base import BaseVisualizer, VisualizerRegistry
from spectrabars.visualization.bars import BarsVisualizer, CompactBarsVisualizer

__all__ = ["BaseVisualizer", "VisualizerRegistry", "BarsVisualizer", "CompactBarsVisualizer"]
