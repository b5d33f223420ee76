"""Base visualizer class."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike, NDArray
from rich.console import RenderableType

from spectrabars.config import COLOR_THEMES, DEFAULT_THEME


class BaseVisualizer(ABC):
    """Base class for bar renderers."""

    def __init__(
        self,
        width: int = 64,
        height: int = 8,
        theme: str = DEFAULT_THEME,
    ) -> None:
        """Initialize the visualizer.

        Args:
            width: Width in characters
            height: Height in lines
            theme: Color theme name
        """
        self.width = width
        self.height = height
        self.theme = COLOR_THEMES.get(theme, COLOR_THEMES[DEFAULT_THEME])
        self._bars: NDArray[np.float64] | None = None

    def update(self, bars: ArrayLike) -> None:
        """Set the bar heights to draw.

        Values are clipped to [0, 1] for display; the pipeline itself does
        not clamp.

        Args:
            bars: Bar heights for one frame
        """
        self._bars = np.clip(np.asarray(bars, dtype=np.float64), 0.0, 1.0)

    @abstractmethod
    def render(self) -> RenderableType:
        """Render the visualization.

        Returns:
            Rich renderable object
        """
        pass

    @property
    def primary_color(self) -> str:
        """Get primary theme color."""
        return self.theme["primary"]

    @property
    def secondary_color(self) -> str:
        """Get secondary theme color."""
        return self.theme["secondary"]


class VisualizerRegistry:
    """Bar rendering styles by name."""

    _styles: dict[str, type[BaseVisualizer]] = {}

    @classmethod
    def register(cls, name: str):
        """Class decorator adding a style under ``name``."""
        def decorator(visualizer_cls: type[BaseVisualizer]):
            cls._styles[name] = visualizer_cls
            return visualizer_cls
        return decorator

    @classmethod
    def get_names(cls) -> list[str]:
        """Registered style names, sorted."""
        return sorted(cls._styles)

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseVisualizer:
        """Instantiate the style ``name``.

        Raises:
            ValueError: No style is registered under ``name``
        """
        try:
            visualizer_cls = cls._styles[name]
        except KeyError:
            raise ValueError(
                f"Unknown style {name!r}, choose from: {', '.join(cls.get_names())}"
            ) from None
        return visualizer_cls(**kwargs)
