"""Frequency bars rendering."""

from rich.console import RenderableType
from rich.text import Text

from spectrabars.visualization.base import BaseVisualizer, VisualizerRegistry


@VisualizerRegistry.register("bars")
class BarsVisualizer(BaseVisualizer):
    """One column per bar, drawn bottom-up with partial top blocks."""

    BLOCKS = " ▁▂▃▄▅▆▇█"
    FULL_BLOCK = "█"

    def __init__(
        self,
        width: int = 64,
        height: int = 8,
        theme: str = "cyan",
        gap: int = 0,
    ) -> None:
        super().__init__(width, height, theme)
        self._gap = gap

    def render(self) -> RenderableType:
        """Render the frequency bars."""
        if self._bars is None or len(self._bars) == 0:
            return Text("")

        n = len(self._bars)
        bar_width = max(1, (self.width - self._gap * (n - 1)) // n)
        step = 1.0 / self.height

        text = Text()
        for row in range(self.height):
            # Threshold for this row (top row = 1, bottom row = step)
            threshold = 1.0 - row * step
            color = self.primary_color if row >= self.height // 2 else self.secondary_color

            for i, level in enumerate(self._bars):
                if level >= threshold:
                    char = self.FULL_BLOCK
                elif level > threshold - step:
                    partial = int((level - (threshold - step)) / step * (len(self.BLOCKS) - 1))
                    char = self.BLOCKS[max(0, min(len(self.BLOCKS) - 1, partial))]
                else:
                    char = " "

                text.append(char * bar_width, style=color if char != " " else None)
                if self._gap and i < n - 1:
                    text.append(" " * self._gap)

            if row < self.height - 1:
                text.append("\n")

        return text


@VisualizerRegistry.register("compact")
class CompactBarsVisualizer(BaseVisualizer):
    """Single-line frequency bars."""

    BLOCKS = " ▁▂▃▄▅▆▇█"

    def __init__(
        self,
        width: int = 64,
        height: int = 1,
        theme: str = "cyan",
    ) -> None:
        super().__init__(width, height, theme)

    def render(self) -> RenderableType:
        """Render compact bars."""
        if self._bars is None or len(self._bars) == 0:
            return Text("")

        chars = []
        for level in self._bars:
            idx = int(level * (len(self.BLOCKS) - 1))
            idx = max(0, min(len(self.BLOCKS) - 1, idx))
            chars.append(self.BLOCKS[idx])

        return Text("".join(chars), style=self.primary_color)
