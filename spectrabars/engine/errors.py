"""Validation errors raised by the visualization pipeline."""


class VisualizationError(TypeError):
    """Base class for invalid visualization arguments."""


class InvalidSampleSizeError(VisualizationError):
    """Sample size is not a positive power of two."""

    def __init__(self, sample_size) -> None:
        self.sample_size = sample_size
        super().__init__(
            f'The argument "sample_size" must be a power of two. '
            f"For example: 64, 128. Got instead: {sample_size}"
        )


class MissingFpsError(VisualizationError):
    """Frame rate is absent, zero or negative."""

    def __init__(self, fps=None) -> None:
        self.fps = fps
        super().__init__(f'The argument "fps" must be a positive number. Got instead: {fps}')


class InsufficientDataError(VisualizationError):
    """Audio buffer is shorter than one window."""

    def __init__(self, data_length: int, sample_size: int) -> None:
        self.data_length = data_length
        self.sample_size = sample_size
        super().__init__(
            f"Audio data is not big enough to provide {sample_size} samples "
            f"(got {data_length})."
        )
