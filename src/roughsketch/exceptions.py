"""Exception hierarchy for roughsketch."""


class RoughSketchError(Exception):
    """Base exception for all roughsketch errors."""

    pass


class ConfigurationError(RoughSketchError):
    """Invalid drawing or filler configuration."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for '{field}': {reason}")


class FillError(RoughSketchError):
    """Errors related to fill pattern selection."""

    pass


class UnknownFillStyleError(FillError):
    """Requested fill style is not registered."""

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(f"Unknown fill style '{style}'")


class ShapeError(RoughSketchError):
    """Errors related to shape requests."""

    pass


class ShapeArgumentError(ShapeError):
    """Shape was requested with the wrong arguments."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Invalid arguments for '{shape}': {reason}")
