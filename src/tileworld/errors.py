class TileworldError(Exception):
    """Base exception for the tileworld package."""


class InvalidDimension(TileworldError, ValueError):
    """Raised when a grid would have a non-positive width or height."""


class OutOfBounds(TileworldError, IndexError):
    """Raised by direct tile access outside the grid extent."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x},{y}) is outside grid bounds {width}x{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class GenerationDegraded(TileworldError):
    """No candidate passed validation within the attempt budget.

    Only raised when generation runs with ``strict=True``. By default the
    same condition is reported without raising: the generator returns a
    fallback grid with ``GenerationResult.degraded`` set and logs a warning.
    """

    def __init__(self, attempts: int) -> None:
        super().__init__(f"no fully accessible grid after {attempts} attempts")
        self.attempts = attempts
