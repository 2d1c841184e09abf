from __future__ import annotations


class InvalidCoordinateError(ValueError):
    """A click outside the 8x8 board."""

    def __init__(self, x: object, y: object) -> None:
        super().__init__(f"Invalid coordinate: ({x!r}, {y!r})")
        self.x = x
        self.y = y


class LayoutError(ValueError):
    pass


class NotInitializedError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Game not initialized")
