# src/mazegen/errors.py

MIN_SIZE = 2

class InvalidDimensions(ValueError):
    """Raised when a maze is requested with width or height below 2."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(
            f"invalid maze size width={width} height={height}; both must be >= {MIN_SIZE}"
        )

def check_dimensions(width: int, height: int) -> None:
    if width < MIN_SIZE or height < MIN_SIZE:
        raise InvalidDimensions(width, height)
