"""
Exceptions raised by the minefield package.

Only construction and direct board access raise. The game controller
treats invalid input as a no-op and reports it through return values.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class InvalidCoordinateError(MinefieldError, IndexError):
    """A cell was addressed outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Cell ({x}, {y}) is outside a {width}x{height} board"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class IllegalMineCountError(MinefieldError, ValueError):
    """The requested mines do not fit in the cells available to them."""

    def __init__(self, mine_count: int, available: int) -> None:
        super().__init__(
            f"Cannot place {mine_count} mines: only {available} cells "
            f"available outside the safe zone"
        )
        self.mine_count = mine_count
        self.available = available
