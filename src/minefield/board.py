"""
Board module for the minefield game.

Holds the fixed-size grid of cells together with bounds-checked access,
neighbor lookup, and bulk queries. The board has no game rules of its
own; mine placement lives in the generator and play in the controller.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState, OBS_EXPLODED, OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from .errors import IllegalMineCountError, InvalidCoordinateError

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def max_safe_zone_size(width: int, height: int) -> int:
    """Largest number of cells a first click and its neighbors can cover."""
    return min(3, width) * min(3, height)


@dataclass
class BoardConfig:
    """
    Configuration for a minefield game.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place. The limit is inclusive: up to
            width * height minus the largest first-click safe zone, in
            which case every cell outside that zone is a mine.
    """

    width: int = 9
    height: int = 9
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        available = self.width * self.height - max_safe_zone_size(
            self.width, self.height
        )
        if self.mine_count > available:
            raise IllegalMineCountError(self.mine_count, available)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    A width x height grid of cells indexed by (x, y).

    ``get`` and the mutators raise InvalidCoordinateError off the grid.
    ``find`` is the lenient variant for coordinates that come from
    pointer input, returning None instead.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cells: Optional[List[List[Cell]]] = None,
    ) -> None:
        """
        Create a board.

        Args:
            width: Number of columns.
            height: Number of rows.
            cells: Optional prebuilt grid as a list of rows (``cells[y][x]``).
                Defaults to hidden safe cells.
        """
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive")
        self.width = width
        self.height = height
        if cells is None:
            cells = [
                [Cell(position=(x, y)) for x in range(width)]
                for y in range(height)
            ]
        elif len(cells) != height or any(len(row) != width for row in cells):
            raise ValueError(
                f"Cell grid does not match a {width}x{height} board"
            )
        for y, row in enumerate(cells):
            for x, cell in enumerate(row):
                if cell.position != (x, y):
                    raise ValueError(
                        f"Cell at ({x}, {y}) claims position {cell.position}"
                    )
        self._grid = cells

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"

    # ========================================================================
    # Cell Access
    # ========================================================================

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y), raising if it is off the board."""
        if not self.in_bounds(x, y):
            raise InvalidCoordinateError(x, y, self.width, self.height)
        return self._grid[y][x]

    def find(self, x: int, y: int) -> Optional[Cell]:
        """Get the cell at (x, y), or None if it is off the board."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    def set_state(self, x: int, y: int, state: CellState) -> None:
        self.get(x, y).state = state

    def set_exploded(self, x: int, y: int) -> None:
        self.get(x, y).explode()

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring positions.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.

        Returns:
            Up to 8 (x, y) tuples, orthogonal and diagonal, clipped
            at the board edges.
        """
        if not self.in_bounds(x, y):
            raise InvalidCoordinateError(x, y, self.width, self.height)
        result = []
        for delta_x, delta_y in NEIGHBOR_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.in_bounds(new_x, new_y):
                result.append((new_x, new_y))
        return result

    def count_adjacent_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_x, neighbor_y in self.neighbors(x, y):
            if self._grid[neighbor_y][neighbor_x].is_mine:
                count += 1
        return count

    # ========================================================================
    # Bulk Queries
    # ========================================================================

    def positions(self) -> Iterator[Position]:
        """Iterate over every (x, y) in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def all_cells(self) -> List[Cell]:
        """Every cell in row-major order."""
        return [cell for row in self._grid for cell in row]

    def mine_count(self) -> int:
        return sum(1 for cell in self.all_cells() if cell.is_mine)

    def hidden_positions(self) -> List[Position]:
        """Positions of cells that can still be revealed."""
        return [cell.position for cell in self.all_cells() if cell.is_hidden]

    def all_safe_revealed(self) -> bool:
        """Check if every safe cell is revealed."""
        return all(
            cell.is_revealed for cell in self.all_cells() if not cell.is_mine
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width), indexed [y, x], holding
            each cell's ``Cell.to_observation`` value.
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.all_cells():
            obs[cell.y, cell.x] = cell.to_observation()
        return obs

    def render(self) -> str:
        """Render the board as text, one row per line."""
        symbols = {
            OBS_HIDDEN: ".",
            OBS_FLAGGED: "F",
            OBS_MINE: "*",
            OBS_EXPLODED: "X",
            0: " ",
        }
        obs = self.get_observation()
        lines = []
        for y in range(self.height):
            lines.append(" ".join(
                symbols.get(int(val), str(val)) for val in obs[y]
            ))
        return "\n".join(lines)
