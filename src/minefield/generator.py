"""
Board generation for the minefield game.

Places mines around a guaranteed-safe first click and computes
adjacency counts. Also builds the mine-free placeholder shown before
the first click.
"""
import logging
import random
from typing import List, Optional

from .board import Board, Position
from .cell import CellKind
from .errors import IllegalMineCountError, InvalidCoordinateError

logger = logging.getLogger(__name__)


class BoardGenerator:
    """
    Builds populated boards.

    Owns its random source, so two generators created with the same seed
    produce the same boards for the same calls.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Re-seed the random source."""
        self.rng.seed(seed)

    # ========================================================================
    # Board Construction
    # ========================================================================

    def create_empty(self, width: int, height: int) -> Board:
        """Create an all-hidden, mine-free board with zero counts."""
        return Board(width, height)

    def generate(
        self,
        width: int,
        height: int,
        mine_count: int,
        safe_cell: Position,
    ) -> Board:
        """
        Create a board with mines placed away from the first click.

        The safe cell and all of its neighbors are kept mine-free. Mines
        are sampled uniformly without replacement from the remaining cells.

        Args:
            width: Number of columns.
            height: Number of rows.
            mine_count: Exact number of mines to place.
            safe_cell: (x, y) of the first click.

        Returns:
            A fully populated board with adjacency counts computed.

        Raises:
            InvalidCoordinateError: If safe_cell is off the board.
            IllegalMineCountError: If mine_count is negative or exceeds
                the cells left once the safe zone is excluded.
        """
        board = Board(width, height)
        excluded = set(self.safe_zone(board, safe_cell))
        eligible = [pos for pos in board.positions() if pos not in excluded]

        if mine_count < 0 or mine_count > len(eligible):
            raise IllegalMineCountError(mine_count, len(eligible))

        for x, y in self.rng.sample(eligible, mine_count):
            board.get(x, y).kind = CellKind.MINE

        self._calculate_adjacent_mines(board)
        logger.debug(
            "Generated %dx%d board with %d mines, safe cell %s",
            width, height, mine_count, safe_cell,
        )
        return board

    @staticmethod
    def safe_zone(board: Board, safe_cell: Position) -> List[Position]:
        """The safe cell plus its in-bounds neighbors."""
        x, y = safe_cell
        if not board.in_bounds(x, y):
            raise InvalidCoordinateError(x, y, board.width, board.height)
        return [(x, y)] + board.neighbors(x, y)

    @staticmethod
    def _calculate_adjacent_mines(board: Board) -> None:
        """Calculate adjacent mine counts for all safe cells."""
        for cell in board.all_cells():
            cell.adjacent_mines = (
                0 if cell.is_mine else board.count_adjacent_mines(cell.x, cell.y)
            )
