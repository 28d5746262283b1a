"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Board,
    BoardConfig,
    BoardGenerator,
    Cell,
    CellKind,
    GameController,
)


# ============================================================================
# Helpers
# ============================================================================

# Column of mines at x=3 on a 5x5 board. Clicking left of it opens
# x=0..2; the x=4 column stays hidden behind the wall.
WALL_MINES = [(3, 0), (3, 1), (3, 2), (3, 3), (3, 4)]


class FixedGenerator(BoardGenerator):
    """Generator that always lays out the same mines, for scripted games."""

    def __init__(self, mines: Iterable[Tuple[int, int]]) -> None:
        super().__init__(seed=0)
        self.mines = list(mines)
        self.safe_cells: List[Tuple[int, int]] = []

    def generate(self, width, height, mine_count, safe_cell) -> Board:
        self.safe_cells.append(safe_cell)
        return build_board(width, height, self.mines)


def build_board(
    width: int, height: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Create a board with mines at the given (x, y) positions."""
    board = Board(width, height)
    for x, y in mines:
        board.get(x, y).kind = CellKind.MINE
    for cell in board.all_cells():
        if not cell.is_mine:
            cell.adjacent_mines = board.count_adjacent_mines(cell.x, cell.y)
    return board


class FakeClock:
    """Monotonic clock that advances by a fixed step per call."""

    def __init__(self, step: float = 1.0) -> None:
        self.now = 0.0
        self.step = step

    def __call__(self) -> float:
        self.now += self.step
        return self.now


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create an empty default 9x9 board."""
    return Board(9, 9)


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a column of mines at x=3."""
    return build_board(5, 5, WALL_MINES)


@pytest.fixture
def make_board():
    """Factory for boards with hand-placed mines."""
    return build_board


@pytest.fixture
def generator() -> BoardGenerator:
    """Seeded generator for reproducible layouts."""
    return BoardGenerator(seed=1234)


@pytest.fixture
def fixed_generator():
    """Factory for generators with a fixed mine layout."""
    return FixedGenerator


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def default_controller() -> GameController:
    """Controller for a 9x9 game with 10 mines."""
    return GameController(seed=42)


@pytest.fixture
def wall_generator() -> FixedGenerator:
    return FixedGenerator(WALL_MINES)


@pytest.fixture
def wall_controller(wall_generator: FixedGenerator) -> GameController:
    """5x5 game whose mines always form the x=3 wall."""
    return GameController(BoardConfig(5, 5, 5), generator=wall_generator)


@pytest.fixture
def corner_mine_controller() -> GameController:
    """5x5 game with a single mine in the (4, 4) corner."""
    return GameController(
        BoardConfig(5, 5, 1), generator=FixedGenerator([(4, 4)])
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(kind=CellKind.MINE)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
