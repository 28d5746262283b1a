"""
Cell module for the minefield game.

Represents individual grid positions with their content (safe/mine)
and their visible state (hidden/revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """What a cell contains."""

    SAFE = auto()
    MINE = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Observation codes shared by the board and the environment
OBS_FLAGGED = -2
OBS_HIDDEN = -1
OBS_MINE = 9
OBS_EXPLODED = 10


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position in the minefield grid.

    Attributes:
        position: (x, y) index of this cell in its board. Never reassigned.
        kind: Whether the cell is safe or holds a mine.
        adjacent_mines: Mines among the up to 8 neighbors. Only meaningful
            for safe cells once mines have been placed.
        state: Current visual state.
        exploded: True only for the mine whose reveal ended the game.
    """

    position: Tuple[int, int] = (0, 0)
    kind: CellKind = CellKind.SAFE
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    exploded: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell went from hidden to revealed, False if it
            was already revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Flip between hidden and flagged.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def explode(self) -> None:
        """Mark this cell as the mine that ended the game."""
        self.exploded = True

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.kind == CellKind.MINE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to its numeric observation value.

        Returns:
            -2: Flagged cell
            -1: Hidden cell
            0-8: Revealed safe cell with adjacent mine count
            9: Revealed mine
            10: Revealed mine that exploded
        """
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.is_mine:
            return OBS_EXPLODED if self.exploded else OBS_MINE
        return self.adjacent_mines
