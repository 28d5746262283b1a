"""
Game controller for the minefield game.

Owns the board for one session and turns reveal/flag commands into
state transitions: deferred mine placement on the first reveal, flood
reveal from zero-count cells, loss on a mine, and win once every safe
cell is open. Each command runs to completion before the next.
"""
import logging
import time
from typing import Callable, List, Optional

from .board import Board, BoardConfig, Position
from .cell import Cell, CellState
from .events import (
    Action,
    BoardChanged,
    CellChanged,
    Event,
    GameStatus,
    Listener,
)
from .generator import BoardGenerator

logger = logging.getLogger(__name__)


# ============================================================================
# Game Controller
# ============================================================================

class GameController:
    """
    Runs a single minefield session at a time.

    Invalid coordinates, settled cells and finished games are ignored:
    ``reveal`` and ``toggle_flag`` return False and nothing changes.
    Listeners registered with ``subscribe`` receive a CellChanged when one
    cell changed, or a BoardChanged when several did.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        generator: Optional[BoardGenerator] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the controller and start a fresh game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            generator: Board generator; one seeded with ``seed`` is
                created when omitted.
            seed: Random seed used when no generator is given.
            clock: Monotonic time source for ``elapsed``.
        """
        self.config = config or BoardConfig()
        self.generator = generator if generator is not None else BoardGenerator(seed)
        self._clock = clock
        self._listeners: List[Listener] = []
        self.new_game()

    # ========================================================================
    # Session Lifecycle
    # ========================================================================

    def new_game(self, config: Optional[BoardConfig] = None) -> None:
        """
        Discard the current session and start a new one.

        Mines are not placed until the first reveal; until then the board
        is a mine-free placeholder.
        """
        if config is not None:
            self.config = config
        self.board: Board = self.generator.create_empty(
            self.config.width, self.config.height
        )
        self._status = GameStatus.NOT_STARTED
        self._mines_placed = False
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None
        logger.debug(
            "New %dx%d game with %d mines",
            self.config.width, self.config.height, self.config.mine_count,
        )
        self._emit(BoardChanged(self._status))

    def subscribe(self, listener: Listener) -> None:
        """Register a callable to receive change notifications."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _emit(self, event: Event) -> None:
        for listener in list(self._listeners):
            listener(event)

    # ========================================================================
    # Commands
    # ========================================================================

    def dispatch(self, action: Action, position: Optional[Position]) -> bool:
        """
        Apply one player command.

        Args:
            action: What to do with the cell.
            position: (x, y) derived from pointer input, or None when the
                pointer was not over the board.

        Returns:
            True if the command changed the game, False if it was a no-op.
        """
        if position is None:
            return False
        x, y = position
        if action == Action.REVEAL:
            return self.reveal(x, y)
        if action == Action.TOGGLE_FLAG:
            return self.toggle_flag(x, y)
        raise ValueError(f"Unknown action: {action!r}")

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at (x, y).

        The first reveal of a session places the mines, keeping this cell
        and its neighbors clear. A mine ends the game and discloses the
        whole board; a zero-count cell opens its connected region.

        Returns:
            True if the reveal was applied, False otherwise.
        """
        if not self._can_act(x, y):
            return False
        cell = self.board.get(x, y)
        if not cell.is_hidden:
            return False

        generated = False
        if not self._mines_placed:
            self._handle_first_click(x, y)
            cell = self.board.get(x, y)
            generated = True

        if cell.is_mine:
            self._lose(cell)
            return True

        if cell.adjacent_mines > 0:
            cell.reveal()
            changed = [cell]
        else:
            changed = self._flood_fill(x, y)

        self._check_win_condition()

        if generated or len(changed) > 1:
            self._emit(BoardChanged(self._status))
        else:
            self._emit(self._cell_changed(cell))
        return True

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle the flag on the cell at (x, y).

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if not self._can_act(x, y):
            return False
        cell = self.board.get(x, y)
        if not cell.toggle_flag():
            return False
        self._emit(self._cell_changed(cell))
        return True

    # ========================================================================
    # Game Rules
    # ========================================================================

    def _can_act(self, x: int, y: int) -> bool:
        """Check if a command may touch (x, y) at all."""
        if self._status.is_terminal:
            return False
        return self.board.in_bounds(x, y)

    def _handle_first_click(self, x: int, y: int) -> None:
        """Replace the placeholder with a generated board."""
        placeholder = self.board
        self.board = self.generator.generate(
            self.config.width,
            self.config.height,
            self.config.mine_count,
            (x, y),
        )
        # Flags set before the first reveal survive the board swap
        for old in placeholder.all_cells():
            if old.is_flagged:
                self.board.set_state(old.x, old.y, CellState.FLAGGED)

        self._mines_placed = True
        self._status = GameStatus.ACTIVE
        self._started_at = self._clock()
        logger.debug("Mines placed around first click at (%d, %d)", x, y)

    def _flood_fill(self, x: int, y: int) -> List[Cell]:
        """
        Reveal the zero-count region containing (x, y) and its border.

        Works from an explicit stack. A position is skipped on entry if it
        is already revealed or holds a mine; zero-count cells push all of
        their neighbors.

        Returns:
            The cells this call revealed, in reveal order.
        """
        revealed = []
        stack = [(x, y)]
        while stack:
            cell = self.board.get(*stack.pop())
            if cell.is_revealed or cell.is_mine:
                continue
            cell.state = CellState.REVEALED
            revealed.append(cell)
            if cell.adjacent_mines == 0:
                stack.extend(self.board.neighbors(cell.x, cell.y))
        return revealed

    def _lose(self, cell: Cell) -> None:
        """End the game on a mine and disclose every cell."""
        self.board.set_exploded(cell.x, cell.y)
        for other in self.board.all_cells():
            other.state = CellState.REVEALED
        self._finish(GameStatus.LOST)
        logger.info("Game lost: mine at (%d, %d)", cell.x, cell.y)
        self._emit(BoardChanged(self._status))

    def _check_win_condition(self) -> None:
        """Check if all safe cells are revealed."""
        if self.board.all_safe_revealed():
            self._finish(GameStatus.WON)
            logger.info("Game won in %.1f seconds", self.elapsed)

    def _finish(self, status: GameStatus) -> None:
        self._status = status
        self._finished_at = self._clock()

    @staticmethod
    def _cell_changed(cell: Cell) -> CellChanged:
        return CellChanged(
            x=cell.x,
            y=cell.y,
            state=cell.state,
            adjacent_mines=cell.adjacent_mines,
            exploded=cell.exploded,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._status.is_terminal

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    @property
    def flags_placed(self) -> int:
        return sum(1 for cell in self.board.all_cells() if cell.is_flagged)

    @property
    def mines_remaining(self) -> int:
        """Configured mines minus flags placed; negative if over-flagged."""
        return self.config.mine_count - self.flags_placed

    @property
    def elapsed(self) -> float:
        """Seconds from the first reveal until the game ended (or now)."""
        if self._started_at is None:
            return 0.0
        end = self._finished_at if self._finished_at is not None else self._clock()
        return end - self._started_at
