"""
Commands accepted by and notifications emitted from the game controller.

A presentation layer turns pointer input into an optional (x, y) plus an
Action, and redraws when it receives CellChanged or BoardChanged.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable, Union

from .cell import CellState


class GameStatus(Enum):
    """Lifecycle of a game session."""

    NOT_STARTED = auto()
    ACTIVE = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Won and lost games accept no further input."""
        return self in (GameStatus.WON, GameStatus.LOST)


class Action(Enum):
    """Player actions on a single cell."""

    REVEAL = auto()
    TOGGLE_FLAG = auto()


@dataclass(frozen=True)
class CellChanged:
    """Exactly one cell changed; redraw that cell."""

    x: int
    y: int
    state: CellState
    adjacent_mines: int
    exploded: bool


@dataclass(frozen=True)
class BoardChanged:
    """Several cells changed; redraw the whole board."""

    status: GameStatus


Event = Union[CellChanged, BoardChanged]
Listener = Callable[[Event], None]
