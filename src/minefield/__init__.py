"""
Minefield game module.

Provides the board, first-click-safe board generation, and the game
controller with flood reveal and win/loss detection.
"""
from .cell import Cell, CellKind, CellState
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from .errors import IllegalMineCountError, InvalidCoordinateError, MinefieldError
from .events import Action, BoardChanged, CellChanged, GameStatus
from .generator import BoardGenerator
from .controller import GameController
from .environment import MinefieldEnv

__all__ = [
    "Cell",
    "CellKind",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinefieldError",
    "InvalidCoordinateError",
    "IllegalMineCountError",
    "Action",
    "BoardChanged",
    "CellChanged",
    "GameStatus",
    "BoardGenerator",
    "GameController",
    "MinefieldEnv",
]
