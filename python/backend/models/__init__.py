from backend.models.board import Board, BoardError, Direction, Position
from backend.models.puzzlecase import UNSOLVABLE, Outcome, PuzzleCase
from backend.models.suite import SuiteFormatError, load_suite, parse_suite

__all__ = [
    "Board",
    "BoardError",
    "Direction",
    "Outcome",
    "Position",
    "PuzzleCase",
    "SuiteFormatError",
    "UNSOLVABLE",
    "load_suite",
    "parse_suite",
]
