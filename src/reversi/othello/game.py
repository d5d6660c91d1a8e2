from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from reversi.othello.board import Board, Cell, IllegalMove, OutOfBounds, Player

__all__ = [
    "Continue",
    "CountsCallback",
    "GameController",
    "GameOver",
    "IllegalMove",
    "MoveResult",
    "OutOfBounds",
    "Outcome",
]

logger = logging.getLogger(__name__)

# Called with (white_count, black_count).
CountsCallback = Callable[[int, int], None]


class Outcome(Enum):
    WHITE_WINS = "white_wins"
    BLACK_WINS = "black_wins"
    DRAW = "draw"

    @classmethod
    def from_counts(cls, white: int, black: int) -> Outcome:
        if white > black:
            return cls.WHITE_WINS
        if black > white:
            return cls.BLACK_WINS
        return cls.DRAW


class MoveResult:
    def __init__(self, cell: Cell, flipped: set[Cell]) -> None:
        self.cell = cell
        self.flipped = flipped

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cell}, flipped={len(self.flipped)})"


class Continue(MoveResult):
    pass


class GameOver(MoveResult):
    def __init__(self, cell: Cell, flipped: set[Cell], outcome: Outcome) -> None:
        super().__init__(cell, flipped)
        self.outcome = outcome

    def __repr__(self) -> str:
        return f"GameOver({self.cell}, flipped={len(self.flipped)}, {self.outcome})"


class GameController:
    """
    Runs a two player game on a single board.

    Turns alternate after every move, without passing: when the player to move
    has no legal move left, the game ends, even if the other player could still
    move. The winner is the player owning most discs at that point.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        turn: Player = Player.WHITE,
        on_counts_changed: Optional[CountsCallback] = None,
    ) -> None:
        if board is None:
            board = Board.start()

        self.board = board
        self.current_player = turn
        self.outcome: Optional[Outcome] = None
        self.on_counts_changed = on_counts_changed

    def reset(self) -> None:
        self.board.reset()
        self.current_player = Player.WHITE
        self.outcome = None
        logger.info("New game started")
        self._notify_counts_changed()

    def attempt_move(self, row: int, col: int) -> MoveResult:
        if self.outcome is not None:
            raise IllegalMove("Game is over")

        cell = self.board.get_cell(row, col)

        if cell.has_owner():
            raise IllegalMove(f"Cell ({row}, {col}) is occupied")

        flipped = self.board.apply_move(cell, self.current_player)
        logger.debug(
            "%s played (%d, %d), flipped %d",
            self.current_player.name,
            row,
            col,
            len(flipped),
        )
        self._notify_counts_changed()

        self.current_player = self.current_player.other()

        if self.is_game_over():
            self.outcome = Outcome.from_counts(*self.counts())
            logger.info("Game over: %s, counts %s", self.outcome.name, self.counts())
            return GameOver(cell, flipped, self.outcome)

        return Continue(cell, flipped)

    def is_game_over(self) -> bool:
        return not self.board.has_any_legal_move(self.current_player)

    def counts(self) -> tuple[int, int]:
        return self.board.count(Player.WHITE), self.board.count(Player.BLACK)

    def cell_owner(self, row: int, col: int) -> Optional[Player]:
        return self.board.get_owner(row, col)

    def _notify_counts_changed(self) -> None:
        if self.on_counts_changed is not None:
            self.on_counts_changed(*self.counts())
