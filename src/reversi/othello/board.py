from __future__ import annotations

from enum import Enum
from itertools import count
from typing import Iterator, Optional

ROWS = 8
COLS = 8


class IllegalMove(Exception):
    pass


class OutOfBounds(IllegalMove):
    pass


class Player(Enum):
    WHITE = 1
    BLACK = -1

    def other(self) -> Player:
        return Player(-self.value)


class Direction(Enum):
    N = (-1, 0)
    NE = (-1, 1)
    E = (0, 1)
    SE = (1, 1)
    S = (1, 0)
    SW = (1, -1)
    W = (0, -1)
    NW = (-1, -1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]


OWNER_TO_CHAR = {
    None: ".",
    Player.WHITE: "W",
    Player.BLACK: "B",
}

CHAR_TO_OWNER = {char: owner for owner, char in OWNER_TO_CHAR.items()}


class Cell:
    def __init__(self, row: int, col: int, owner: Optional[Player] = None) -> None:
        assert row in range(ROWS)
        assert col in range(COLS)

        self.row = row
        self.col = col
        self.owner = owner

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col}, {self.owner})"

    def has_owner(self) -> bool:
        return self.owner is not None

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


class Board:
    """
    Board stores the owner of each of the 64 cells, but not whose turn it is.
    Cell objects are created once and live as long as the board: moves and
    resets only change their owner.
    """

    def __init__(self) -> None:
        self.cells = [[Cell(row, col) for col in range(COLS)] for row in range(ROWS)]

    @classmethod
    def start(cls) -> Board:
        board = Board()
        board.reset()
        return board

    @classmethod
    def empty(cls) -> Board:
        return Board()

    @classmethod
    def from_rows(cls, rows: list[str]) -> Board:
        if len(rows) != ROWS:
            raise ValueError(f"Expected {ROWS} rows, got {len(rows)}")

        board = Board()
        for row, line in enumerate(rows):
            if len(line) != COLS:
                raise ValueError(f'Invalid row length {len(line)} in "{line}"')

            for col, char in enumerate(line):
                try:
                    owner = CHAR_TO_OWNER[char]
                except KeyError:
                    raise ValueError(f'Invalid square "{char}"') from None

                board.cells[row][col].owner = owner

        return board

    def as_rows(self) -> list[str]:
        return [
            "".join(OWNER_TO_CHAR[cell.owner] for cell in cells) for cells in self.cells
        ]

    def __str__(self) -> str:
        return "\n".join(self.as_rows())

    def __repr__(self) -> str:
        return f"Board({self.as_rows()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_rows() == other.as_rows()

    def reset(self) -> None:
        for cell in self.iter_cells():
            cell.owner = None

        self.cells[3][3].owner = Player.WHITE
        self.cells[4][4].owner = Player.WHITE
        self.cells[3][4].owner = Player.BLACK
        self.cells[4][3].owner = Player.BLACK

    def iter_cells(self) -> Iterator[Cell]:
        for cells in self.cells:
            yield from cells

    def get_cell(self, row: int, col: int) -> Cell:
        if row not in range(ROWS) or col not in range(COLS):
            raise OutOfBounds(f"Cell ({row}, {col}) is outside the board")
        return self.cells[row][col]

    def get_owner(self, row: int, col: int) -> Optional[Player]:
        return self.get_cell(row, col).owner

    def get_captured_line(
        self, cell: Cell, player: Player, direction: Direction
    ) -> list[Cell]:
        # Empty cells and the board edge end a line without capturing anything.
        captured: list[Cell] = []

        for d in count(1):
            row = cell.row + direction.d_row * d
            col = cell.col + direction.d_col * d

            if row not in range(ROWS) or col not in range(COLS):
                return []

            probe = self.cells[row][col]

            if probe.owner is None:
                return []

            if probe.owner == player:
                return captured

            captured.append(probe)

        raise AssertionError("unreachable")  # pragma: nocover

    def get_flips(self, cell: Cell, player: Player) -> set[Cell]:
        assert self.cells[cell.row][cell.col] is cell

        if cell.has_owner():
            return set()

        flipped: set[Cell] = set()
        for direction in Direction:
            flipped.update(self.get_captured_line(cell, player, direction))
        return flipped

    def is_legal_move(self, cell: Cell, player: Player) -> bool:
        if cell.has_owner():
            return False

        return any(
            self.get_captured_line(cell, player, direction) for direction in Direction
        )

    def apply_move(self, cell: Cell, player: Player) -> set[Cell]:
        flipped = self.get_flips(cell, player)

        if not flipped:
            raise IllegalMove(f"{player.name} cannot play at ({cell.row}, {cell.col})")

        for flipped_cell in flipped:
            flipped_cell.owner = player
        cell.owner = player

        return flipped

    def get_legal_moves(self, player: Player) -> set[Cell]:
        return {cell for cell in self.iter_cells() if self.is_legal_move(cell, player)}

    def has_any_legal_move(self, player: Player) -> bool:
        return any(self.is_legal_move(cell, player) for cell in self.iter_cells())

    def count(self, player: Player) -> int:
        return sum(1 for cell in self.iter_cells() if cell.owner == player)

    def count_discs(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.has_owner())

    def count_empties(self) -> int:
        return ROWS * COLS - self.count_discs()
