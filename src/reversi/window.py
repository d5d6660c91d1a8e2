import logging
import pygame
from pygame.event import Event
from typing import Optional

from reversi.config import WindowConfig
from reversi.othello.board import COLS, ROWS, Player
from reversi.othello.game import GameController, GameOver, IllegalMove, Outcome

logger = logging.getLogger(__name__)

STATUS_BAR_HEIGHT_PX = 40
FONT_SIZE = 28

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_STATUS_BAR = (40, 40, 40)
COLOR_STATUS_TEXT = (230, 230, 230)

OUTCOME_MESSAGES = {
    Outcome.WHITE_WINS: "White wins!",
    Outcome.BLACK_WINS: "Black wins!",
    Outcome.DRAW: "Draw.",
}


class NonMoveEvent(Exception):
    pass


def get_cell_from_event(event: Event, square_size: int) -> tuple[int, int]:
    if event.type != pygame.MOUSEBUTTONDOWN:
        raise NonMoveEvent

    if event.button != pygame.BUTTON_LEFT:
        raise NonMoveEvent

    x, y = event.pos
    col: int = x // square_size
    row: int = y // square_size

    if not (row in range(ROWS) and col in range(COLS)):
        raise NonMoveEvent

    return row, col


def get_status_text(
    counts: tuple[int, int], turn: Player, outcome: Optional[Outcome]
) -> str:
    white, black = counts
    text = f"White: {white} vs Black: {black}"

    if outcome is None:
        return f"{text} - {turn.name.capitalize()} to move"

    return f"{text} - {OUTCOME_MESSAGES[outcome]}"


class Window:
    def __init__(self, config: WindowConfig) -> None:
        pygame.init()
        self.config = config
        self.square_size = config.square_size
        self.disc_radius = self.square_size // 2 - 5
        self.move_indicator_radius = self.square_size // 8

        self.controller = GameController(on_counts_changed=self.on_counts_changed)
        self.counts = self.controller.counts()

        board_px = self.square_size * COLS
        self.screen = pygame.display.set_mode(
            (board_px, self.square_size * ROWS + STATUS_BAR_HEIGHT_PX)
        )
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, FONT_SIZE)

        pygame.display.set_caption("Reversi")

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
                    break

                try:
                    row, col = get_cell_from_event(event, self.square_size)
                except NonMoveEvent:
                    self.on_event(event)
                else:
                    self.on_move(row, col)

            self.draw()
            self.clock.tick(self.config.frame_rate)

        pygame.quit()

    def on_counts_changed(self, white: int, black: int) -> None:
        self.counts = (white, black)

    def on_event(self, event: Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_n:
            self.controller.reset()

    def on_move(self, row: int, col: int) -> None:
        if self.controller.outcome is not None:
            # Restart game
            self.controller.reset()
            return

        try:
            result = self.controller.attempt_move(row, col)
        except IllegalMove as e:
            logger.debug("Ignoring click: %s", e)
            return

        if isinstance(result, GameOver):
            logger.info(OUTCOME_MESSAGES[result.outcome])

    def get_square_center(self, row: int, col: int) -> tuple[int, int]:
        x = col * self.square_size + self.square_size // 2
        y = row * self.square_size + self.square_size // 2
        return (x, y)

    def draw_disc(self, row: int, col: int, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(row, col)
        pygame.draw.circle(self.screen, color, center, self.disc_radius)

    def draw_move_indicator(
        self, row: int, col: int, color: tuple[int, int, int]
    ) -> None:
        center = self.get_square_center(row, col)
        pygame.draw.circle(self.screen, color, center, self.move_indicator_radius)

    def draw(self) -> None:
        board = self.controller.board
        turn = self.controller.current_player

        if turn == Player.WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)
        self.draw_grid()

        if self.controller.outcome is None:
            legal_moves = board.get_legal_moves(turn)
        else:
            legal_moves = set()

        for cell in board.iter_cells():
            if cell.owner == Player.WHITE:
                self.draw_disc(cell.row, cell.col, COLOR_WHITE_DISC)
            elif cell.owner == Player.BLACK:
                self.draw_disc(cell.row, cell.col, COLOR_BLACK_DISC)
            elif cell in legal_moves:
                self.draw_move_indicator(cell.row, cell.col, turn_color)

        self.draw_status_bar()

        pygame.display.flip()

    def draw_grid(self) -> None:
        width = self.square_size * COLS
        height = self.square_size * ROWS

        for row in range(1, ROWS):
            y = row * self.square_size
            pygame.draw.line(self.screen, COLOR_GRID_LINE, (0, y), (width, y))

        for col in range(1, COLS):
            x = col * self.square_size
            pygame.draw.line(self.screen, COLOR_GRID_LINE, (x, 0), (x, height))

    def draw_status_bar(self) -> None:
        top = self.square_size * ROWS
        width = self.square_size * COLS

        pygame.draw.rect(
            self.screen,
            COLOR_STATUS_BAR,
            ((0, top), (width, STATUS_BAR_HEIGHT_PX)),
        )

        text = get_status_text(
            self.counts, self.controller.current_player, self.controller.outcome
        )
        text_surface = self.font.render(text, True, COLOR_STATUS_TEXT)
        text_rect = text_surface.get_rect()
        text_rect.midleft = (10, top + STATUS_BAR_HEIGHT_PX // 2)
        self.screen.blit(text_surface, text_rect.topleft)
