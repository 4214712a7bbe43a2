#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Interactive Sudoku board drawn with Pygame in immediate mode.

Every frame the whole board is redrawn from plain lines, rectangles and text:
click a cell to select it, type a digit to fill it, press Escape to deselect,
and press the on-screen "Solve" button.

The "Solve" button has no solver behind it yet: it fills every cell with the
same placeholder digit derived from the frame tick.

License: MIT
"""

from __future__ import annotations
import os
import sys
import logging
import argparse
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

# ----------------------------
# Config & Constants
# ----------------------------

GRID = 9
BOX = 3
DIGIT_CHARS = "0123456789"

# Board geometry (board pixel coordinates, origin at the grid's top-left)
GRID_SIZE = 750.0
CELL_SIZE = GRID_SIZE / GRID
BOX_LINE_WIDTH = 9
CELL_LINE_WIDTH = 4

# Solve button, placed under the grid
BUTTON_POS = (GRID_SIZE / 2.0 - 100.0, GRID_SIZE + 40.0)
BUTTON_SIZE = (200.0, 80.0)
BUTTON_LINE_WIDTH = 12
BUTTON_LABEL = "Solve"

# Window layout
MARGIN = 20
WIDTH = int(GRID_SIZE) + 2 * MARGIN
HEIGHT = int(BUTTON_POS[1] + BUTTON_SIZE[1]) + BUTTON_LINE_WIDTH + 2 * MARGIN

BG_COLOR = (255, 255, 255)
LINE_COLOR = (0, 0, 0)
TEXT_COLOR = (0, 0, 0)
SELECT_COLOR = (230, 41, 55)

# Font sizes
NUMBER_FONT_SIZE = 60
BUTTON_FONT_SIZE = 64

# Selected cell blinks: hidden for one 10-frame phase out of every three
BLINK_PHASE_FRAMES = 10
BLINK_CYCLE_PHASES = 3

TICK_WRAP = 2 ** 32

DEFAULT_FONT_PATH = "./Roboto-Regular.ttf"
DEFAULT_FPS = 60

Cell = Tuple[int, int]
Point = Tuple[float, float]

logger = logging.getLogger("sudoku_board")

# ----------------------------
# Logging
# ----------------------------

def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the 'sudoku_board' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the log to.
    """
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")

# ----------------------------
# Frame Input
# ----------------------------

class FrameInput(NamedTuple):
    """Everything the board reads from the host in one frame."""
    pointer: Point = (-1.0, -1.0)
    pointer_down: bool = False
    digit: Optional[int] = None
    cancel: bool = False


def cell_at(pointer: Point) -> Optional[Cell]:
    """Return (row, col) of the cell under a board-space point, or None outside the grid."""
    x, y = pointer
    if not (0.0 <= x < GRID_SIZE and 0.0 <= y < GRID_SIZE):
        return None
    r = min(int(y // CELL_SIZE), GRID - 1)
    c = min(int(x // CELL_SIZE), GRID - 1)
    return (r, c)


def solve_button_hit(pointer: Point, pointer_down: bool) -> bool:
    dx = pointer[0] - BUTTON_POS[0]
    dy = pointer[1] - BUTTON_POS[1]
    return (pointer_down
            and 0.0 < dx < BUTTON_SIZE[0]
            and 0.0 < dy < BUTTON_SIZE[1])


def is_blink_hidden(tick: int) -> bool:
    return (tick // BLINK_PHASE_FRAMES) % BLINK_CYCLE_PHASES == 0


def next_tick(tick: int) -> int:
    return (tick + 1) % TICK_WRAP


def parse_digit(char: str) -> Optional[int]:
    """Only the ASCII digits 0..9 count as input; anything else is dropped."""
    if len(char) == 1 and char in DIGIT_CHARS:
        return int(char)
    return None

# ----------------------------
# Board State Controller
# ----------------------------

class BoardState:
    """
    Holds the 9x9 grid (0 = empty) and the optional selected cell.
    All mutation goes through handle_input / update / fill_placeholder.
    """
    def __init__(self):
        self.grid = np.zeros((GRID, GRID), dtype=np.uint8)
        self.selected: Optional[Cell] = None
        self._warned_placeholder = False

    def get_state(self) -> np.ndarray:
        return np.array(self.grid, dtype=np.int32)

    def select(self, r: int, c: int) -> None:
        if not (0 <= r < GRID and 0 <= c < GRID):
            raise ValueError(f"cell ({r}, {c}) is outside the {GRID}x{GRID} grid")
        if self.selected != (r, c):
            logger.debug("Selected cell (%d, %d)", r, c)
        self.selected = (r, c)

    def clear_selection(self) -> None:
        if self.selected is not None:
            logger.debug("Cleared selection (%d, %d)", *self.selected)
        self.selected = None

    def set_value(self, r: int, c: int, val: int) -> None:
        if not (0 <= r < GRID and 0 <= c < GRID):
            raise ValueError(f"cell ({r}, {c}) is outside the {GRID}x{GRID} grid")
        if not (0 <= val <= 9):
            raise ValueError(f"cell value must be in 0..9, got {val}")
        self.grid[r, c] = val
        logger.debug("Cell (%d, %d) <- %d", r, c, val)

    def handle_input(self, frame: FrameInput) -> None:
        """
        Apply one frame of pointer/keyboard input:
          - pointer held inside the grid selects the cell under it
          - cancel clears the selection (wins over a click in the same frame)
          - a digit overwrites the selected cell, if any
        """
        if frame.pointer_down:
            hit = cell_at(frame.pointer)
            if hit is not None:
                self.select(*hit)
        if frame.cancel:
            self.clear_selection()
        if frame.digit is not None and self.selected is not None:
            r, c = self.selected
            self.set_value(r, c, frame.digit)

    def fill_placeholder(self, tick: int) -> int:
        # No solver exists; every cell gets the same tick-derived digit.
        val = (tick % 9) + 1
        if not self._warned_placeholder:
            logger.warning("Solve has no solving algorithm; filling the grid with placeholder values")
            self._warned_placeholder = True
        self.grid.fill(val)
        logger.info("Solve pressed at tick %d, grid filled with %d", tick, val)
        return val

    def update(self, frame: FrameInput, tick: int) -> bool:
        """One frame of state mutation. Returns True if the Solve button was pressed."""
        self.handle_input(frame)
        if solve_button_hit(frame.pointer, frame.pointer_down):
            self.fill_placeholder(tick)
            return True
        return False

    def cells_to_draw(self, tick: int) -> Iterator[Tuple[int, int, int, bool, bool]]:
        """
        Yield (r, c, value, selected, show_digit) for every cell that needs drawing.
        Empty unselected cells are skipped; the selected cell's digit blinks.
        """
        for r in range(GRID):
            for c in range(GRID):
                val = int(self.grid[r, c])
                selected = self.selected == (r, c)
                if val == 0 and not selected:
                    continue
                show_digit = not (selected and is_blink_hidden(tick))
                yield r, c, val, selected, show_digit

# ----------------------------
# UI Engine with Pygame
# ----------------------------

class FontLoadError(RuntimeError):
    """The font file exists but cannot be used."""


def load_font(path: str, size: int):
    import pygame

    if not os.path.exists(path):
        logger.error("Font file not found: %s", path)
        raise FileNotFoundError(f"font file not found: {path}")
    try:
        font = pygame.font.Font(path, size)
        # Measuring a glyph fails on unreadable or corrupt files
        font.size("0")
    except (OSError, pygame.error) as exc:
        logger.error("Cannot load font %s: %s", path, exc)
        raise FontLoadError(f"cannot load font {path}: {exc}") from exc
    logger.debug("Loaded font %s at size %d", path, size)
    return font


def frame_input_from_events(events: Iterable, pointer: Point,
                            pointer_down: bool) -> Tuple[bool, FrameInput]:
    """
    Translate one frame of pygame events plus the mouse state into a FrameInput.
    Returns (quit_requested, frame_input).
    """
    import pygame

    quit_requested = False
    digit: Optional[int] = None
    cancel = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                cancel = True
                continue
            typed = parse_digit(getattr(event, "unicode", ""))
            if typed is not None:
                digit = typed
    return quit_requested, FrameInput(pointer, pointer_down, digit, cancel)


class Game:
    """
    Manage the window, fonts and frame loop; draw the board with Pygame.
    """
    def __init__(self, font_path: str = DEFAULT_FONT_PATH, fps: int = DEFAULT_FPS):
        import pygame  # Late import so the board state can be used headless

        self.pygame = pygame
        self.screen = None
        self.clock = None
        self.font_num = None
        self.font_button = None
        self.font_path = font_path
        self.fps = fps
        self.origin: Point = (float(MARGIN), float(MARGIN))

        self.board = BoardState()
        self.tick: int = 0

    def init_pygame(self):
        pygame = self.pygame
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("sudoku")
        self.clock = pygame.time.Clock()

        self.font_num = load_font(self.font_path, NUMBER_FONT_SIZE)
        self.font_button = load_font(self.font_path, BUTTON_FONT_SIZE)

    def screen_to_board(self, pos: Tuple[int, int]) -> Point:
        return (pos[0] - self.origin[0], pos[1] - self.origin[1])

    def board_to_screen(self, x: float, y: float) -> Point:
        return (x + self.origin[0], y + self.origin[1])

    def poll_input(self) -> Tuple[bool, FrameInput]:
        pygame = self.pygame
        pointer = self.screen_to_board(pygame.mouse.get_pos())
        pointer_down = bool(pygame.mouse.get_pressed()[0])
        return frame_input_from_events(pygame.event.get(), pointer, pointer_down)

    def draw_contents(self, tick: int):
        pygame = self.pygame
        for r, c, val, selected, show_digit in self.board.cells_to_draw(tick):
            x, y = self.board_to_screen(c * CELL_SIZE, r * CELL_SIZE)
            if selected:
                pygame.draw.rect(self.screen, SELECT_COLOR,
                                 pygame.Rect(round(x), round(y), round(CELL_SIZE), round(CELL_SIZE)))
            if not show_digit:
                continue
            text = self.font_num.render(str(val), True, TEXT_COLOR)
            rect = text.get_rect(center=(round(x + CELL_SIZE / 2), round(y + CELL_SIZE / 2)))
            self.screen.blit(text, rect)

    def draw_grid(self, cells: int, thickness: int):
        pygame = self.pygame
        t = thickness / 2.0
        for i in range(cells + 1):
            p = GRID_SIZE * (i / cells)
            pygame.draw.line(self.screen, LINE_COLOR,
                             self.board_to_screen(p, -t), self.board_to_screen(p, GRID_SIZE + t), thickness)
            pygame.draw.line(self.screen, LINE_COLOR,
                             self.board_to_screen(0.0, p), self.board_to_screen(GRID_SIZE, p), thickness)

    def draw_solve_button(self):
        pygame = self.pygame
        x, y = self.board_to_screen(*BUTTON_POS)
        rect = pygame.Rect(round(x), round(y), round(BUTTON_SIZE[0]), round(BUTTON_SIZE[1]))
        pygame.draw.rect(self.screen, LINE_COLOR, rect, BUTTON_LINE_WIDTH)
        label = self.font_button.render(BUTTON_LABEL, True, TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=rect.center))

    def draw(self, tick: int, finalize: bool = True):
        self.screen.fill(BG_COLOR)

        # Grid lines go after the contents so they sit on top
        self.draw_contents(tick)
        self.draw_grid(BOX, BOX_LINE_WIDTH)
        self.draw_grid(GRID, CELL_LINE_WIDTH)
        self.draw_solve_button()

        if finalize:
            self.pygame.display.flip()

    def step(self, frame: FrameInput, finalize: bool = True) -> bool:
        """Advance one frame: bump the tick, apply input, redraw."""
        self.tick = next_tick(self.tick)
        solved = self.board.update(frame, self.tick)
        self.draw(self.tick, finalize=finalize)
        return solved

    def run(self):
        pygame = self.pygame
        running = True
        try:
            self.init_pygame()
            logger.info("Board ready (%dx%d window, %d fps)", WIDTH, HEIGHT, self.fps)
            while running:
                quit_requested, frame = self.poll_input()
                if quit_requested:
                    running = False
                    continue
                self.step(frame)
                self.clock.tick(self.fps)
            logger.info("Window closed after %d frames", self.tick)
        finally:
            pygame.quit()

# ----------------------------
# Entry Point
# ----------------------------

def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive Sudoku board.")
    parser.add_argument("--font", type=str, default=DEFAULT_FONT_PATH,
                        help=f"Path to a TrueType font (default: {DEFAULT_FONT_PATH})")
    parser.add_argument("--fps", type=positive_int, default=DEFAULT_FPS,
                        help=f"Frame rate cap (default: {DEFAULT_FPS})")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        game = Game(font_path=args.font, fps=args.fps)
        game.run()
    except ImportError:
        logger.error("Pygame not installed. Install with: pip install pygame")
        raise
    except (FileNotFoundError, FontLoadError):
        logger.error("Cannot start without a font; pass one with --font")
        raise

if __name__ == "__main__":
    main()

"""
USAGE & CONTROLS:
- Run: python sudoku_board.py [--font PATH] [--fps N] [--log-level LEVEL]
- Click (or hold) on a cell to select it; the selected cell is red and its digit blinks.
- Type 0..9 to write that digit into the selected cell.
- Press Escape to deselect.
- Click "Solve" to fill the grid with a placeholder digit (there is no solver yet).
"""
