"""The BrickOut game: a paddle, a bouncing ball and rows of bricks."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from brickout.keyboard import Keyboard
from brickout.screen import MAXX, MAXY, Color, Screen
from brickout.timer import Timer

COLUMNS = 52
ROWS = 20
OFFSET_X = (MAXX - COLUMNS) // 2
OFFSET_Y = (MAXY - ROWS) // 2

TICK_MS = 200
START_LIVES = 3
BRICK_POINTS = 10
BAR_WIDTH = 7
BAR_Y = 20
BALL_BAR_Y = 19
TOP_Y = 4
BOTTOM_Y = 21
STATUS_Y = 3

KEY_ESC = 27
KEY_ENTER = 10
KEY_LEFT = ord("a")
KEY_RIGHT = ord("d")

BRICK = "="
PAUSE_MESSAGE = "Pressione ENTER para despausar"

_BRICK_ROW = "=== === === === === === === === === === === === ==="
_BLANK_ROW = " " * 51
_MAP_ROWS = (
    [_BLANK_ROW]
    + [_BRICK_ROW] * 12
    + [_BLANK_ROW] * 4
    + ["                      -------                      ", _BLANK_ROW, ""]
)


def initial_map() -> list[list[str]]:
    """Return a fresh, mutable copy of the starting board."""
    return [list(row.ljust(COLUMNS)) for row in _MAP_ROWS]


@dataclass
class Point:
    """A screen position or a direction of travel."""

    x: int
    y: int


class _Keys(Protocol):
    def init(self) -> None: ...
    def destroy(self) -> None: ...
    def keyhit(self) -> bool: ...
    def readch(self) -> int: ...


class _Clock(Protocol):
    def init(self, value_ms: int) -> None: ...
    def destroy(self) -> None: ...
    def update(self, value_ms: int) -> None: ...
    def time_over(self) -> bool: ...


class Game:
    """State of one game and the drawing that goes with it."""

    def __init__(self, screen: Screen | None = None, rng: random.Random | None = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.rng = rng if rng is not None else random.Random()
        self.map = initial_map()
        self.ball = Point(OFFSET_X + 26, BALL_BAR_Y)
        self.direction = Point(0, 0)
        self.bar = OFFSET_X + 23
        self.lives = START_LIVES
        self.points = 0

    def title_screen(self) -> None:
        """Draw the title page with the instructions."""
        s = self.screen
        s.clear()
        center_x = MAXX // 2
        top_y = (MAXY - 6) // 2

        s.gotoxy(center_x, top_y - 1)
        s.write("BrickOut")
        s.gotoxy(center_x - 2, top_y)
        s.write("Instruções:\n")

        lines = [
            " - Use as teclas A e D para mover a base",
            " - Pressione qualquer tecla para começar o jogo",
            " - Quebre Tijolos com a bola",
            " - 2 poderes podem apareçer (1- mais vidas, 2-multiplicador de pontos)\n",
            " -Para sair no meio do jogo, pressione ESC, para pausar pressione ENTER\n",
        ]
        for row, line in enumerate(lines, start=2):
            s.gotoxy(center_x - 20, top_y + row)
            s.write(line)

        s.gotoxy(center_x, top_y + 8)
        s.write("Boa sorte!")
        s.update()

    def draw_map(self) -> None:
        """Clear the screen and draw the whole board."""
        s = self.screen
        s.clear()
        for y, row in enumerate(self.map):
            s.gotoxy(OFFSET_X + 1, OFFSET_Y + y + 1)
            for ch in row:
                if ch in ("-", BRICK):
                    s.set_color(Color.WHITE, Color.WHITE)
                elif ch == "*":
                    s.set_color(Color.GREEN, Color.BLACK)
                else:
                    s.set_color(Color.BLACK, Color.BLACK)
                s.write(ch)
        s.update()

    def move_bar_left(self) -> None:
        s = self.screen
        s.set_color(Color.WHITE, Color.WHITE)
        s.gotoxy(self.bar - 1, BAR_Y)
        s.write("-")
        s.gotoxy(self.bar + BAR_WIDTH - 1, BAR_Y)
        s.write(" ")
        self.bar -= 1
        s.update()

    def move_bar_right(self) -> None:
        s = self.screen
        s.set_color(Color.WHITE, Color.WHITE)
        s.gotoxy(self.bar + BAR_WIDTH - 1, BAR_Y)
        s.write("-")
        s.gotoxy(self.bar - 1, BAR_Y)
        s.write(" ")
        self.bar += 1
        s.update()

    def _is_brick(self, row: list[str], col: int) -> bool:
        return 0 <= col < len(row) and row[col] == BRICK

    def _break_brick(self) -> None:
        ball = self.ball
        row = self.map[ball.y - TOP_Y]
        col = ball.x - OFFSET_X - 1

        row[col] = " "
        if self._is_brick(row, col - 1):
            row[col - 1] = " "
            if self._is_brick(row, col - 2):
                row[col - 2] = " "
                self.screen.gotoxy(ball.x - 2, ball.y - 1)
            else:
                row[col + 1] = " "
                self.screen.gotoxy(ball.x - 1, ball.y - 1)
        else:
            row[col + 2] = " "
            self.screen.gotoxy(ball.x, ball.y - 1)
        self.screen.write("   ")

        self.points += BRICK_POINTS
        power = self.rng.randrange(12)
        if power in (0, 1):
            self.lives += 1
        elif power == 3:
            self.points *= 2
        self.direction.y *= -1

    def move_ball(self) -> None:
        """Advance the ball one step, bouncing and breaking bricks."""
        ball, d = self.ball, self.direction
        offset = ball.x - self.bar
        if ball.y == BALL_BAR_Y and 0 <= offset <= BAR_WIDTH - 1:
            d.y = -1
            center = self.bar + 3
            d.x = 1 if center < ball.x else (-1 if center > ball.x else 0)
        else:
            row = self.map[ball.y - TOP_Y]
            if self._is_brick(row, ball.x - OFFSET_X - 1):
                self._break_brick()
            if ball.x == OFFSET_X + 2:
                d.x = 1
            elif ball.x == MAXX - OFFSET_X - 1:
                d.x = -1
            if ball.y == TOP_Y:
                d.y = 1
            if ball.y == BOTTOM_Y:
                self.lives -= 1
                d.y = -1

        s = self.screen
        s.gotoxy(ball.x, ball.y)
        s.write(" ")
        ball.x += d.x
        ball.y += d.y
        s.gotoxy(ball.x, ball.y)
        s.set_color(Color.GREEN, Color.BLACK)
        s.write("*")
        s.update()

    def draw_status(self) -> None:
        """Show the remaining lives and the score."""
        s = self.screen
        s.gotoxy(OFFSET_X + 1, STATUS_Y)
        s.set_color(Color.RED, Color.BLACK)
        s.write(str(self.lives))
        s.gotoxy(MAXX - OFFSET_X - 4, STATUS_Y)
        s.set_color(Color.YELLOW, Color.BLACK)
        s.write(str(self.points))

    def save_score(self, path: str | Path, append: bool) -> None:
        """Write the score to path; appending adds it as a new line."""
        if append:
            with open(path, "a", encoding="utf-8") as fh:
                fh.write(f"{self.points}\n")
        else:
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(str(self.points))

    def _pause(self, keyboard: _Keys) -> None:
        s = self.screen
        while True:
            s.gotoxy(ROWS + 3, STATUS_Y)
            s.write(PAUSE_MESSAGE)
            s.update()
            if keyboard.readch() == KEY_ENTER:
                s.gotoxy(ROWS + 3, STATUS_Y)
                s.write(" " * len(PAUSE_MESSAGE))
                s.update()
                return

    def run(self, keyboard: _Keys, timer: _Clock, score_path: str | Path = "score.txt") -> int:
        """Play until ESC or until no lives are left; return an exit status."""
        s = self.screen
        self.draw_map()
        keyboard.init()
        try:
            timer.init(TICK_MS)
            s.gotoxy(OFFSET_X, BOTTOM_Y)
            keyboard.readch()
            while True:
                if keyboard.keyhit():
                    ch = keyboard.readch()
                    if ch == KEY_ESC:
                        try:
                            self.save_score(score_path, append=False)
                        except OSError:
                            s.write("Error opening file for writing!\n")
                            s.update()
                            return -1
                        s.gotoxy(OFFSET_X, 22)
                        s.update()
                        break
                    if ch == KEY_ENTER:
                        self._pause(keyboard)
                    elif ch == KEY_LEFT:
                        if self.bar - 2 > OFFSET_X:
                            self.move_bar_left()
                    elif ch == KEY_RIGHT:
                        if self.bar + 8 < MAXX - OFFSET_X:
                            self.move_bar_right()

                if timer.time_over():
                    timer.update(TICK_MS)
                    self.move_ball()
                    self.draw_status()
                    if self.lives == 0:
                        self.save_score(score_path, append=True)
                        s.gotoxy(ROWS + 30, STATUS_Y)
                        s.write("Score final:")
                        s.gotoxy(OFFSET_X, 22)
                        s.update()
                        break
        finally:
            timer.destroy()
            keyboard.destroy()
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="brickout", description="Break the bricks with the ball.")
    parser.add_argument("--score-file", default="score.txt", help="where the final score is written")
    args = parser.parse_args(argv)

    screen = Screen()
    game = Game(screen)
    screen.init(True)
    game.title_screen()
    sys.stdin.readline()
    screen.clear()
    return game.run(Keyboard(), Timer(), args.score_file)


if __name__ == "__main__":
    sys.exit(main())