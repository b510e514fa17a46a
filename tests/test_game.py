import io

import pytest

from brickout.game import (
    COLUMNS,
    OFFSET_X,
    ROWS,
    Game,
    Point,
    initial_map,
)
from brickout.screen import ESC, Screen


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert stop == 12
        return self.value


class FakeKeyboard:
    def __init__(self, keys):
        self.keys = list(keys)
        self.initialised = False
        self.destroyed = False

    def init(self):
        self.initialised = True

    def destroy(self):
        self.destroyed = True

    def keyhit(self):
        return bool(self.keys)

    def readch(self):
        if not self.keys:
            raise EOFError
        return self.keys.pop(0)


class FakeTimer:
    def __init__(self, over=True):
        self.over = over
        self.delay = None
        self.destroyed = False

    def init(self, value_ms):
        self.delay = value_ms

    def update(self, value_ms):
        self.delay = value_ms

    def destroy(self):
        self.destroyed = True

    def time_over(self):
        return self.over


def make_game(power=7):
    out = io.StringIO()
    return Game(Screen(out), FixedRng(power)), out


def test_initial_map_shape():
    board = initial_map()
    assert len(board) == ROWS
    assert all(len(row) == COLUMNS for row in board)
    assert set(board[0]) == {" "}
    assert all(board[i] == board[1] for i in range(1, 13))
    assert "".join(board[1]).startswith("=== ===")
    assert "".join(board[17]).strip() == "-------"


def test_initial_map_is_a_fresh_copy():
    first = initial_map()
    first[1][0] = " "
    assert initial_map()[1][0] == "="


def test_new_game_state():
    game, _ = make_game()
    assert game.lives == 3
    assert game.points == 0
    assert game.direction == Point(0, 0)
    assert game.ball.x == game.bar + 3


def test_ball_on_bar_center_goes_straight_up():
    game, out = make_game()
    start = Point(game.ball.x, game.ball.y)
    game.move_ball()
    assert game.direction == Point(0, -1)
    assert game.ball == Point(start.x, start.y - 1)
    assert out.getvalue().endswith("*")


def test_ball_on_bar_left_side_goes_left():
    game, _ = make_game()
    game.ball = Point(game.bar + 1, 19)
    game.move_ball()
    assert game.direction == Point(-1, -1)


def test_ball_on_bar_right_side_goes_right():
    game, _ = make_game()
    game.ball = Point(game.bar + 6, 19)
    game.move_ball()
    assert game.direction == Point(1, -1)


def test_brick_hit_clears_whole_brick_and_scores():
    game, _ = make_game(power=7)
    game.ball = Point(OFFSET_X + 2, 5)
    game.direction = Point(1, -1)
    game.move_ball()
    assert game.map[1][0:3] == [" ", " ", " "]
    assert game.map[1][4] == "="
    assert game.points == 10
    assert game.lives == 3
    assert game.direction.y == 1


def test_brick_hit_at_right_edge_of_brick():
    game, _ = make_game(power=7)
    game.ball = Point(OFFSET_X + 1 + 6, 6)
    game.direction = Point(0, -1)
    game.move_ball()
    assert game.map[2][4:7] == [" ", " ", " "]
    assert game.map[2][8] == "="


@pytest.mark.parametrize("power", [0, 1])
def test_extra_life_power(power):
    game, _ = make_game(power=power)
    game.ball = Point(OFFSET_X + 2, 5)
    game.direction = Point(0, -1)
    game.move_ball()
    assert game.lives == 4
    assert game.points == 10


def test_points_multiplier_power():
    game, _ = make_game(power=3)
    game.ball = Point(OFFSET_X + 2, 5)
    game.direction = Point(0, -1)
    game.move_ball()
    assert game.points == 20
    assert game.lives == 3


def test_bottom_costs_a_life_and_bounces():
    game, _ = make_game()
    game.ball = Point(OFFSET_X + 10, 21)
    game.direction = Point(1, 1)
    game.move_ball()
    assert game.lives == 2
    assert game.direction.y == -1
    assert game.ball == Point(OFFSET_X + 11, 20)


def test_left_wall_bounces_right():
    game, _ = make_game()
    game.ball = Point(OFFSET_X + 2, 15)
    game.direction = Point(-1, 1)
    game.move_ball()
    assert game.direction.x == 1


def test_top_bounces_down():
    game, _ = make_game()
    game.ball = Point(OFFSET_X + 10, 4)
    game.direction = Point(0, -1)
    game.move_ball()
    assert game.direction.y == 1


def test_move_bar_left_and_right_round_trip():
    game, out = make_game()
    start = game.bar
    game.move_bar_left()
    assert game.bar == start - 1
    game.move_bar_right()
    assert game.bar == start
    assert "-" in out.getvalue()


def test_draw_status_writes_lives_in_red():
    game, out = make_game()
    game.draw_status()
    assert f"{ESC}[0;31;40m3" in out.getvalue()
    assert out.getvalue().endswith("0")


def test_save_score_write_and_append(tmp_path):
    game, _ = make_game()
    path = tmp_path / "score.txt"
    game.points = 30
    game.save_score(path, append=False)
    assert path.read_text() == "30"
    game.save_score(path, append=True)
    assert path.read_text() == "3030\n"


def test_title_screen_shows_name():
    game, out = make_game()
    game.title_screen()
    assert "BrickOut" in out.getvalue()
    assert "Boa sorte!" in out.getvalue()


def test_run_escape_saves_score(tmp_path):
    game, _ = make_game()
    keyboard = FakeKeyboard([32, 27])
    timer = FakeTimer(over=False)
    path = tmp_path / "score.txt"
    assert game.run(keyboard, timer, path) == 0
    assert path.read_text() == "0"
    assert keyboard.initialised and keyboard.destroyed
    assert timer.destroyed


def test_run_escape_unwritable_path_returns_error(tmp_path):
    game, out = make_game()
    keyboard = FakeKeyboard([32, 27])
    path = tmp_path / "missing" / "score.txt"
    assert game.run(keyboard, FakeTimer(over=False), path) == -1
    assert "Error opening file for writing!" in out.getvalue()
    assert keyboard.destroyed


def test_run_moves_bar_with_keys(tmp_path):
    game, _ = make_game()
    start = game.bar
    keyboard = FakeKeyboard([32, ord("a"), ord("a"), ord("d"), 27])
    game.run(keyboard, FakeTimer(over=False), tmp_path / "s.txt")
    assert game.bar == start - 1


def test_run_pause_waits_for_enter(tmp_path):
    game, out = make_game()
    keyboard = FakeKeyboard([32, 10, ord("x"), 10, 27])
    game.run(keyboard, FakeTimer(over=False), tmp_path / "s.txt")
    assert out.getvalue().count("Pressione ENTER para despausar") == 2
    assert keyboard.keys == []


def test_run_game_over_appends_score(tmp_path):
    game, out = make_game()
    game.lives = 1
    game.points = 50
    game.ball = Point(OFFSET_X + 10, 21)
    game.direction = Point(0, 1)
    path = tmp_path / "score.txt"
    timer = FakeTimer(over=True)
    assert game.run(FakeKeyboard([32]), timer, path) == 0
    assert game.lives == 0
    assert path.read_text() == "50\n"
    assert "Score final:" in out.getvalue()
    assert timer.delay == 200