# brickout

A small brick-breaking game for a POSIX terminal. The playing field, the
paddle and the ball are drawn with ANSI escape sequences, and keys are read
straight from the terminal through `termios`. The package uses only the
standard library.

## Installing

```
pip install .
```

## Playing

```
brickout
```

The game opens on a title screen with the instructions (the on-screen text
is in Portuguese). Press Enter to leave it; the board is then drawn, and the
ball starts moving after you press any key.

| Key   | Action                            |
|-------|-----------------------------------|
| `a`   | move the paddle left              |
| `d`   | move the paddle right             |
| Enter | pause; press Enter again to go on |
| Esc   | quit and save the score           |

While the game runs the terminal is in unbuffered, no-echo mode with signal
keys turned off, so Ctrl-C does not stop it; use Esc.

The ball moves one step every 200 milliseconds. Each brick it breaks is worth
10 points and turns the ball back. A broken brick gives one extra life in 2
cases out of 12, and doubles the score in 1 case out of 12. You start with
three lives and lose one each time the ball reaches the bottom row. Lives and
score are shown above the board.

The score is written to `score.txt` in the current directory:

- on Esc, the file is overwritten with the score;
- when no lives are left, the score is appended to the file as a new line.

A different file can be given:

```
brickout --score-file my-scores.txt
```

The terminal should be at least 80 columns by 24 rows.

## Using the parts

The building blocks can be imported on their own:

- `brickout.screen.Screen` writes cursor movement, colour, text-attribute and
  box-drawing escape sequences to any text stream (standard output by
  default). `Screen.init` clears the screen, optionally draws a border and
  hides the cursor; `Screen.destroy` resets colours and shows the cursor
  again. `brickout.screen.Color` lists the sixteen terminal colours.
- `brickout.keyboard.Keyboard` puts a terminal into unbuffered, no-echo mode
  and reads single key presses: `keyhit()` checks for a key without blocking
  and `readch()` returns its byte value. Used as a context manager it
  restores the terminal settings on exit.
- `brickout.timer.Timer` is a millisecond interval timer whose clock function
  can be replaced; `time_over()` reports when the interval has passed and
  restarts it.
- `brickout.game.Game` holds one game: the brick map, the paddle, the ball,
  the score and the lives. It draws to a `Screen` and takes a
  `random.Random` for the power-ups, so it can be driven in tests with a
  string stream and a seeded generator. `brickout.game.initial_map()` returns
  a fresh copy of the starting board.

## Running the tests

```
pip install .[test]
pytest
```