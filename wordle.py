#!/usr/bin/env python3
"""
Terminal Wordle: Curses UI with boxed grid and on-screen keyboard.
Features:
- Classic Wordle rules: 6 guesses to find a 5-letter word
- Colored tile feedback: green (correct), yellow (wrong position), plain (not in word)
- On-screen QWERTY keyboard showing letter states
- Unknown words flash red and stay in place for correction
- Keys: a-z=type, backspace=delete, enter=submit, y/n=play again, Ctrl-C=quit

Set WORDLE_LOG=/path/to/file to write a debug log.
"""

import curses
import logging
import os
import sys
import time

from wordle_logic import (CORRECT, INCORRECT, MAX_GUESSES, MISPLACED, REJECTED,
                          WON, KeyboardTracker, Round)
from wordle_words import WordRepository

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
FLASH_FRAMES = 4
FLASH_DELAY = 0.15  # seconds per frame

MIN_KEYBOARD_WIDTH = 47
MIN_KEYBOARD_HEIGHT = 13
MIN_STATUS_HEIGHT = 14

# Never downgrade a key's color (False keeps the last mark for each letter).
KEYBOARD_KEEP_BEST = False

LOG_ENV_VAR = "WORDLE_LOG"

PROMPT = "Type in a word and press Enter! CTRL-C to quit."
NOT_IN_LIST = "Word is not in the word list!"

# ---------------------------------------------------------------------------
# Keys and input events
# ---------------------------------------------------------------------------
KEY_CTRL_C = 3
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)

EVENT_KEY = 'key'
EVENT_RESIZE = 'resize'
EVENT_MOUSE = 'mouse'

# Status line styles
STYLE_ERROR = 'error'
STYLE_WIN = 'win'
STYLE_LOSE = 'lose'

# ---------------------------------------------------------------------------
# Color pair indices
# ---------------------------------------------------------------------------
COLOR_CORRECT = 1
COLOR_MISPLACED = 2
COLOR_INCORRECT = 3
COLOR_KEY = 4
COLOR_INVALID = 5
COLOR_BORDER = 6
COLOR_STATUS = 7
COLOR_WIN = 8
COLOR_LOSE = 9

# ---------------------------------------------------------------------------
# Box drawing
# ---------------------------------------------------------------------------
GRID_TOP = "┌───┬───┬───┬───┬───┐"
GRID_ROW = "│   │   │   │   │   │"
GRID_SEP = "├───┼───┼───┼───┼───┤"
GRID_BOTTOM = "└───┴───┴───┴───┴───┘"
GRID_WIDTH = len(GRID_TOP)

KEYBOARD_ROWS = ["qwertyuiop", "asdfghjkl", "zxcvbnm"]
KEYBOARD_LINES = [
    "┌───┬───┬───┬───┬───┬───┬───┬───┬───┬───┐",
    "│   │   │   │   │   │   │   │   │   │   │",
    "└─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┘",
    "  │   │   │   │   │   │   │   │   │   │",
    "  └─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴─┬─┴───┘",
    "    │   │   │   │   │   │   │",
    "    └───┴───┴───┴───┴───┴───┴───┘",
]
KEYBOARD_WIDTH = len(KEYBOARD_LINES[0])
KEYBOARD_HEIGHT = len(KEYBOARD_LINES)


def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_CORRECT, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(COLOR_MISPLACED, curses.COLOR_BLACK, curses.COLOR_YELLOW)
    curses.init_pair(COLOR_INCORRECT, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_KEY, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(COLOR_INVALID, curses.COLOR_BLACK, curses.COLOR_RED)
    curses.init_pair(COLOR_BORDER, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_STATUS, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_WIN, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_LOSE, curses.COLOR_RED, -1)


# ---------------------------------------------------------------------------
# Layout (no curses dependency)
# ---------------------------------------------------------------------------
def calculate_layout(height, width):
    """Work out where each part of the screen goes for a terminal size."""
    grid_x = max(0, (width - GRID_WIDTH) // 2)
    # Pinned to the bottom on tall screens, under the grid otherwise.
    if height >= 2 * MAX_GUESSES + 1 + 1 + 12:
        kb_y = height - 12
    else:
        kb_y = 2 * MAX_GUESSES + 1
    show_status = height >= MIN_STATUS_HEIGHT
    status_y = height - 2 if height > MIN_STATUS_HEIGHT else height - 1
    # The whole keyboard must fit above the status line.
    kb_limit = status_y if show_status else height
    show_keyboard = (width >= MIN_KEYBOARD_WIDTH
                     and height >= MIN_KEYBOARD_HEIGHT
                     and kb_y + KEYBOARD_HEIGHT <= kb_limit)
    return {
        "grid_x": grid_x,
        "grid_y": 0,
        "show_keyboard": show_keyboard,
        "kb_x": max(0, (width - KEYBOARD_WIDTH) // 2),
        "kb_y": kb_y,
        "show_status": show_status,
        "status_y": status_y,
        "width": width,
    }


def cell_x(left, col):
    """Screen column of the first character of a grid cell."""
    return left + 1 + col * 4


def status_text(segments):
    """Plain text of a status line made of (text, style) segments."""
    return "".join(text for text, _ in segments)


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------
def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def get_state_attr(state):
    """Return the curses attribute for a letter classification."""
    if state == CORRECT:
        return curses.color_pair(COLOR_CORRECT) | curses.A_BOLD
    elif state == MISPLACED:
        return curses.color_pair(COLOR_MISPLACED) | curses.A_BOLD
    elif state == INCORRECT:
        return curses.color_pair(COLOR_INCORRECT)
    return curses.color_pair(COLOR_KEY)


def get_style_attr(style):
    """Return the curses attribute for a status line style."""
    if style == STYLE_WIN:
        return curses.color_pair(COLOR_WIN) | curses.A_BOLD
    elif style == STYLE_LOSE or style == STYLE_ERROR:
        return curses.color_pair(COLOR_LOSE) | curses.A_BOLD
    return curses.color_pair(COLOR_STATUS)


def draw_grid(win, y, x, round_):
    """Draw the 6x5 boxed grid with scored guesses and the current input."""
    border = curses.color_pair(COLOR_BORDER)
    safe_addstr(win, y, x, GRID_TOP, border)
    for row in range(MAX_GUESSES):
        safe_addstr(win, y + row * 2 + 1, x, GRID_ROW, border)
        line = GRID_SEP if row < MAX_GUESSES - 1 else GRID_BOTTOM
        safe_addstr(win, y + row * 2 + 2, x, line, border)

    for row, (word, result) in enumerate(round_.guesses):
        for col, (letter, state) in enumerate(zip(word, result)):
            safe_addstr(win, y + row * 2 + 1, cell_x(x, col),
                        f" {letter.upper()} ", get_state_attr(state))

    if not round_.is_over:
        row = len(round_.guesses)
        for col, letter in enumerate(round_.current_guess):
            safe_addstr(win, y + row * 2 + 1, cell_x(x, col),
                        f" {letter.upper()} ",
                        curses.color_pair(COLOR_INCORRECT) | curses.A_BOLD)


def draw_keyboard(win, y, x, keyboard):
    """Draw the boxed QWERTY keyboard showing letter states."""
    states = keyboard.render_state()
    border = curses.color_pair(COLOR_BORDER)
    for i, line in enumerate(KEYBOARD_LINES):
        safe_addstr(win, y + i, x, line, border)
    for ri, row in enumerate(KEYBOARD_ROWS):
        offset = ri * 2
        for ci, letter in enumerate(row):
            safe_addstr(win, y + ri * 2 + 1, cell_x(x + offset, ci),
                        f" {letter.upper()} ",
                        get_state_attr(states.get(letter)))


def draw_status(win, y, width, segments):
    """Draw a centred status line made of (text, style) segments."""
    length = len(status_text(segments))
    x = max(0, width // 2 - length // 2)
    for text, style in segments:
        safe_addstr(win, y, x, text, get_style_attr(style))
        x += len(text)


# ---------------------------------------------------------------------------
# Terminal collaborator
# ---------------------------------------------------------------------------
class CursesTerminal:
    """All screen and keyboard I/O of the game, on top of a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        curses.raw()  # Ctrl-C arrives as a key instead of SIGINT
        curses.curs_set(0)
        stdscr.keypad(True)
        init_colors()

    def size(self):
        return self.stdscr.getmaxyx()

    def read_event(self):
        """Block for the next input event."""
        ch = self.stdscr.getch()
        if ch == curses.KEY_RESIZE:
            return EVENT_RESIZE, self.size()
        if ch == curses.KEY_MOUSE:
            return EVENT_MOUSE, None
        return EVENT_KEY, ch

    def clear(self):
        self.stdscr.clear()

    def render(self, round_, status):
        """Redraw the whole screen for the given round and status line."""
        height, width = self.size()
        layout = calculate_layout(height, width)
        self.stdscr.erase()
        draw_grid(self.stdscr, layout["grid_y"], layout["grid_x"], round_)
        if layout["show_keyboard"]:
            draw_keyboard(self.stdscr, layout["kb_y"], layout["kb_x"],
                          round_.keyboard)
        if layout["show_status"]:
            draw_status(self.stdscr, layout["status_y"], width, status)
        self.stdscr.refresh()

    def flash_invalid(self, round_):
        """Blink the current row red. Blocks and ignores input meanwhile."""
        height, width = self.size()
        layout = calculate_layout(height, width)
        y = layout["grid_y"] + len(round_.guesses) * 2 + 1
        for frame in range(FLASH_FRAMES):
            if frame % 2 == 0:
                attr = curses.color_pair(COLOR_INVALID) | curses.A_BOLD
            else:
                attr = curses.color_pair(COLOR_INCORRECT) | curses.A_BOLD
            for col, letter in enumerate(round_.current_guess):
                safe_addstr(self.stdscr, y, cell_x(layout["grid_x"], col),
                            f" {letter.upper()} ", attr)
            self.stdscr.refresh()
            time.sleep(FLASH_DELAY)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
class Session:
    """Runs rounds back to back until the player quits or declines."""

    def __init__(self, terminal, words=None, keep_best=KEYBOARD_KEEP_BEST):
        self.terminal = terminal
        self.words = words if words is not None else WordRepository()
        self.keep_best = keep_best
        self.wins = 0
        self.games = 0
        self.status = [(PROMPT, None)]
        self.round = None
        self.new_round()

    def new_round(self):
        """Start over with a fresh round, keyboard and secret word."""
        secret = self.words.random_secret()
        self.round = Round(secret, self.words,
                           KeyboardTracker(keep_best=self.keep_best))
        self.status = [(PROMPT, None)]
        self.terminal.clear()
        logger.info("new round")
        logger.debug("secret word is %r", secret)

    def run(self):
        """Play until quit. Returns the number of rounds finished."""
        logger.info("session started")
        while True:
            if not self.play_round():
                break
            if not self.ask_replay():
                break
            self.new_round()
        logger.info("session ended after %d rounds, %d won",
                    self.games, self.wins)
        return self.games

    def play_round(self):
        """Feed input into the round until it ends.

        Returns False if the player quit mid-round.
        """
        round_ = self.round
        while not round_.is_over:
            self.terminal.render(round_, self.status)
            kind, value = self.terminal.read_event()
            if kind == EVENT_RESIZE:
                self.terminal.clear()
                continue
            if kind != EVENT_KEY:
                continue
            if value == KEY_CTRL_C:
                return False
            self.handle_key(value)

        self.games += 1
        if round_.state == WON:
            self.wins += 1
        logger.info("round %s after %d guesses", round_.state,
                    round_.attempts)
        return True

    def handle_key(self, key):
        round_ = self.round
        self.status = [(PROMPT, None)]
        if key in BACKSPACE_KEYS:
            round_.backspace()
        elif key in ENTER_KEYS:
            status, _ = round_.submit()
            if status == REJECTED:
                self.status = [(NOT_IN_LIST, STYLE_ERROR)]
                self.terminal.render(round_, self.status)
                self.terminal.flash_invalid(round_)
        elif 0 <= key < 256:
            round_.type_letter(chr(key))

    def summary(self):
        """Status line shown once a round is over."""
        round_ = self.round
        if round_.state == WON:
            outcome, style = "won", STYLE_WIN
        else:
            outcome, style = "lost", STYLE_LOSE
        return [
            (f"You {outcome}! The word was ", None),
            (round_.secret_word.upper(), style),
            (f". Score: {self.wins}/{self.games}. Start again? y/n", None),
        ]

    def ask_replay(self):
        """Wait for y/n after a round. Returns True to play again."""
        status = self.summary()
        while True:
            self.terminal.render(self.round, status)
            kind, value = self.terminal.read_event()
            if kind == EVENT_RESIZE:
                self.terminal.clear()
                continue
            if kind != EVENT_KEY:
                continue
            if value in (ord('y'), ord('Y')):
                return True
            if value in (ord('n'), ord('N'), KEY_CTRL_C):
                return False


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def setup_logging():
    """Log to the file named by WORDLE_LOG, or nowhere."""
    path = os.environ.get(LOG_ENV_VAR)
    if path:
        logging.basicConfig(
            filename=path, level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s %(message)s")
    else:
        logging.basicConfig(handlers=[logging.NullHandler()])


def main(stdscr):
    """Main curses game loop."""
    Session(CursesTerminal(stdscr)).run()


def cli():
    """Console entry point. Returns the process exit status."""
    setup_logging()
    try:
        curses.wrapper(main)
    except KeyboardInterrupt:
        pass
    except (curses.error, OSError, ValueError) as e:
        logger.exception("fatal error")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
