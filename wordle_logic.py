"""
Pure game logic for Terminal Wordle (no curses dependency).

- evaluate_guess(): per-letter scoring of a guess against the secret word
- KeyboardTracker: letter states shown on the on-screen keyboard
- Round: one round of play, from the first letter typed to a win or loss
"""

import logging

logger = logging.getLogger(__name__)

# Maximum guesses allowed
MAX_GUESSES = 6

# Word length
WORD_LENGTH = 5

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# ---------------------------------------------------------------------------
# Letter classifications
# ---------------------------------------------------------------------------
CORRECT = 'correct'
MISPLACED = 'misplaced'
INCORRECT = 'incorrect'

PRIORITY = {INCORRECT: 0, MISPLACED: 1, CORRECT: 2}

# ---------------------------------------------------------------------------
# Round states and submit statuses
# ---------------------------------------------------------------------------
PLAYING = 'playing'
WON = 'won'
LOST = 'lost'

CONTINUE = 'continue'
REJECTED = 'rejected'
IGNORED = 'ignored'


def evaluate_guess(guess, secret):
    """Evaluate a guess against the secret word.

    Returns a list of 5 classifications: 'correct', 'misplaced' or
    'incorrect'. Exact matches consume their secret letter first, so a
    letter occurring k times in the secret is credited at most k times.
    """
    guess = guess.lower()
    remaining = list(secret.lower())
    result = [INCORRECT] * WORD_LENGTH

    # First pass: exact positions
    for i in range(WORD_LENGTH):
        if guess[i] == remaining[i]:
            result[i] = CORRECT
            remaining[i] = None

    # Second pass: first unconsumed occurrence elsewhere
    for i in range(WORD_LENGTH):
        if result[i] == CORRECT:
            continue
        if guess[i] in remaining:
            result[i] = MISPLACED
            remaining[remaining.index(guess[i])] = None

    return result


def check_win(result):
    """Return True if all letters are correct."""
    return all(r == CORRECT for r in result)


class KeyboardTracker:
    """Best-known classification for each letter of the alphabet.

    By default every mark overwrites the previous one, so a duplicated
    letter scored 'incorrect' after a 'correct' occurrence shows as
    incorrect. With keep_best=True a letter is never downgraded.
    """

    def __init__(self, keep_best=False):
        self.keep_best = keep_best
        self.letters = dict.fromkeys(ALPHABET)

    def get(self, letter):
        return self.letters.get(letter)

    def mark(self, letter, classification):
        if classification not in PRIORITY:
            raise ValueError(f"unknown classification: {classification!r}")
        letter = letter.lower()
        if letter not in self.letters:
            return
        current = self.letters[letter]
        if (self.keep_best and current is not None
                and PRIORITY[classification] < PRIORITY[current]):
            return
        self.letters[letter] = classification

    def mark_guess(self, guess, result):
        """Mark every letter of a scored guess, left to right."""
        for letter, classification in zip(guess, result):
            self.mark(letter, classification)

    def render_state(self):
        return dict(self.letters)


class Round:
    """State machine for a single round: playing -> won | lost."""

    def __init__(self, secret_word, words, keyboard=None):
        self.secret_word = secret_word.lower()
        self.words = words
        self.keyboard = keyboard if keyboard is not None else KeyboardTracker()
        self.guesses = []  # [(word, result)] in submission order
        self.current_guess = ""
        self.state = PLAYING

    @property
    def is_over(self):
        return self.state != PLAYING

    @property
    def attempts(self):
        return len(self.guesses)

    @property
    def remaining(self):
        return MAX_GUESSES - len(self.guesses)

    def type_letter(self, letter):
        """Append a lowercase letter to the current guess.

        Returns True if the guess changed.
        """
        if self.state != PLAYING or len(self.current_guess) >= WORD_LENGTH:
            return False
        if len(letter) != 1 or letter not in ALPHABET:
            return False
        self.current_guess += letter
        return True

    def backspace(self):
        """Delete the last letter of the current guess, if any."""
        if self.state != PLAYING or not self.current_guess:
            return False
        self.current_guess = self.current_guess[:-1]
        return True

    def submit(self):
        """Submit the current guess.

        Returns (status, result). status is 'ignored' when the round is
        over or the guess is short, 'rejected' when the word is unknown
        (the typed letters stay in place), otherwise 'continue', 'won'
        or 'lost'. result is the classification list, or None when
        nothing was recorded.
        """
        if self.state != PLAYING or len(self.current_guess) != WORD_LENGTH:
            return IGNORED, None

        guess = self.current_guess
        if not self.words.is_acceptable_guess(guess):
            logger.info("rejected guess %r", guess)
            return REJECTED, None

        result = evaluate_guess(guess, self.secret_word)
        self.guesses.append((guess, result))
        self.keyboard.mark_guess(guess, result)
        self.current_guess = ""

        if check_win(result):
            self.state = WON
        elif len(self.guesses) >= MAX_GUESSES:
            self.state = LOST
        logger.info("guess %d %r -> %s", len(self.guesses), guess, self.state)

        status = CONTINUE if self.state == PLAYING else self.state
        return status, result
