#!/usr/bin/env python3
"""
Test suite for wordle_logic.py: scoring, keyboard tracking and rounds.
These tests run WITHOUT a terminal.
"""

import random
import unittest
from collections import Counter

from wordle_logic import (ALPHABET, CONTINUE, CORRECT, IGNORED, INCORRECT,
                          LOST, MAX_GUESSES, MISPLACED, PLAYING, REJECTED,
                          WON, WORD_LENGTH, KeyboardTracker, Round,
                          check_win, evaluate_guess)
from wordle_words import ACCEPTABLE, WORDS, WordRepository

C, M, I = CORRECT, MISPLACED, INCORRECT

GUESSES = ["stale", "pious", "dumpy", "light", "vivid", "zonal", "foyer"]


def make_words():
    """Small repository with a single secret and a handful of guesses."""
    return WordRepository(secrets=["crane"], extra=GUESSES)


def type_word(round_, word):
    for letter in word:
        round_.type_letter(letter)


# =============================================================================
# 1. EVALUATE GUESS
# =============================================================================

class TestEvaluateGuess(unittest.TestCase):
    """Tests for the evaluate_guess() function."""

    def test_all_correct(self):
        """An exact match is correct everywhere."""
        self.assertEqual(evaluate_guess("crane", "crane"), [C] * 5)

    def test_all_incorrect(self):
        """No shared letters gives all incorrect."""
        self.assertEqual(evaluate_guess("xxxxx", "hello"), [I] * 5)

    def test_correct_position(self):
        """Letters in the right place are correct."""
        result = evaluate_guess("heart", "hello")
        self.assertEqual(result[0], C)  # h
        self.assertEqual(result[1], C)  # e

    def test_wrong_position(self):
        """Letters elsewhere in the word are misplaced."""
        result = evaluate_guess("ohelx", "hello")
        self.assertEqual(result[0], M)  # o

    def test_golden_allot_lolly(self):
        """Duplicate letters consume secret letters in two passes."""
        self.assertEqual(evaluate_guess("LOLLY", "ALLOT"), [M, M, C, I, I])

    def test_case_insensitive(self):
        """Inputs are lowercased before comparing."""
        self.assertEqual(evaluate_guess("Crane", "CRANE"), [C] * 5)

    def test_correct_takes_priority_over_misplaced(self):
        """An exact match claims the letter before an earlier misplaced one."""
        # Only one 'e' in the secret, matched exactly at index 4
        self.assertEqual(evaluate_guess("eerie", "crane"), [I, I, M, I, C])

    def test_duplicate_limited_by_secret(self):
        """Only as many hits as the secret has copies of a letter."""
        result = evaluate_guess("aaxxx", "abcde")
        self.assertEqual(result[0], C)
        self.assertEqual(result[1], I)

    def test_first_remaining_occurrence_consumed(self):
        """Two misplaced copies need two unmatched secret copies."""
        self.assertEqual(evaluate_guess("xxaax", "aabbc"), [I, I, M, M, I])

    def test_returns_new_list(self):
        """Each call returns a fresh list of five classifications."""
        first = evaluate_guess("stale", "crane")
        second = evaluate_guess("stale", "crane")
        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        self.assertEqual(len(first), WORD_LENGTH)


class TestEvaluateProperties(unittest.TestCase):
    """Counting properties over many word pairs."""

    @classmethod
    def setUpClass(cls):
        rng = random.Random(1234)
        pool = WORDS + ACCEPTABLE
        cls.pairs = [(rng.choice(pool), rng.choice(pool)) for _ in range(500)]
        cls.pairs += [("lolly", "allot"), ("eerie", "crane"), ("sissy", "sassy")]

    def test_correct_count_matches_exact_positions(self):
        for guess, secret in self.pairs:
            result = evaluate_guess(guess, secret)
            exact = sum(g == s for g, s in zip(guess, secret))
            self.assertEqual(result.count(C), exact, (guess, secret))

    def test_hits_never_exceed_secret_count(self):
        for guess, secret in self.pairs:
            result = evaluate_guess(guess, secret)
            hits = Counter(g for g, r in zip(guess, result) if r != I)
            available = Counter(secret)
            for letter, count in hits.items():
                self.assertLessEqual(count, available[letter], (guess, secret))

    def test_hits_equal_shared_letters(self):
        for guess, secret in self.pairs:
            result = evaluate_guess(guess, secret)
            hits = sum(r != I for r in result)
            shared = sum((Counter(guess) & Counter(secret)).values())
            self.assertEqual(hits, shared, (guess, secret))

    def test_deterministic(self):
        for guess, secret in self.pairs[:50]:
            self.assertEqual(evaluate_guess(guess, secret),
                             evaluate_guess(guess, secret))


# =============================================================================
# 2. WIN DETECTION
# =============================================================================

class TestWinDetection(unittest.TestCase):
    """Tests for check_win()."""

    def test_win_all_correct(self):
        self.assertTrue(check_win([C] * 5))

    def test_no_win_with_misplaced(self):
        self.assertFalse(check_win([C, C, M, C, C]))

    def test_no_win_with_incorrect(self):
        self.assertFalse(check_win([C, I, C, C, C]))


# =============================================================================
# 3. KEYBOARD TRACKING
# =============================================================================

class TestKeyboardTracker(unittest.TestCase):
    """Tests for KeyboardTracker."""

    def test_starts_unmarked(self):
        """Every letter starts with no classification."""
        state = KeyboardTracker().render_state()
        self.assertEqual(sorted(state), list(ALPHABET))
        self.assertTrue(all(v is None for v in state.values()))

    def test_mark_guess_records_each_letter(self):
        kb = KeyboardTracker()
        kb.mark_guess("crane", [I, M, C, I, M])
        self.assertEqual(kb.get('c'), I)
        self.assertEqual(kb.get('r'), M)
        self.assertEqual(kb.get('a'), C)
        self.assertEqual(kb.get('n'), I)
        self.assertEqual(kb.get('e'), M)
        self.assertIsNone(kb.get('z'))

    def test_last_write_wins_by_default(self):
        """Without keep_best a later mark replaces an earlier one."""
        kb = KeyboardTracker()
        kb.mark('a', C)
        kb.mark('a', I)
        self.assertEqual(kb.get('a'), I)

    def test_duplicate_letters_marked_in_order(self):
        """Each occurrence is marked; the rightmost wins by default."""
        kb = KeyboardTracker()
        kb.mark_guess("lolly", evaluate_guess("lolly", "allot"))
        self.assertEqual(kb.get('l'), I)
        self.assertEqual(kb.get('o'), M)
        self.assertEqual(kb.get('y'), I)

    def test_keep_best_never_downgrades(self):
        kb = KeyboardTracker(keep_best=True)
        kb.mark_guess("lolly", evaluate_guess("lolly", "allot"))
        self.assertEqual(kb.get('l'), C)
        kb.mark('o', I)
        self.assertEqual(kb.get('o'), M)

    def test_keep_best_still_upgrades(self):
        kb = KeyboardTracker(keep_best=True)
        kb.mark('a', I)
        kb.mark('a', M)
        self.assertEqual(kb.get('a'), M)
        kb.mark('a', C)
        self.assertEqual(kb.get('a'), C)

    def test_ignores_non_letters(self):
        kb = KeyboardTracker()
        kb.mark('1', C)
        self.assertNotIn('1', kb.render_state())

    def test_uppercase_letters_lowercased(self):
        """Marks are case-insensitive like scoring and word lookup."""
        kb = KeyboardTracker()
        kb.mark('A', C)
        kb.mark_guess("LOLLY", [M, M, C, I, I])
        self.assertEqual(kb.get('a'), C)
        self.assertEqual(kb.get('o'), M)
        self.assertNotIn('A', kb.render_state())

    def test_rejects_unknown_classification(self):
        with self.assertRaises(ValueError):
            KeyboardTracker().mark('a', 'green')

    def test_render_state_is_a_copy(self):
        kb = KeyboardTracker()
        state = kb.render_state()
        state['a'] = C
        self.assertIsNone(kb.get('a'))


# =============================================================================
# 4. ROUND STATE MACHINE
# =============================================================================

class TestRoundEditing(unittest.TestCase):
    """Typing and deleting letters."""

    def setUp(self):
        self.round = Round("crane", make_words())

    def test_initial_state(self):
        self.assertEqual(self.round.state, PLAYING)
        self.assertEqual(self.round.guesses, [])
        self.assertEqual(self.round.current_guess, "")
        self.assertEqual(self.round.remaining, MAX_GUESSES)

    def test_type_letters(self):
        type_word(self.round, "cra")
        self.assertEqual(self.round.current_guess, "cra")

    def test_typing_past_five_is_noop(self):
        type_word(self.round, "stale")
        self.assertFalse(self.round.type_letter('x'))
        self.assertEqual(self.round.current_guess, "stale")

    def test_rejects_non_lowercase(self):
        for letter in ("A", "1", " ", "ab", ""):
            self.assertFalse(self.round.type_letter(letter))
        self.assertEqual(self.round.current_guess, "")

    def test_backspace(self):
        type_word(self.round, "cra")
        self.assertTrue(self.round.backspace())
        self.assertEqual(self.round.current_guess, "cr")

    def test_backspace_empty_is_noop(self):
        self.assertFalse(self.round.backspace())
        self.assertEqual(self.round.current_guess, "")


class TestRoundSubmit(unittest.TestCase):
    """Submitting guesses and round termination."""

    def setUp(self):
        self.round = Round("crane", make_words())

    def test_short_guess_ignored(self):
        type_word(self.round, "cra")
        self.assertEqual(self.round.submit(), (IGNORED, None))
        self.assertEqual(self.round.current_guess, "cra")
        self.assertEqual(self.round.guesses, [])

    def test_unknown_word_rejected(self):
        """A rejected word is kept for correction and not recorded."""
        type_word(self.round, "zzzzz")
        self.assertEqual(self.round.submit(), (REJECTED, None))
        self.assertEqual(self.round.current_guess, "zzzzz")
        self.assertEqual(self.round.guesses, [])
        self.assertEqual(self.round.state, PLAYING)
        self.assertIsNone(self.round.keyboard.get('z'))

    def test_accepted_guess_recorded(self):
        type_word(self.round, "stale")
        status, result = self.round.submit()
        self.assertEqual(status, CONTINUE)
        self.assertEqual(result, [I, I, C, I, C])
        self.assertEqual(self.round.guesses, [("stale", result)])
        self.assertEqual(self.round.current_guess, "")
        self.assertEqual(self.round.remaining, MAX_GUESSES - 1)

    def test_keyboard_updated(self):
        type_word(self.round, "stale")
        self.round.submit()
        self.assertEqual(self.round.keyboard.get('a'), C)
        self.assertEqual(self.round.keyboard.get('s'), I)

    def test_exact_match_wins(self):
        type_word(self.round, "crane")
        self.assertEqual(self.round.submit(), (WON, [C] * 5))
        self.assertEqual(self.round.state, WON)
        self.assertTrue(self.round.is_over)

    def test_loss_on_sixth_guess_only(self):
        for i, word in enumerate(GUESSES[:MAX_GUESSES]):
            type_word(self.round, word)
            status, _ = self.round.submit()
            if i < MAX_GUESSES - 1:
                self.assertEqual(status, CONTINUE)
                self.assertEqual(self.round.state, PLAYING)
        self.assertEqual(status, LOST)
        self.assertEqual(self.round.state, LOST)
        self.assertEqual(self.round.attempts, MAX_GUESSES)

    def test_win_on_last_guess(self):
        for word in GUESSES[:MAX_GUESSES - 1]:
            type_word(self.round, word)
            self.round.submit()
        type_word(self.round, "crane")
        status, _ = self.round.submit()
        self.assertEqual(status, WON)
        self.assertEqual(self.round.state, WON)

    def test_finished_round_ignores_input(self):
        type_word(self.round, "crane")
        self.round.submit()
        self.assertFalse(self.round.type_letter('a'))
        self.assertFalse(self.round.backspace())
        self.assertEqual(self.round.submit(), (IGNORED, None))
        self.assertEqual(len(self.round.guesses), 1)

    def test_secret_lowercased(self):
        self.assertEqual(Round("CRANE", make_words()).secret_word, "crane")


if __name__ == "__main__":
    unittest.main()
