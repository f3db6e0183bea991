#!/usr/bin/env python3
"""
Test suite for wordle_words.py: bundled word lists and WordRepository.
"""

import random
import unittest

from wordle_words import ACCEPTABLE, WORDS, WordRepository


# =============================================================================
# 1. WORD LISTS
# =============================================================================

class TestWordLists(unittest.TestCase):
    """The bundled lists are usable as shipped."""

    def test_word_list_has_words(self):
        """WORDS must contain at least 50 words."""
        self.assertIsInstance(WORDS, list)
        self.assertGreaterEqual(len(WORDS), 50)

    def test_acceptable_is_larger_pool(self):
        self.assertIsInstance(ACCEPTABLE, list)
        self.assertGreater(len(set(WORDS) | set(ACCEPTABLE)), len(set(WORDS)))

    def test_all_words_are_five_lowercase_letters(self):
        for word in WORDS + ACCEPTABLE:
            self.assertEqual(len(word), 5, f"Word '{word}' is not 5 letters")
            self.assertTrue(word.isalpha() and word.islower(),
                            f"Word '{word}' is not lowercase letters")


# =============================================================================
# 2. LOOKUPS
# =============================================================================

class TestRepositoryLookup(unittest.TestCase):
    """is_valid_secret() and is_acceptable_guess()."""

    @classmethod
    def setUpClass(cls):
        cls.words = WordRepository(secrets=["crane", "stale"],
                                   extra=["lolly", "allot"])

    def test_valid_secret(self):
        self.assertTrue(self.words.is_valid_secret("crane"))
        self.assertFalse(self.words.is_valid_secret("lolly"))

    def test_acceptable_guess_includes_secrets(self):
        self.assertTrue(self.words.is_acceptable_guess("stale"))
        self.assertTrue(self.words.is_acceptable_guess("allot"))

    def test_unknown_word(self):
        self.assertFalse(self.words.is_acceptable_guess("zzzzz"))
        self.assertFalse(self.words.is_acceptable_guess("cran"))

    def test_case_insensitive(self):
        self.assertTrue(self.words.is_valid_secret("CRANE"))
        self.assertTrue(self.words.is_acceptable_guess("Lolly"))

    def test_sets_are_frozen(self):
        self.assertIsInstance(self.words.secrets, frozenset)
        self.assertIsInstance(self.words.acceptable, frozenset)

    def test_default_lists(self):
        words = WordRepository()
        self.assertEqual(len(words), len(set(WORDS)))
        self.assertTrue(words.is_valid_secret(WORDS[0]))
        self.assertTrue(words.is_acceptable_guess(ACCEPTABLE[0]))


# =============================================================================
# 3. SELECTION
# =============================================================================

class TestRandomSecret(unittest.TestCase):
    """random_secret()."""

    def test_returns_secret_word(self):
        words = WordRepository()
        for _ in range(20):
            word = words.random_secret()
            self.assertTrue(words.is_valid_secret(word))
            self.assertEqual(len(word), 5)

    def test_varies(self):
        words = WordRepository()
        picks = set(words.random_secret() for _ in range(50))
        self.assertGreater(len(picks), 1,
                           "random_secret() always returns the same word")

    def test_seeded_rng_is_reproducible(self):
        first = WordRepository(rng=random.Random(7))
        second = WordRepository(rng=random.Random(7))
        self.assertEqual([first.random_secret() for _ in range(5)],
                         [second.random_secret() for _ in range(5)])

    def test_never_picks_extra_words(self):
        words = WordRepository(secrets=["crane"], extra=["lolly"])
        self.assertEqual(set(words.random_secret() for _ in range(10)),
                         {"crane"})

    def test_empty_repository_is_fatal(self):
        words = WordRepository(secrets=[], extra=["lolly"])
        with self.assertRaises(ValueError):
            words.random_secret()


if __name__ == "__main__":
    unittest.main()
