#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_keywords.py
# Project: veracity
# Description: Tests for keyword extraction
# Created: 2026-10-19 14:20:09
# Modified: 2026-10-19 14:58:44

import unittest

from veracity.keywords import extract_keywords, tokenize_keywords
from veracity.vocabulary import STOP_WORDS


class KeywordTest(unittest.TestCase):
    """Frequency ranking of qualifying tokens"""

    def test_ranked_by_frequency(self):
        self.assertEqual(
            extract_keywords("data data data economy economy policy"),
            ["data", "economy", "policy"]
        )

    def test_ties_keep_first_appearance(self):
        self.assertEqual(
            extract_keywords("zebra apple zebra apple mango"),
            ["zebra", "apple", "mango"]
        )

    def test_short_and_stop_words_dropped(self):
        self.assertEqual(extract_keywords("The cat should have been there, would those?"), ["there"])

    def test_punctuation_and_case(self):
        self.assertEqual(extract_keywords("Economy, economy! ECONOMY."), ["economy"])
        self.assertEqual(tokenize_keywords("They don't know"), ["they", "dont", "know"])

    def test_limit(self):
        text = " ".join(f"keyword{i}" for i in range(12))
        keywords = extract_keywords(text)
        self.assertEqual(len(keywords), 8)
        self.assertEqual(keywords, [f"keyword{i}" for i in range(8)])
        self.assertEqual(len(extract_keywords(text, limit=3)), 3)

    def test_no_qualifying_tokens(self):
        self.assertEqual(extract_keywords("a an the of it"), [])
        self.assertEqual(extract_keywords(""), [])

    def test_never_returns_excluded_tokens(self):
        text = ("These economic reports were published by the ministry and they "
                "could show that inflation will ease, but markets might disagree.")
        for keyword in extract_keywords(text):
            self.assertGreater(len(keyword), 3)
            self.assertNotIn(keyword, STOP_WORDS)


if __name__ == "__main__":
    unittest.main()
