#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_samples.py
# Project: veracity
# Description: Tests for the preset sample articles
# Created: 2026-10-19 15:01:12
# Modified: 2026-10-19 15:01:12

import unittest

from veracity import SAMPLE_ARTICLES, InvalidInputError, analyze, get_sample
from veracity.classifier import LABELS


class SampleArticleTest(unittest.TestCase):

    def test_presets(self):
        self.assertEqual(len(SAMPLE_ARTICLES), 3)
        for article in SAMPLE_ARTICLES:
            self.assertTrue(article.title)
            self.assertTrue(article.content.strip())
            self.assertIn(article.expected, LABELS)

    def test_lookup_is_one_based(self):
        self.assertIs(get_sample(1), SAMPLE_ARTICLES[0])
        self.assertIs(get_sample(3), SAMPLE_ARTICLES[2])

    def test_unknown_index(self):
        for index in (0, 4, -1):
            with self.assertRaises(InvalidInputError):
                get_sample(index)

    def test_samples_analyze(self):
        for article in SAMPLE_ARTICLES:
            result = analyze(article.content, article.title)
            self.assertEqual(result.title, article.title)
            self.assertTrue(result.keywords)


if __name__ == "__main__":
    unittest.main()
