#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_classifier.py
# Project: veracity
# Description: Tests for labelling and confidence estimation
# Created: 2026-10-19 14:02:51
# Modified: 2026-10-19 16:12:40

import threading
import unittest

from veracity.classifier import (
    AUTHENTIC,
    FABRICATED,
    NOISE_SPAN,
    classify,
    confidence_level,
    decision_score,
    estimate_confidence,
    uniform_noise,
    zero_noise,
)
from veracity.features import FeatureSet


def features(sentiment=0.0, complexity=0.5, credibility=0.5, bias=0.0):
    return FeatureSet(sentiment=sentiment, complexity=complexity,
                      credibility=credibility, bias=bias)


class ClassifyTest(unittest.TestCase):
    """Weighted decision rule"""

    def test_decision_score(self):
        f = features(sentiment=-0.5, complexity=0.9, credibility=0.8, bias=0.2)
        # -0.06 + 0.12 - 0.1 - 0.04
        self.assertAlmostEqual(decision_score(f, zero_noise), -0.08)

    def test_credible_is_authentic(self):
        self.assertEqual(classify(features(credibility=1.0), zero_noise), AUTHENTIC)

    def test_biased_is_fabricated(self):
        self.assertEqual(classify(features(bias=1.0), zero_noise), FABRICATED)

    def test_zero_score_is_fabricated(self):
        self.assertEqual(decision_score(features(), zero_noise), 0.0)
        self.assertEqual(classify(features(), zero_noise), FABRICATED)

    def test_noise_moves_boundary(self):
        self.assertEqual(classify(features(), lambda: NOISE_SPAN), AUTHENTIC)
        self.assertEqual(classify(features(), lambda: -NOISE_SPAN), FABRICATED)

    def test_noise_clipped(self):
        self.assertAlmostEqual(decision_score(features(), lambda: 10.0), NOISE_SPAN)
        self.assertAlmostEqual(decision_score(features(), lambda: -10.0), -NOISE_SPAN)

    def test_default_noise(self):
        for _ in range(50):
            self.assertIn(classify(features()), (AUTHENTIC, FABRICATED))


class ConfidenceTest(unittest.TestCase):
    """Confidence percentage"""

    def test_authentic(self):
        # 0.5 + 1.0 * 0.3 + 0.5 * 0.2
        self.assertAlmostEqual(
            estimate_confidence(features(credibility=1.0), AUTHENTIC, zero_noise), 90.0
        )

    def test_fabricated(self):
        # 0.5 + 0.5 * 0.3 + 0
        self.assertAlmostEqual(estimate_confidence(features(), FABRICATED, zero_noise), 65.0)

    def test_sentiment_magnitude(self):
        low = estimate_confidence(features(), FABRICATED, zero_noise)
        high = estimate_confidence(features(sentiment=-0.5), FABRICATED, zero_noise)
        self.assertAlmostEqual(high - low, 5.0)

    def test_floor(self):
        f = features(credibility=0.0, bias=1.0)
        self.assertEqual(estimate_confidence(f, AUTHENTIC, lambda: -NOISE_SPAN), 50.0)

    def test_ceiling(self):
        f = features(sentiment=1.0, credibility=0.0, bias=1.0)
        self.assertEqual(estimate_confidence(f, FABRICATED, lambda: NOISE_SPAN), 95.0)

    def test_unknown_label(self):
        with self.assertRaises(ValueError):
            estimate_confidence(features(), "fake")

    def test_default_noise_in_range(self):
        for label in (AUTHENTIC, FABRICATED):
            for _ in range(50):
                value = estimate_confidence(features(sentiment=0.3), label)
                self.assertGreaterEqual(value, 50.0)
                self.assertLessEqual(value, 95.0)

    def test_confidence_level(self):
        self.assertEqual(confidence_level(95.0), "high")
        self.assertEqual(confidence_level(80.0), "high")
        self.assertEqual(confidence_level(79.9), "medium")
        self.assertEqual(confidence_level(60.0), "medium")
        self.assertEqual(confidence_level(59.9), "low")


class NoiseTest(unittest.TestCase):

    def test_uniform_noise_bounded(self):
        draws = [uniform_noise() for _ in range(1000)]
        self.assertTrue(all(-NOISE_SPAN <= d <= NOISE_SPAN for d in draws))
        self.assertGreater(len(set(draws)), 1)

    def test_threads_draw_independently(self):
        results = {}

        def worker(name):
            results[name] = [uniform_noise() for _ in range(20)]

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(results), 4)
        sequences = {tuple(draws) for draws in results.values()}
        self.assertEqual(len(sequences), 4)
        for draws in results.values():
            self.assertTrue(all(-NOISE_SPAN <= d <= NOISE_SPAN for d in draws))


if __name__ == "__main__":
    unittest.main()
