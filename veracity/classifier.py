#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: classifier.py
# Project: veracity
# Description: Rule-based labelling and confidence estimation
# Created: 2026-10-19 10:02:37
# Modified: 2026-10-19 15:44:18

"""
Classification Module

Weighs a FeatureSet into an authentic/fabricated label and a confidence
percentage. Both carry a small bounded random perturbation to mimic the
uncertainty of a trained model; pass a different noise source to pin it.
"""

import logging
import threading
from typing import Callable, Optional

import numpy as np

from veracity.features import FeatureSet

logger = logging.getLogger(__name__)

AUTHENTIC = "authentic"
FABRICATED = "fabricated"
LABELS = (AUTHENTIC, FABRICATED)

NOISE_SPAN = 0.05

# Decision weights
BIAS_WEIGHT = -0.3
CREDIBILITY_WEIGHT = 0.4
SENTIMENT_WEIGHT = -0.2
COMPLEXITY_WEIGHT = -0.1
COMPLEXITY_CENTER = 0.5

# Confidence weights
CONFIDENCE_BASE = 0.5
CONFIDENCE_CREDIBILITY_WEIGHT = 0.3
CONFIDENCE_BIAS_WEIGHT = 0.2
CONFIDENCE_SENTIMENT_WEIGHT = 0.1
CONFIDENCE_FLOOR = 50.0
CONFIDENCE_CEILING = 95.0

HIGH_CONFIDENCE = 80.0
MEDIUM_CONFIDENCE = 60.0

NoiseSource = Callable[[], float]

_local = threading.local()


def _generator() -> np.random.Generator:
    # One generator per thread, each seeded from fresh OS entropy
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


def uniform_noise() -> float:
    """Draw a perturbation uniformly from [-NOISE_SPAN, NOISE_SPAN]."""
    return float(_generator().uniform(-NOISE_SPAN, NOISE_SPAN))


def zero_noise() -> float:
    return 0.0


def _draw(noise: Optional[NoiseSource]) -> float:
    value = (noise or uniform_noise)()
    return float(np.clip(value, -NOISE_SPAN, NOISE_SPAN))


def decision_score(features: FeatureSet, noise: Optional[NoiseSource] = None) -> float:
    """
    Weighted evidence that an article is authentic.

    Positive values lean authentic, zero and below lean fabricated.

    Args:
        features (FeatureSet): Extracted features
        noise (NoiseSource): Perturbation source, defaults to uniform_noise

    Returns:
        float: Raw decision score
    """
    score = features.bias * BIAS_WEIGHT
    score += (features.credibility - 0.5) * CREDIBILITY_WEIGHT
    score += abs(features.sentiment) * SENTIMENT_WEIGHT
    score += abs(features.complexity - COMPLEXITY_CENTER) * COMPLEXITY_WEIGHT
    score += _draw(noise)
    return score


def classify(features: FeatureSet, noise: Optional[NoiseSource] = None) -> str:
    """
    Label an article from its features.

    The boundary is strict: a score of exactly zero is fabricated.

    Args:
        features (FeatureSet): Extracted features
        noise (NoiseSource): Perturbation source, defaults to uniform_noise

    Returns:
        str: AUTHENTIC or FABRICATED
    """
    score = decision_score(features, noise)
    label = AUTHENTIC if score > 0 else FABRICATED
    logger.debug(f"Decision score {score:.4f} -> {label}")
    return label


def estimate_confidence(
    features: FeatureSet,
    label: str,
    noise: Optional[NoiseSource] = None
) -> float:
    """
    Estimate confidence in a label as a percentage.

    Args:
        features (FeatureSet): Extracted features
        label (str): AUTHENTIC or FABRICATED
        noise (NoiseSource): Perturbation source, defaults to uniform_noise

    Returns:
        float: Confidence in [50, 95]
    """
    if label not in LABELS:
        raise ValueError(f"Unknown label: {label!r}")

    confidence = CONFIDENCE_BASE

    if label == AUTHENTIC:
        confidence += features.credibility * CONFIDENCE_CREDIBILITY_WEIGHT
        confidence += (0.5 - features.bias) * CONFIDENCE_BIAS_WEIGHT
    else:
        confidence += (1 - features.credibility) * CONFIDENCE_CREDIBILITY_WEIGHT
        confidence += features.bias * CONFIDENCE_BIAS_WEIGHT

    confidence += abs(features.sentiment) * CONFIDENCE_SENTIMENT_WEIGHT
    confidence += _draw(noise)

    percentage = float(np.clip(confidence * 100, CONFIDENCE_FLOOR, CONFIDENCE_CEILING))
    logger.debug(f"Confidence for {label}: {percentage:.2f}%")
    return percentage


def confidence_level(confidence: float) -> str:
    """Bucket a confidence percentage into high, medium or low."""
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"
