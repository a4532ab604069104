#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: features.py
# Project: veracity
# Description: Lexical feature extraction for article classification
# Created: 2026-10-19 09:30:11
# Modified: 2026-10-19 15:40:52

"""
Feature Extraction Module

Turns raw article text into four scalar signals: sentiment, complexity,
credibility and bias. All scorers are deterministic and never fail; empty
text produces defined, degenerate scores.
"""

import re
import logging
from dataclasses import dataclass, asdict
from typing import Dict

import numpy as np

from veracity.vocabulary import (
    POSITIVE_WORDS,
    NEGATIVE_WORDS,
    HYPERBOLE_WORDS,
    CREDIBLE_PHRASES,
    NON_CREDIBLE_PHRASES,
    ATTRIBUTION_MARKERS,
    ANONYMOUS_SOURCE_MARKERS,
    ABSOLUTIST_WORDS,
    EMOTIONAL_WORDS,
    BALANCE_MARKERS,
)

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r"[.!?]+")
WHITESPACE = re.compile(r"\s+")

# Sentiment weights
SENTIMENT_STEP = 0.1
HYPERBOLE_PENALTY = 0.05

# Complexity weights
WORDS_PER_SENTENCE_WEIGHT = 0.02
WORD_LENGTH_WEIGHT = 0.1

# Credibility weights
CREDIBILITY_BASELINE = 0.5
CREDIBLE_BONUS = 0.1
NON_CREDIBLE_PENALTY = 0.2
ATTRIBUTION_BONUS = 0.1
ANONYMOUS_SOURCE_PENALTY = 0.1

# Bias weights
ABSOLUTIST_WEIGHT = 0.1
EMOTIONAL_WEIGHT = 0.05
BALANCE_CREDIT = 0.1


@dataclass(frozen=True)
class FeatureSet:
    """
    Scalar signals extracted from one article.

    Attributes:
        sentiment (float): Net polarity of loaded vocabulary, in [-1, 1]
        complexity (float): Reading difficulty proxy, in [0, 1]
        credibility (float): Sourcing minus sensationalism, in [0, 1]
        bias (float): Absolutist/charged language minus balance, in [0, 1]
    """
    sentiment: float
    complexity: float
    credibility: float
    bias: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _combine(content: str, title: str) -> str:
    return f"{content} {title}".lower()


def _count_matches(text: str, phrases) -> int:
    """Number of distinct phrases contained in text."""
    return sum(1 for phrase in phrases if phrase in text)


def calculate_sentiment(text: str) -> float:
    """
    Score polarity of emotionally loaded vocabulary.

    Each whitespace token adds or subtracts a fixed step when it contains a
    positive or negative word; tokens containing hyperbole are counted and
    penalized regardless of polarity.

    Args:
        text (str): Input text

    Returns:
        float: Sentiment in [-1, 1]
    """
    score = 0.0
    extreme_count = 0

    for token in text.lower().split():
        if any(word in token for word in POSITIVE_WORDS):
            score += SENTIMENT_STEP
        if any(word in token for word in NEGATIVE_WORDS):
            score -= SENTIMENT_STEP
        if any(word in token for word in HYPERBOLE_WORDS):
            extreme_count += 1

    score -= extreme_count * HYPERBOLE_PENALTY

    return float(np.clip(score, -1.0, 1.0))


def calculate_complexity(text: str) -> float:
    """
    Estimate reading difficulty from sentence and word length.

    Args:
        text (str): Input text

    Returns:
        float: Complexity, capped at 1
    """
    words = text.split()
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]

    word_count = max(len(words), 1)
    sentence_count = max(len(sentences), 1)

    avg_words_per_sentence = len(words) / sentence_count
    avg_word_length = len(WHITESPACE.sub("", text)) / word_count

    score = (avg_words_per_sentence * WORDS_PER_SENTENCE_WEIGHT
             + avg_word_length * WORD_LENGTH_WEIGHT)

    return float(min(1.0, score))


def calculate_credibility(content: str, title: str = "") -> float:
    """
    Score attribution language against sensationalist phrasing.

    Starts from a neutral 0.5. Each phrase counts at most once no matter how
    often it appears.

    Args:
        content (str): Article body
        title (str): Article title

    Returns:
        float: Credibility in [0, 1]
    """
    text = _combine(content, title)

    score = CREDIBILITY_BASELINE
    score += _count_matches(text, CREDIBLE_PHRASES) * CREDIBLE_BONUS
    score -= _count_matches(text, NON_CREDIBLE_PHRASES) * NON_CREDIBLE_PENALTY

    if any(marker in text for marker in ATTRIBUTION_MARKERS):
        score += ATTRIBUTION_BONUS
    if all(marker in text for marker in ANONYMOUS_SOURCE_MARKERS):
        score -= ANONYMOUS_SOURCE_PENALTY

    return float(np.clip(score, 0.0, 1.0))


def calculate_bias(content: str, title: str = "") -> float:
    """
    Score absolutist and emotionally charged language, credited for balance.

    Args:
        content (str): Article body
        title (str): Article title

    Returns:
        float: Bias in [0, 1]
    """
    text = _combine(content, title)

    score = _count_matches(text, ABSOLUTIST_WORDS) * ABSOLUTIST_WEIGHT
    score += _count_matches(text, EMOTIONAL_WORDS) * EMOTIONAL_WEIGHT

    if any(marker in text for marker in BALANCE_MARKERS):
        score -= BALANCE_CREDIT

    return float(np.clip(score, 0.0, 1.0))


def extract_features(content: str, title: str = "") -> FeatureSet:
    """
    Compute all four signals for one article.

    Complexity looks at the body only; the other scorers read body and title
    together.

    Args:
        content (str): Article body
        title (str): Article title

    Returns:
        FeatureSet: Extracted features
    """
    features = FeatureSet(
        sentiment=calculate_sentiment(f"{content} {title}"),
        complexity=calculate_complexity(content),
        credibility=calculate_credibility(content, title),
        bias=calculate_bias(content, title),
    )
    logger.debug(f"Extracted features: {features}")
    return features
