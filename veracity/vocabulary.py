#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: vocabulary.py
# Project: veracity
# Description: Fixed word and phrase lists used by the feature scorers
# Created: 2026-10-19 09:12:40
# Modified: 2026-10-19 15:21:03

"""
Vocabularies for lexical scoring.

Every list is an immutable tuple (or frozenset for the stop words) built once
at import and shared read-only by all analysis calls.
"""

# Sentiment: matched as substrings of whitespace tokens
POSITIVE_WORDS = (
    "good", "great", "excellent", "positive",
    "success", "improvement", "benefit", "effective",
)

NEGATIVE_WORDS = (
    "bad", "terrible", "awful", "negative",
    "failure", "decline", "harm", "dangerous",
)

HYPERBOLE_WORDS = (
    "amazing", "incredible", "shocking", "unbelievable",
    "miraculous", "devastating", "catastrophic",
)

# Credibility: matched as substrings of the lower-cased document
CREDIBLE_PHRASES = (
    "according to", "research shows", "study found", "experts say",
    "data indicates", "published in", "professor", "university",
    "journal", "official statement",
)

NON_CREDIBLE_PHRASES = (
    "secret", "they dont want you to know", "shocking truth",
    "doctors hate", "miracle cure", "one weird trick",
    "government coverup", "mainstream media wont tell",
)

ATTRIBUTION_MARKERS = ("source:", "according to")

# Both must be present to count as anonymous sourcing
ANONYMOUS_SOURCE_MARKERS = ("anonymous", "source")

# Bias
ABSOLUTIST_WORDS = (
    "always", "never", "everyone knows", "obviously", "clearly",
    "without a doubt", "absolutely", "completely", "totally",
)

EMOTIONAL_WORDS = (
    "outrage", "scandal", "bombshell", "explosive", "shocking",
    "unbelievable", "incredible", "amazing", "terrible", "awful",
)

BALANCE_MARKERS = ("however", "although", "critics say")

# Keywords
STOP_WORDS = frozenset([
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "is", "are", "was", "were", "be", "been", "have",
    "has", "had", "will", "would", "could", "should", "may", "might",
    "must", "can", "this", "that", "these", "those",
])
