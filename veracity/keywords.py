#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: keywords.py
# Project: veracity
# Description: Frequency-ranked keyword extraction
# Created: 2026-10-19 10:40:05
# Modified: 2026-10-19 14:58:30

import re
from collections import Counter
from typing import List

from veracity.vocabulary import STOP_WORDS

KEYWORD_LIMIT = 8
MIN_KEYWORD_LENGTH = 4

PUNCTUATION = re.compile(r"[^\w\s]")


def tokenize_keywords(content: str) -> List[str]:
    """Lower-cased tokens that qualify as keywords, in document order."""
    words = PUNCTUATION.sub("", content.lower()).split()
    return [
        word for word in words
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]


def extract_keywords(content: str, limit: int = KEYWORD_LIMIT) -> List[str]:
    """
    Return the most frequent qualifying tokens in content.

    Tokens shorter than four characters and stop words are skipped. Equal
    frequencies keep the order in which the tokens first appear.

    Args:
        content (str): Article body
        limit (int): Maximum number of keywords

    Returns:
        List[str]: Keywords, most frequent first
    """
    word_freq = Counter(tokenize_keywords(content))
    return [word for word, _ in word_freq.most_common(limit)]
