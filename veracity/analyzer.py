#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: analyzer.py
# Project: veracity
# Description: Single entry point composing features, label, confidence and keywords
# Created: 2026-10-19 11:05:20
# Modified: 2026-10-20 10:20:11

"""
Article Analysis Module

analyze() is the only call collaborators need: it validates the input, runs
feature extraction, classification, confidence estimation and keyword
extraction in order, and returns an immutable AnalysisResult. Nothing is
stored between calls.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple
from uuid import uuid4

import pytz

from veracity.classifier import (
    AUTHENTIC,
    NoiseSource,
    classify,
    confidence_level,
    estimate_confidence,
)
from veracity.exceptions import InvalidInputError
from veracity.features import FeatureSet, extract_features
from veracity.keywords import KEYWORD_LIMIT, extract_keywords

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing one article."""
    id: str
    content: str
    title: str
    label: str
    confidence: float
    features: FeatureSet
    keywords: Tuple[str, ...]
    created_at: datetime

    @property
    def is_authentic(self) -> bool:
        return self.label == AUTHENTIC

    @property
    def confidence_level(self) -> str:
        return confidence_level(self.confidence)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-safe types"""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "label": self.label,
            "confidence": self.confidence,
            "confidence_level": self.confidence_level,
            "features": self.features.to_dict(),
            "keywords": list(self.keywords),
            "created_at": self.created_at.isoformat(),
        }

    def __repr__(self):
        return f"<AnalysisResult {self.id} - {self.label} ({self.confidence:.1f}%)>"


def analyze(
    content: str,
    title: Optional[str] = "",
    noise: Optional[NoiseSource] = None
) -> AnalysisResult:
    """
    Classify an article as authentic or fabricated.

    Args:
        content (str): Article body, must contain non-whitespace text
        title (str): Optional article title
        noise (NoiseSource): Perturbation source for the label and confidence,
            defaults to uniform random noise

    Returns:
        AnalysisResult: Label, confidence, features and keywords

    Raises:
        InvalidInputError: If content is not text or is empty after trimming
    """
    if not isinstance(content, str) or not content.strip():
        raise InvalidInputError("Article content must be non-empty text")

    if title is None:
        title = ""
    if not isinstance(title, str):
        raise InvalidInputError("Article title must be text")

    result_id = uuid4().hex
    created_at = datetime.now(pytz.UTC)

    features = extract_features(content, title)
    label = classify(features, noise)
    confidence = estimate_confidence(features, label, noise)
    keywords = tuple(extract_keywords(content, KEYWORD_LIMIT))

    result = AnalysisResult(
        id=result_id,
        content=content,
        title=title,
        label=label,
        confidence=confidence,
        features=features,
        keywords=keywords,
        created_at=created_at,
    )
    logger.debug(f"Analysis complete: {result!r}")
    return result
