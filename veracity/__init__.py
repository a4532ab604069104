#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: __init__.py
# Project: veracity
# Description: 
# Created: 2026-10-19 09:05:48
# Modified: 2026-10-19 15:58:21

from .__version__ import __version__
from .analyzer import (
    AnalysisResult,
    analyze,
)
from .features import (
    FeatureSet,
    extract_features,
    calculate_sentiment,
    calculate_complexity,
    calculate_credibility,
    calculate_bias,
)
from .classifier import (
    AUTHENTIC,
    FABRICATED,
    classify,
    estimate_confidence,
    confidence_level,
    uniform_noise,
    zero_noise,
)
from .keywords import extract_keywords
from .exceptions import (
    VeracityError,
    InvalidInputError,
)
from .history import AnalysisHistory
from .samples import (
    SAMPLE_ARTICLES,
    SampleArticle,
    get_sample,
)

__all__ = [
    "__version__",
    "AnalysisResult",
    "analyze",
    "FeatureSet",
    "extract_features",
    "calculate_sentiment",
    "calculate_complexity",
    "calculate_credibility",
    "calculate_bias",
    "AUTHENTIC",
    "FABRICATED",
    "classify",
    "estimate_confidence",
    "confidence_level",
    "uniform_noise",
    "zero_noise",
    "extract_keywords",
    "VeracityError",
    "InvalidInputError",
    "AnalysisHistory",
    "SAMPLE_ARTICLES",
    "SampleArticle",
    "get_sample",
]
