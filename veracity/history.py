#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: history.py
# Project: veracity
# Description: Bounded newest-first log of analysis results
# Created: 2026-10-19 11:38:57
# Modified: 2026-10-19 14:20:43

import threading
from collections import deque
from typing import Iterator, List, Optional

from veracity.analyzer import AnalysisResult

DEFAULT_HISTORY_LIMIT = 10


class AnalysisHistory:
    """
    Keeps the most recent analysis results, newest first.

    Older results fall off once the limit is reached. Safe to share between
    threads.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be at least 1, got {limit}")
        self.limit = limit
        self._results = deque(maxlen=limit)
        self._lock = threading.Lock()

    def add(self, result: AnalysisResult) -> AnalysisResult:
        with self._lock:
            self._results.appendleft(result)
        return result

    def results(self) -> List[AnalysisResult]:
        with self._lock:
            return list(self._results)

    def latest(self) -> Optional[AnalysisResult]:
        with self._lock:
            return self._results[0] if self._results else None

    def clear(self):
        with self._lock:
            self._results.clear()

    def __iter__(self) -> Iterator[AnalysisResult]:
        return iter(self.results())

    def __len__(self):
        with self._lock:
            return len(self._results)
