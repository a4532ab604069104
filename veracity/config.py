#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: config.py
# Project: veracity
# Description: Settings read from the environment for the command line front end
# Created: 2026-10-19 12:52:16
# Modified: 2026-10-20 10:20:11

import os
import logging

from veracity.history import DEFAULT_HISTORY_LIMIT
from veracity.keywords import KEYWORD_LIMIT


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if number < 1:
        raise ValueError(f"{name} must be at least 1, got {number}")
    return number


def _env_log_level(name: str, default: str) -> int:
    value = os.environ.get(name, default).strip().upper()
    level = logging.getLevelName(value)
    if not isinstance(level, int):
        raise ValueError(f"{name} must be a logging level name, got {value!r}")
    return level


LOG_LEVEL = _env_log_level("VERACITY_LOG_LEVEL", "ERROR")
HISTORY_LIMIT = _env_int("VERACITY_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)
KEYWORD_DISPLAY_LIMIT = _env_int("VERACITY_KEYWORD_LIMIT", KEYWORD_LIMIT)
