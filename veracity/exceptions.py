#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: exceptions.py
# Project: veracity
# Description: Exception types raised by the analysis engine
# Created: 2026-10-19 10:51:44
# Modified: 2026-10-19 10:51:44


class VeracityError(Exception):
    """Base class for veracity errors."""


class InvalidInputError(VeracityError, ValueError):
    """Article content is missing, not text, or only whitespace."""
