#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: samples.py
# Project: veracity
# Description: Preset articles for trying out the analyzer
# Created: 2026-10-19 12:10:31
# Modified: 2026-10-19 12:44:02

from typing import NamedTuple

from veracity.classifier import AUTHENTIC, FABRICATED
from veracity.exceptions import InvalidInputError


class SampleArticle(NamedTuple):
    title: str
    content: str
    expected: str


SAMPLE_ARTICLES = (
    SampleArticle(
        title="Local Mayor Announces New Infrastructure Plan",
        content=(
            "Mayor Johnson announced today a comprehensive $50 million infrastructure "
            "improvement plan that will focus on road repairs, bridge maintenance, and "
            "expanded public transportation options. The plan, developed over six months "
            "with input from city engineers and community leaders, aims to address the "
            "most pressing infrastructure needs identified in last year's comprehensive "
            "assessment. Construction is expected to begin in early spring and create "
            "approximately 200 local jobs. The mayor emphasized that the project will be "
            "funded through a combination of federal grants, state funding, and municipal "
            "bonds, ensuring no immediate tax increases for residents."
        ),
        expected=AUTHENTIC,
    ),
    SampleArticle(
        title="Scientists Discover Cure for All Diseases Using Simple Kitchen Ingredient",
        content=(
            "Breaking news that will shock the medical establishment: researchers at an "
            "undisclosed location have discovered that a common kitchen ingredient can "
            "cure every known disease. This miraculous substance, which cannot be named "
            "due to pharmaceutical industry pressure, has shown 100% success rates in "
            "secret trials. Government officials are allegedly trying to suppress this "
            "information to protect big pharma profits. The anonymous lead researcher "
            "claims that major medical journals refuse to publish the groundbreaking "
            "findings. Health experts you've never heard of confirm this revolutionary "
            "discovery will change everything, but mainstream media won't report it."
        ),
        expected=FABRICATED,
    ),
    SampleArticle(
        title="University Research Shows Promise in Renewable Energy Storage",
        content=(
            "Researchers at the State University's Engineering Department have published "
            "findings in the Journal of Energy Storage showing significant improvements "
            "in battery technology for renewable energy applications. The study, "
            "conducted over 18 months with funding from the Department of Energy, "
            "demonstrates a 35% increase in storage efficiency using a novel "
            "lithium-polymer configuration. Dr. Sarah Chen, the lead researcher, notes "
            "that while promising, the technology requires further testing and "
            "development before commercial viability. The research team plans to "
            "continue trials and expects to publish additional findings next year. "
            "Industry experts suggest this could contribute to more reliable renewable "
            "energy systems."
        ),
        expected=AUTHENTIC,
    ),
)


def get_sample(index: int) -> SampleArticle:
    """
    Look up a preset by its 1-based position.

    Raises:
        InvalidInputError: If no sample exists at index
    """
    if not 1 <= index <= len(SAMPLE_ARTICLES):
        raise InvalidInputError(
            f"No sample article {index}, choose 1-{len(SAMPLE_ARTICLES)}"
        )
    return SAMPLE_ARTICLES[index - 1]
