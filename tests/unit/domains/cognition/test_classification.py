"""Tests for SCI and readiness tier classification."""

from __future__ import annotations

import pytest

from neuroloop.domains.cognition.domain_logic.classification import (
    classify_readiness,
    get_sci_level,
    get_sci_status_text,
)
from neuroloop.domains.cognition.domain_logic.readiness_models import ReadinessClassification
from neuroloop.domains.cognition.domain_logic.score_models import SCILevel


class TestSCILevel:
    @pytest.mark.parametrize(
        "total,expected",
        [
            (80, "elite"),
            (79, "high"),
            (65, "high"),
            (64, "moderate"),
            (50, "moderate"),
            (49, "developing"),
            (35, "developing"),
            (34, "early"),
        ],
    )
    def test_boundaries(self, total, expected):
        assert get_sci_level(total).value == expected

    def test_extremes(self):
        assert get_sci_level(100) is SCILevel.ELITE
        assert get_sci_level(0) is SCILevel.EARLY
        assert get_sci_level(-20) is SCILevel.EARLY

    def test_fractional_totals(self):
        assert get_sci_level(79.9) is SCILevel.HIGH
        assert get_sci_level(34.99) is SCILevel.EARLY

    def test_level_is_string_enum(self):
        assert get_sci_level(90) == "elite"


class TestSCIStatusText:
    @pytest.mark.parametrize(
        "total,expected",
        [
            (80, "Elite cognitive integration"),
            (65, "High strategic clarity"),
            (50, "Developing strategic capacity"),
            (35, "Building cognitive foundation"),
            (34, "Early activation phase"),
            (-1, "Early activation phase"),
        ],
    )
    def test_status_text(self, total, expected):
        assert get_sci_status_text(total) == expected

    def test_status_and_level_agree(self):
        texts = {get_sci_status_text(t) for t in range(65, 80)}
        levels = {get_sci_level(t) for t in range(65, 80)}
        assert texts == {"High strategic clarity"}
        assert levels == {SCILevel.HIGH}


class TestReadinessClassification:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, ReadinessClassification.HIGH),
            (70, ReadinessClassification.HIGH),
            (69, ReadinessClassification.MEDIUM),
            (40, ReadinessClassification.MEDIUM),
            (39, ReadinessClassification.LOW),
            (0, ReadinessClassification.LOW),
            (-10, ReadinessClassification.LOW),
        ],
    )
    def test_boundaries(self, score, expected):
        assert classify_readiness(score) is expected
