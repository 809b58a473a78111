"""
Tests for scoring a recolored outline.
"""

import pytest

from mandalas import GenerationParams, InvalidArgument, ScoreReport, compose, score_recoloring


@pytest.fixture
def result(beginner_params):
    return compose(beginner_params)


class TestScoreRecoloring:
    """Comparing answers with the original colors."""

    def test_perfect_recoloring(self, result):
        answers = {r.id: r.color for r in result.regions}
        report = score_recoloring(result.regions, answers)
        assert report == ScoreReport(correct=4, total=4)
        assert report.accuracy == 1.0

    def test_colors_compared_case_insensitively(self, result):
        answers = {r.id: f" {r.color.lower()} " for r in result.regions}
        assert score_recoloring(result.regions, answers).correct == 4

    def test_mistakes_in_draw_order(self, result):
        answers = {r.id: r.color for r in result.regions}
        answers["region-2"] = "#00FF00"
        del answers["region-0"]
        report = score_recoloring(result.regions, answers)
        assert report.mistakes == ("region-0", "region-2")
        assert report.correct == 2
        assert report.accuracy == 0.5

    def test_unknown_region_id(self, result):
        with pytest.raises(InvalidArgument):
            score_recoloring(result.regions, {"region-99": "#FF0000"})

    def test_empty_mandala(self):
        report = score_recoloring([], {})
        assert report.total == 0
        assert report.accuracy == 1.0

    def test_shuffled_palette_scores_against_region_colors(self, five_colors):
        shuffled = compose(GenerationParams("mix", 400, "advanced", five_colors, shuffle_palette=True))
        answers = {r.id: r.color for r in shuffled.regions}
        assert score_recoloring(shuffled.regions, answers).accuracy == 1.0
