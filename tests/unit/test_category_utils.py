"""
Unit tests for keyword-weighted categorization.
"""

import pytest

from enrichment.category_utils import (
    CATEGORIES,
    CATEGORY_KEYWORDS,
    CATEGORY_NAMES,
    categorize_content,
    get_category_description,
    normalize_category,
    score_categories,
)


class TestCategorizeContent:
    """Tests for categorize_content()"""

    def test_single_keyword(self):
        result = categorize_content("My new raspberry pi build")
        assert result['category'] == "RASPBERRY_PI"
        assert result['confidence'] == pytest.approx(1 / 3)

    def test_no_signal_defaults_to_other(self):
        assert categorize_content("The weather was lovely") == {'category': "OTHER", 'confidence': 0.5}

    def test_empty_and_none(self):
        assert categorize_content("") == {'category': "OTHER", 'confidence': 0.5}
        assert categorize_content(None) == {'category': "OTHER", 'confidence': 0.5}

    def test_confidence_saturates(self):
        result = categorize_content("An open source github repository with code for developers")
        assert result['category'] == "SOFTWARE"
        assert result['confidence'] == 1.0

    def test_many_hits_clamped(self):
        result = categorize_content("chatgpt and claude and gemini and copilot and openai")
        assert result['category'] == "AI_AGENTS"
        assert result['confidence'] == 1.0

    def test_repeated_keyword_counts_once(self):
        result = categorize_content("notion notion notion")
        assert result['category'] == "PRODUCTIVITY"
        assert result['confidence'] == pytest.approx(1 / 3)

    def test_case_insensitive(self):
        result = categorize_content("N8N Webhook")
        assert result['category'] == "AUTOMATION"
        assert result['confidence'] == pytest.approx(2 / 3)

    @pytest.mark.parametrize("text", ["gpio and seo", "seo and gpio"])
    def test_tie_goes_to_earlier_category(self, text):
        assert categorize_content(text)['category'] == "RASPBERRY_PI"

    def test_higher_score_wins(self):
        assert categorize_content("seo marketing growth and a sensor")['category'] == "MARKETING"

    @pytest.mark.parametrize("text", [
        "", "ai", "n8n zapier workflow automation webhook api", "3d printer filament prusa",
    ])
    def test_confidence_in_range(self, text):
        confidence = categorize_content(text)['confidence']
        assert 0 <= confidence <= 1


class TestScoreCategories:
    """Tests for score_categories()"""

    def test_keeps_table_order(self):
        assert list(score_categories("")) == [name for name, _ in CATEGORY_KEYWORDS]

    def test_counts(self):
        scores = score_categories("n8n webhook")
        assert scores['AUTOMATION'] == 2
        assert scores['MARKETING'] == 0


class TestTaxonomy:
    """Tests for the category taxonomy helpers."""

    def test_scored_categories_are_in_taxonomy(self):
        for name, _ in CATEGORY_KEYWORDS:
            assert name in CATEGORIES

    def test_other_is_last(self):
        assert CATEGORY_NAMES[-1] == "OTHER"
        assert len(CATEGORY_NAMES) == 10

    def test_description(self):
        assert get_category_description("PRINTER_3D") == "3D printing, models, and fabrication"
        assert get_category_description("GARDENING") == "Category: GARDENING"

    @pytest.mark.parametrize("value,expected", [
        ("software", "SOFTWARE"),
        (" web tools ", "WEB_TOOLS"),
        ("AI_AGENTS", "AI_AGENTS"),
        ("GARDENING", None),
        (None, None),
        (42, None),
    ])
    def test_normalize_category(self, value, expected):
        assert normalize_category(value) == expected
