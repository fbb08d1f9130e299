"""
Unit tests for pattern matching.

Tests sieve.contexts.extraction.pattern_matcher and the pattern registry.
"""

import pytest

from sieve.contexts.extraction.exceptions import UnknownPatternError
from sieve.contexts.extraction.extraction_patterns import (
    DEFAULT_CONFIDENCE,
    PATTERN_REGISTRY,
    PATTERN_RULES,
    PatternName,
)
from sieve.contexts.extraction.pattern_matcher import (
    PatternStats,
    extract_dates,
    extract_meta_info,
    find,
    find_all,
    get_pattern_stats,
    pattern_confidence,
)


class TestFind:
    """Tests for find()."""

    @pytest.mark.unit
    def test_dates_in_order(self):
        """Test ISO dates are found left to right with positions."""
        text = "Deadline: 2025-08-14, start 2025-09-01"
        matches = find(text, "date")

        assert [match.value for match in matches] == ["2025-08-14", "2025-09-01"]
        assert matches[0].position < matches[1].position
        assert text[matches[0].position :].startswith("2025-08-14")
        assert all(match.confidence == 0.95 for match in matches)

    @pytest.mark.unit
    def test_accepts_enum_name(self):
        """Test PatternName members work like their string values."""
        assert find("R-12793", PatternName.REQUEST_ID)[0].value == "R-12793"

    @pytest.mark.unit
    def test_unknown_pattern(self):
        """Test an unknown pattern name yields no matches."""
        assert find("2025-08-14", "nonexistent") == []

    @pytest.mark.unit
    def test_empty_text(self):
        """Test empty text yields no matches."""
        assert find("", "date") == []

    @pytest.mark.unit
    def test_english_level(self):
        """Test English levels after Russian and English language names."""
        text = "английский B2 минимальный уровень, также английского C1"
        assert [match.value for match in find(text, "english_level")] == ["B2", "C1"]
        assert find("English: Advanced", "english_level")[0].value == "Advanced"

    @pytest.mark.unit
    def test_team_size(self):
        """Test headcount phrases in Russian."""
        text = "5 сотрудников требуется, команда 3 человека"
        assert [match.value for match in find(text, "team_size")] == ["5", "3"]

    @pytest.mark.unit
    def test_years_experience(self):
        """Test experience in years."""
        assert find("3+ years of Java", "years_experience")[0].value == "3"
        assert find("опыт от 5 лет", "years_experience")[0].value == "5"

    @pytest.mark.unit
    def test_location_region_codes_case_sensitive(self):
        """Test region codes only match in upper case; work modes in any case."""
        assert [match.value for match in find("РФ, US, remote", "location")] == [
            "РФ",
            "US",
            "remote",
        ]
        assert find("focus on us", "location") == []

    @pytest.mark.unit
    def test_salesforce_url(self):
        """Test the link stops at whitespace."""
        text = "see https://acme.my.salesforce.com/lightning/r/Opportunity/view here"
        assert find(text, "salesforce_url")[0].value == (
            "https://acme.my.salesforce.com/lightning/r/Opportunity/view"
        )

    @pytest.mark.unit
    def test_email(self):
        """Test email addresses."""
        assert find("Contact: j.doe@acme.com.", "email")[0].value == "j.doe@acme.com"

    @pytest.mark.unit
    def test_level(self):
        """Test seniority names."""
        assert [match.value for match in find("Senior or lead", "level")] == ["Senior", "lead"]


class TestFindAll:
    """Tests for find_all()."""

    @pytest.mark.unit
    def test_only_matching_patterns(self):
        """Test patterns without matches are omitted."""
        results = find_all("R-12793 from 2025-08-14")

        assert set(results) == {"date", "request_id"}
        assert results["request_id"][0].value == "R-12793"

    @pytest.mark.unit
    def test_registry_order(self):
        """Test results follow registry order."""
        results = find_all("Senior, R-12793, 2025-08-14, Remote")
        registry_order = [rule.name.value for rule in PATTERN_RULES]

        assert list(results) == [name for name in registry_order if name in results]

    @pytest.mark.unit
    def test_overlaps_kept(self):
        """Test overlapping matches from different patterns are all kept."""
        results = find_all("английский B2")

        assert results["english_level"][0].value == "B2"
        assert results["language_level"][0].value == "B2"

    @pytest.mark.unit
    def test_empty_text(self):
        """Test empty text yields an empty mapping."""
        assert find_all("") == {}


class TestPatternStats:
    """Tests for get_pattern_stats() and pattern_confidence()."""

    @pytest.mark.unit
    def test_stats(self):
        """Test counts and first position."""
        stats = get_pattern_stats("a 2025-08-14 b 2025-09-01", "date")
        assert stats == PatternStats(pattern="date", count=2, confidence=0.95, first_position=2)

    @pytest.mark.unit
    def test_stats_no_matches(self):
        """Test stats for a known pattern without matches."""
        stats = get_pattern_stats("nothing here", "request_id")
        assert stats.count == 0
        assert stats.first_position is None

    @pytest.mark.unit
    def test_unknown_pattern_raises(self):
        """Test stats for an unknown name raise UnknownPatternError."""
        with pytest.raises(UnknownPatternError) as exc_info:
            get_pattern_stats("text", "nonexistent")

        assert exc_info.value.pattern_name == "nonexistent"
        assert "date" in exc_info.value.available
        assert isinstance(exc_info.value, KeyError)

    @pytest.mark.unit
    def test_confidence_table(self):
        """Test fixed confidences and the default."""
        assert pattern_confidence("salesforce_url") == 0.99
        assert pattern_confidence(PatternName.CV_ID) == 0.80
        assert pattern_confidence("date_ru") == DEFAULT_CONFIDENCE

    @pytest.mark.unit
    def test_confidences_in_range(self):
        """Test every registered pattern has a confidence in (0, 1]."""
        for name in PATTERN_REGISTRY:
            assert 0 < pattern_confidence(name) <= 1


class TestExtractMetaInfo:
    """Tests for extract_meta_info()."""

    @pytest.mark.unit
    def test_role_first(self):
        """Test the role-first tracking line."""
        line = "CV - QA Engineer - Playwright - Company - manager - R-12793"
        assert extract_meta_info(line) == {
            "role": "QA Engineer",
            "technology": "Playwright",
            "company": "Company",
            "manager": "manager",
            "request_id": "R-12793",
        }

    @pytest.mark.unit
    def test_company_first(self):
        """Test a country in the third segment selects the company-first grammar."""
        line = "CV - Insider - tmura - РФ - Java - R-12793"
        assert extract_meta_info(line) == {
            "company": "Insider",
            "manager": "tmura",
            "country": "РФ",
            "technology": "Java",
            "request_id": "R-12793",
        }

    @pytest.mark.unit
    def test_extra_whitespace(self):
        """Test irregular spacing is tolerated."""
        line = "CV  -  QA   -  Java -  Acme - jdoe -   R-12345"
        assert extract_meta_info(line)["request_id"] == "R-12345"

    @pytest.mark.unit
    def test_invalid_line(self):
        """Test a non-matching line yields an empty mapping."""
        assert extract_meta_info("Invalid CV line format") == {}
        assert extract_meta_info("") == {}


@pytest.mark.unit
def test_extract_dates():
    """Test ISO dates come before localized dates."""
    text = "Start 14.08.2025, deadline 2025-09-01, review 1/10/25"
    assert extract_dates(text) == ["2025-09-01", "14.08.2025", "1/10/25"]
