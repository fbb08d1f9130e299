"""
Unit tests for section splitting.

Tests sieve.contexts.intake.section_splitter.
"""

import pytest

from sieve.contexts.intake.normalizer import normalize
from sieve.contexts.intake.section_splitter import (
    SplitResult,
    fill_missing_items,
    get_missing_items,
    split,
)

SAMPLE_REQUEST = (
    "CV - QA - Automation QA - Insider - tmura - R-12793\n"
    "https://acme.my.salesforce.com/lightning/r/Opportunity/view\n"
    "\n"
    "Описание\n"
    "\n"
    "1. Индустрия проекта FinTech\n"
    "2. Домен Testing\n"
    "4. Ожидаемая загрузка 1"
)


class TestSplit:
    """Tests for split()."""

    @pytest.mark.unit
    def test_sample_request(self):
        """Test meta block, description and numbered list of a typical request."""
        result = split(normalize(SAMPLE_REQUEST))

        assert result.meta_info == (
            "CV - QA - Automation QA - Insider - tmura - R-12793\n"
            "https://acme.my.salesforce.com/lightning/r/Opportunity/view"
        )
        assert result.description == "Описание"
        assert result.numbered_list == {
            1: "Индустрия проекта FinTech",
            2: "Домен Testing",
            4: "Ожидаемая загрузка 1",
        }
        assert get_missing_items(result.numbered_list) == [3]

    @pytest.mark.unit
    def test_empty_text(self):
        """Test empty input yields an empty result."""
        result = split("")
        assert result == SplitResult()

    @pytest.mark.unit
    def test_continuation_lines_folded(self):
        """Test soft-wrapped lines join the preceding item."""
        text = "1. Java\nSpring Boot\nKafka\n2. English B2"
        result = split(text)

        assert result.numbered_list == {1: "Java Spring Boot Kafka", 2: "English B2"}

    @pytest.mark.unit
    def test_description_without_meta(self):
        """Test text before the first item becomes the description."""
        text = "Описание\nНужен автотестировщик\n1. FinTech"
        result = split(text)

        assert result.meta_info == ""
        assert result.description == "Описание Нужен автотестировщик"
        assert result.numbered_list == {1: "FinTech"}

    @pytest.mark.unit
    def test_list_directly_after_meta(self):
        """Test a numbered line right after the meta block starts the list."""
        text = "CV - QA - Java - Acme - jdoe - R-12345\n1. Banking\n2. Testing"
        result = split(text)

        assert result.meta_info == "CV - QA - Java - Acme - jdoe - R-12345"
        assert result.description == ""
        assert result.numbered_list == {1: "Banking", 2: "Testing"}

    @pytest.mark.unit
    def test_repeated_item_number_appended(self):
        """Test a repeated item number keeps both texts."""
        result = split("1. Java\n1. Kotlin")
        assert result.numbered_list == {1: "Java Kotlin"}

    @pytest.mark.unit
    def test_zero_is_not_an_item(self):
        """Test "0." lines are continuation text, not items."""
        result = split("1. first\n0. not an item")
        assert result.numbered_list == {1: "first 0. not an item"}

    @pytest.mark.unit
    def test_every_line_lands_once(self):
        """Test each non-empty line ends up in exactly one section."""
        text = normalize(SAMPLE_REQUEST + "\nпродолжение\n5. Команда")
        result = split(text)

        lines = [line for line in text.split("\n") if line]
        assert result.raw_sections == lines

        pieces = result.meta_info.split("\n") + [result.description]
        pieces += [f"{number}. {content}" for number, content in result.numbered_list.items()]

        assert sorted(word for line in lines for word in line.split(" ")) == sorted(
            word for piece in pieces for word in piece.split(" ") if word
        )


class TestMissingItems:
    """Tests for get_missing_items() and fill_missing_items()."""

    @pytest.mark.unit
    def test_get_missing_items(self):
        """Test gaps between 1 and the highest item are reported."""
        assert get_missing_items({1: "a", 4: "b", 6: "c"}) == [2, 3, 5]

    @pytest.mark.unit
    def test_get_missing_items_empty(self):
        """Test an empty list has no gaps."""
        assert get_missing_items({}) == []

    @pytest.mark.unit
    def test_empty_text_is_not_missing(self):
        """Test items with empty text still count as present."""
        assert get_missing_items({1: "", 2: "b"}) == []

    @pytest.mark.unit
    def test_fill_missing_items(self):
        """Test gaps are filled with "N/A" in item order."""
        filled = fill_missing_items({3: "b", 1: "a"})

        assert filled == {1: "a", 2: "N/A", 3: "b"}
        assert list(filled) == [1, 2, 3]

    @pytest.mark.unit
    def test_fill_missing_items_does_not_mutate(self):
        """Test the input mapping is left unchanged."""
        numbered_list = {1: "a", 3: "b"}
        fill_missing_items(numbered_list)
        assert numbered_list == {1: "a", 3: "b"}
