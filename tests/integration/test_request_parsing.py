"""
Integration test for end-to-end request parsing.
Tests: raw request -> normalize -> split -> patterns -> entities -> fields.
"""

import pytest

from sieve.contexts.extraction.field_extractors import LanguageRequirement
from sieve.contexts.extraction.request_parser import ParsedRequest, parse_request_text

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

FULL_REQUEST = """\
CV - Automation QA - Java; Selenium - Acme Bank - jdoe - R-20451\r
https://acme.my.salesforce.com/lightning/r/Opportunity/view\r
\r
Описание\r
Нужен автотестировщик в банк.  Старт 2025-09-01.\r
\r
\r
1) Банкинг\r
2) Онлайн-платежи\r
3) Web\r
4) 1\r
6) Middle+, Senior\r
8) B2\r
10) Немецкий\r
11) A2\r
12) 2 специалиста\r
14) Требования: Java, Selenium, PostgreSQL\r
    Желательно: Docker\r
24) РФ, удаленно\r
"""


@pytest.mark.integration
def test_sample_request_sections():
    """Test the sample request splits into items 1, 2, 4 with item 3 missing."""
    parsed = parse_request_text(SAMPLE_REQUEST)

    assert isinstance(parsed, ParsedRequest)
    assert parsed.sections.numbered_list == {
        1: "Индустрия проекта FinTech",
        2: "Домен Testing",
        4: "Ожидаемая загрузка 1",
    }
    assert parsed.missing_items == [3]
    assert "Missing item numbers: [3]" in parsed.warnings


@pytest.mark.integration
def test_sample_request_meta():
    """Test tracking line and identifiers of the sample request."""
    parsed = parse_request_text(SAMPLE_REQUEST)

    assert parsed.request_id == "R-12793"
    assert parsed.meta_info["role"] == "QA"
    assert parsed.meta_info["manager"] == "tmura"
    assert "salesforce_url" in parsed.patterns
    assert parsed.fields["industry"].value == "Индустрия проекта FinTech"


@pytest.mark.integration
def test_full_request():
    """Test every stage on a request with CRLF line endings and "n)" numbering."""
    parsed = parse_request_text(FULL_REQUEST)

    assert "\r" not in parsed.normalized_text
    assert parsed.sections.meta_info.startswith("CV - Automation QA")
    assert parsed.sections.description.startswith("Описание Нужен автотестировщик")
    assert parsed.missing_items == [5, 7, 9, 13, 15, 16, 17, 18, 19, 20, 21, 22, 23]
    assert parsed.sections.numbered_list[14] == (
        "Требования: Java, Selenium, PostgreSQL Желательно: Docker"
    )

    # Fields
    assert parsed.fields["developer_grades"].value == ["Middle+", "Senior"]
    assert parsed.fields["requested_headcount"].value == 2
    assert parsed.fields["location"].value.regions == ("RU",)
    assert parsed.fields["location"].value.work_type == "Remote"
    assert parsed.fields["language_requirements"].value == [
        LanguageRequirement("English", "B2", "required"),
        LanguageRequirement("German", "A2", "preferred"),
    ]
    assert parsed.meta_info["technology"] == "Java; Selenium"
    assert parsed.meta_info["dates"] == ["2025-09-01"]

    # Entities
    assert {"Java", "Selenium", "PostgreSQL"} <= parsed.technologies.found
    assert "Web" in parsed.technologies.found
    assert "Banking" in parsed.keywords["domain"]

    assert 0 < parsed.confidence <= 1


@pytest.mark.integration
def test_dictionary_override():
    """Test a technology override replaces the classifier's default terms."""
    parsed = parse_request_text(
        FULL_REQUEST, dictionaries={"technology": {"testing": ["Selenium"]}}
    )

    assert parsed.technologies.found == frozenset({"Selenium"})
    assert parsed.keywords["technology"] == ["Selenium"]


@pytest.mark.integration
@pytest.mark.parametrize("text", [None, "", "   \n\n  "])
def test_empty_request(text):
    """Test empty input degrades to an empty result instead of raising."""
    parsed = parse_request_text(text)

    assert parsed.normalized_text == ""
    assert parsed.sections.numbered_list == {}
    assert parsed.missing_items == []
    assert parsed.patterns == {}
    assert parsed.request_id is None
    assert "No numbered list found" in parsed.warnings
    assert parsed.confidence == 0


@pytest.mark.integration
def test_unstructured_request():
    """Test free text without numbering still yields patterns and entities."""
    parsed = parse_request_text("Ищем Senior Java разработчика, старт 14.08.2025, R-55555")

    assert parsed.sections.numbered_list == {}
    assert parsed.fields["developer_grades"].value == ["Senior"]
    assert parsed.request_id == "R-55555"
    assert parsed.meta_info["dates"] == ["14.08.2025"]
    assert "Java" in parsed.technologies.required
