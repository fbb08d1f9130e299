"""Unit tests for DictionaryRegistry, entity options and keyword extraction."""

from pathlib import Path

import pytest

from sieve.contexts.extraction.entities import ENTITY_DICTIONARIES, TECHNOLOGIES
from sieve.contexts.extraction.entity_registry import (
    DictionaryRegistry,
    build_entity_options,
    extract_keywords,
    load_dictionary_file,
    validate_dictionary,
)
from sieve.contexts.extraction.exceptions import DictionaryConfigError

TECHNOLOGY_YAML = """\
languages:
  - Java
  - Kotlin
messaging:
  - Kafka
"""


@pytest.fixture
def dictionaries_path(tmp_path):
    """Directory with a technology override file."""
    (tmp_path / "technology.yaml").write_text(TECHNOLOGY_YAML, encoding="utf-8")
    return tmp_path


@pytest.mark.unit
def test_registry_init(dictionaries_path):
    """Test DictionaryRegistry initialization."""
    registry = DictionaryRegistry(dictionaries_path)
    assert registry.dictionaries_path == dictionaries_path
    assert registry._cache == {}


@pytest.mark.unit
def test_get_dictionary(dictionaries_path):
    """Test loading an override file."""
    registry = DictionaryRegistry(dictionaries_path)
    dictionary = registry.get_dictionary("technology")

    assert dictionary == {"languages": ("Java", "Kotlin"), "messaging": ("Kafka",)}


@pytest.mark.unit
def test_dictionary_caching(dictionaries_path):
    """Test that dictionaries are cached after first load."""
    registry = DictionaryRegistry(dictionaries_path)

    first = registry.get_dictionary("technology")
    assert registry.is_cached("technology")

    second = registry.get_dictionary("technology")
    assert first is second


@pytest.mark.unit
def test_clear_cache(dictionaries_path):
    """Test cache clearing."""
    registry = DictionaryRegistry(dictionaries_path)

    registry.get_dictionary("technology")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert not registry.is_cached("technology")


@pytest.mark.unit
def test_get_dictionary_not_found(dictionaries_path):
    """Test error handling for a missing override file."""
    registry = DictionaryRegistry(dictionaries_path)

    with pytest.raises(FileNotFoundError):
        registry.get_dictionary("skill")


@pytest.mark.unit
def test_get_dictionary_path(dictionaries_path):
    """Test getting an override file path."""
    path = DictionaryRegistry(dictionaries_path).get_dictionary_path("skill")

    assert isinstance(path, Path)
    assert path.name == "skill.yaml"


@pytest.mark.unit
def test_resolve_dictionary_falls_back(dictionaries_path):
    """Test entity types without an override use the built-in tables."""
    registry = DictionaryRegistry(dictionaries_path)

    assert registry.resolve_dictionary("technology")["messaging"] == ("Kafka",)
    assert registry.resolve_dictionary("domain") is ENTITY_DICTIONARIES["domain"]


@pytest.mark.unit
def test_malformed_file(tmp_path):
    """Test a non-mapping root is rejected with the file path attached."""
    config_path = tmp_path / "technology.yaml"
    config_path.write_text("- Java\n- Kotlin\n", encoding="utf-8")

    with pytest.raises(DictionaryConfigError) as exc_info:
        load_dictionary_file(config_path)

    assert exc_info.value.config_path == config_path


@pytest.mark.unit
def test_validate_dictionary_rejects_non_list_category():
    """Test a category holding a plain string is rejected."""
    with pytest.raises(DictionaryConfigError) as exc_info:
        validate_dictionary({"languages": "Java"})

    assert exc_info.value.category == "languages"


@pytest.mark.unit
def test_validate_dictionary_rejects_non_string_term():
    """Test non-string terms are rejected."""
    with pytest.raises(DictionaryConfigError):
        validate_dictionary({"languages": ["Java", 3]})


@pytest.mark.unit
def test_validate_dictionary_drops_blank_terms():
    """Test blank terms are dropped and others stripped."""
    assert validate_dictionary({"languages": [" Java ", "  "]}) == {"languages": ("Java",)}


class TestEntityOptions:
    """Tests for build_entity_options()."""

    @pytest.mark.unit
    def test_canonical_names_fold(self):
        """Test aliases collapse into one canonical option."""
        options = build_entity_options({"finance": ("Banking", "Банк", "Банкинг")})

        assert [option.name for option in options] == ["Banking"]
        assert {"banking", "банк", "банкинг"} <= set(options[0].synonyms)

    @pytest.mark.unit
    def test_cyrillic_inflections(self):
        """Test Cyrillic keywords get simple case endings."""
        options = build_entity_options({"finance": ("Финтех",)})

        assert options[0].name == "Fintech"
        assert {"финтеха", "финтехе", "финтеовский"} <= set(options[0].synonyms)

    @pytest.mark.unit
    def test_extra_synonyms(self):
        """Test special inflections for Microservices."""
        options = build_entity_options({"architecture": ("Microservices",)})
        assert "микросервисной" in options[0].synonyms

    @pytest.mark.unit
    def test_synonyms_unique(self):
        """Test synonyms are deduplicated."""
        for option in build_entity_options(TECHNOLOGIES):
            assert len(option.synonyms) == len(set(option.synonyms))

    @pytest.mark.unit
    def test_category_of_first_keyword(self):
        """Test options keep the category they first appeared in."""
        options = build_entity_options({"a": ("Banking",), "b": ("Банк",)})

        assert len(options) == 1
        assert options[0].category == "a"


class TestExtractKeywords:
    """Tests for extract_keywords()."""

    @pytest.mark.unit
    def test_domain_inflections(self):
        """Test inflected Russian domain names are recognized."""
        assert extract_keywords("Опыт в банке и финтехе", "domain") == ["Fintech", "Banking"]

    @pytest.mark.unit
    def test_whole_words(self):
        """Test synonyms only match as whole words."""
        assert "Go" not in extract_keywords("Google Cloud", "technology")
        assert "Go" in extract_keywords("Go, Kotlin", "technology")

    @pytest.mark.unit
    def test_custom_dictionary(self):
        """Test a caller-supplied dictionary replaces the built-in table."""
        assert extract_keywords("Kafka and Java", "technology", {"messaging": ("Kafka",)}) == [
            "Kafka"
        ]

    @pytest.mark.unit
    def test_empty_text(self):
        """Test empty text yields no keywords."""
        assert extract_keywords("", "skill") == []

    @pytest.mark.unit
    def test_unknown_entity_type(self):
        """Test an unknown entity type without a dictionary raises KeyError."""
        with pytest.raises(KeyError):
            extract_keywords("text", "vehicle")
