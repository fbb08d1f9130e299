"""
Entity dictionary registry and keyword extraction.

Dictionary overrides live in YAML files, one per entity type:

    $SIEVE_DICTIONARY_PATH/technology.yaml
    $SIEVE_DICTIONARY_PATH/skill.yaml
    ...

Each file maps a category name to a list of terms:

    languages:
      - Java
      - Kotlin
    databases:
      - PostgreSQL

The registry only loads and validates these files. The loaded mapping is
handed to EntityClassifier / extract_keywords as plain data.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from sieve.contexts.extraction.entities import ENTITY_DICTIONARIES
from sieve.contexts.extraction.exceptions import DictionaryConfigError
from sieve.contexts.extraction.logger import log_dictionary_loaded

load_dotenv()
_dictionary_path = os.getenv("SIEVE_DICTIONARY_PATH")
DICTIONARY_PATH = Path(_dictionary_path) if _dictionary_path else None

# Lowercase keyword -> canonical option name
CANONICAL_NAMES = {
    "банк": "Banking",
    "банкинг": "Banking",
    "финтех": "Fintech",
    "ооп": "OOP",
    "rest": "REST API",
    "mq": "Message Queues",
    "микросервисы": "Microservices",
}

# Extra inflected forms for specific canonical names
EXTRA_SYNONYMS = {
    "Microservices": ("микросервисной",),
    "REST API": ("rest",),
}

CYRILLIC_ENDING = re.compile(r"[а-я]$")


# =============================================================================
# DICTIONARY LOADING
# =============================================================================


def load_dictionary_file(config_path: Path) -> dict[str, tuple[str, ...]]:
    """
    Load and validate one dictionary YAML file.

    Args:
        config_path: Path to a YAML file of category -> list of terms

    Returns:
        Dict of category name to tuple of terms

    Raises:
        FileNotFoundError: If config_path doesn't exist
        DictionaryConfigError: If the file isn't a mapping of lists of strings
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Dictionary file not found at {config_path}")

    config = OmegaConf.load(config_path)
    data = OmegaConf.to_container(config, resolve=True)

    dictionary = validate_dictionary(data, config_path=config_path)
    log_dictionary_loaded(
        config_path,
        categories=len(dictionary),
        terms=sum(len(terms) for terms in dictionary.values()),
    )
    return dictionary


def validate_dictionary(
    data: Any, config_path: Optional[Path] = None
) -> dict[str, tuple[str, ...]]:
    """
    Check that data is a category -> list-of-strings mapping.

    Args:
        data: Parsed YAML content (or any caller-supplied mapping)
        config_path: Source file, used in error messages

    Returns:
        Dict of category name to tuple of stripped, non-empty terms

    Raises:
        DictionaryConfigError: On a non-mapping root, a non-list category or a non-string term
    """
    if not isinstance(data, Mapping):
        raise DictionaryConfigError(
            f"Dictionary root must be a mapping, got {type(data).__name__}",
            config_path=config_path,
        )

    dictionary = {}
    for category, terms in data.items():
        if isinstance(terms, (str, bytes)) or not isinstance(terms, (list, tuple)):
            raise DictionaryConfigError(
                f"Category must hold a list of terms, got {type(terms).__name__}",
                config_path=config_path,
                category=str(category),
            )
        for term in terms:
            if not isinstance(term, str):
                raise DictionaryConfigError(
                    f"Terms must be strings, got {term!r}",
                    config_path=config_path,
                    category=str(category),
                )
        dictionary[str(category)] = tuple(term.strip() for term in terms if term.strip())

    return dictionary


class DictionaryRegistry:
    """
    Registry for loading and caching entity dictionary overrides.

    Override files are stored as {dictionaries_path}/{entity_type}.yaml.
    Entity types without an override file fall back to the built-in tables
    through resolve_dictionary().
    """

    def __init__(self, dictionaries_path: Optional[Path] = None):
        """
        Initialize the dictionary registry.

        Args:
            dictionaries_path: Directory of override files. Defaults to
                               SIEVE_DICTIONARY_PATH from environment
        """
        if dictionaries_path is None:
            dictionaries_path = DICTIONARY_PATH

        self.dictionaries_path = Path(dictionaries_path) if dictionaries_path else None
        self._cache: dict[str, dict[str, tuple[str, ...]]] = {}

    def get_dictionary(self, entity_type: str) -> dict[str, tuple[str, ...]]:
        """
        Get an override dictionary by entity type, loading and caching it if necessary.

        Args:
            entity_type: Entity type name (e.g., 'technology')

        Returns:
            Dict of category name to tuple of terms

        Raises:
            FileNotFoundError: If no override file exists for entity_type
            DictionaryConfigError: If the override file is malformed
        """
        if entity_type in self._cache:
            return self._cache[entity_type]

        config_path = self.get_dictionary_path(entity_type)
        if config_path is None:
            raise FileNotFoundError(
                f"No dictionary directory configured for '{entity_type}' "
                "(set SIEVE_DICTIONARY_PATH)"
            )

        dictionary = load_dictionary_file(config_path)
        self._cache[entity_type] = dictionary
        return dictionary

    def get_dictionary_path(self, entity_type: str) -> Optional[Path]:
        """
        Get the file path for an entity type's override file.

        Args:
            entity_type: Entity type name

        Returns:
            Path to {entity_type}.yaml, or None when no directory is configured
        """
        if self.dictionaries_path is None:
            return None
        return self.dictionaries_path / f"{entity_type}.yaml"

    def resolve_dictionary(self, entity_type: str) -> Mapping[str, tuple[str, ...]]:
        """
        Get the override dictionary if one exists, else the built-in table.

        Raises:
            KeyError: If entity_type has neither an override nor a built-in table
        """
        config_path = self.get_dictionary_path(entity_type)
        if entity_type in self._cache or (config_path is not None and config_path.exists()):
            return self.get_dictionary(entity_type)
        return ENTITY_DICTIONARIES[entity_type]

    def clear_cache(self):
        """Clear the dictionary cache."""
        self._cache.clear()

    def is_cached(self, entity_type: str) -> bool:
        """
        Check if a dictionary is in the cache.

        Args:
            entity_type: Entity type name

        Returns:
            True if cached, False otherwise
        """
        return entity_type in self._cache


# =============================================================================
# ENTITY OPTIONS AND KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class EntityOption:
    """
    One canonical entity with the spellings that refer to it.

    Attributes:
        name: Canonical name (e.g., "Banking")
        category: Category of the first keyword that produced it
        synonyms: Lowercase and original spellings, deduplicated, in insertion order
    """

    name: str
    category: str
    synonyms: tuple[str, ...]


def build_entity_options(categories: Mapping[str, tuple[str, ...]]) -> list[EntityOption]:
    """
    Fold a category dictionary into canonical entity options.

    Aliases listed in CANONICAL_NAMES collapse into one option ("Банк" and
    "Banking" both become Banking). Keywords ending in a Cyrillic letter get
    simple inflected forms (+а, +е and stem+овский).

    Args:
        categories: Category name -> terms

    Returns:
        Options in first-seen order
    """
    names = []
    option_categories = {}
    synonyms: dict[str, list[str]] = {}

    for category, keywords in categories.items():
        for keyword in keywords:
            lower_keyword = keyword.lower()
            name = CANONICAL_NAMES.get(lower_keyword, keyword)

            if name not in synonyms:
                names.append(name)
                option_categories[name] = category
                synonyms[name] = [name, name.lower()]

            forms = synonyms[name]
            forms.append(lower_keyword)
            forms.extend(EXTRA_SYNONYMS.get(name, ()))

            if CYRILLIC_ENDING.search(lower_keyword):
                forms.append(lower_keyword + "а")
                forms.append(lower_keyword + "е")
                forms.append(lower_keyword[:-1] + "овский")

    return [
        EntityOption(
            name=name,
            category=option_categories[name],
            synonyms=tuple(dict.fromkeys(synonyms[name])),
        )
        for name in names
    ]


def _whole_word(term: str) -> re.Pattern:
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def extract_keywords(
    text: str,
    entity_type: str,
    dictionary: Optional[Mapping[str, tuple[str, ...]]] = None,
) -> list[str]:
    """
    Find canonical entity names mentioned in text.

    Args:
        text: Text to search
        entity_type: One of technology, platform, skill, domain, role
        dictionary: Category dictionary to use instead of the built-in table

    Returns:
        Canonical names whose synonyms occur as whole words, in option order

    Raises:
        KeyError: If entity_type is unknown and no dictionary is given

    Example:
        >>> extract_keywords("Опыт в банке и финтехе", "domain")
        ['Fintech', 'Banking']
    """
    if not text:
        return []

    categories = dictionary if dictionary is not None else ENTITY_DICTIONARIES[entity_type]

    found = []
    for option in build_entity_options(categories):
        if any(_whole_word(synonym).search(text) for synonym in option.synonyms):
            found.append(option.name)
    return found
