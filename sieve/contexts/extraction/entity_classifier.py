"""
Dictionary term recognition and requirement classification.

Finds dictionary terms in request text and sorts each one into exactly one
bucket (required / preferred / leadership) from the phrase that precedes it
on the same line. The buckets partition the found terms.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from sieve.contexts.extraction.entities import CLASSIFIER_TECHNOLOGIES, ENTITY_DICTIONARIES
from sieve.contexts.extraction.entity_registry import validate_dictionary
from sieve.contexts.extraction.logger import log_classification

REQUIRED = "required"
PREFERRED = "preferred"
LEADERSHIP = "leadership"

DEFAULT_BUCKET = REQUIRED


@dataclass(frozen=True)
class ContextRule:
    """A bucket and the phrases that put a term into it."""

    bucket: str
    phrases: tuple[str, ...]


# Evaluated in order; the first rule with a phrase before the term wins
CONTEXT_RULES = (
    ContextRule(
        REQUIRED,
        (
            "требования",
            "требуется",
            "required",
            "requirements",
            "requirement",
            "must have",
            "must-have",
            "обязательно",
        ),
    ),
    ContextRule(PREFERRED, ("желательно", "preferred", "nice to have", "будет плюсом")),
    ContextRule(LEADERSHIP, ("lead", "лидер", "mentor", "наставник")),
)


@dataclass(frozen=True)
class ClassifiedEntities:
    """Found terms split into disjoint buckets."""

    required: frozenset[str] = frozenset()
    preferred: frozenset[str] = frozenset()
    leadership: frozenset[str] = frozenset()

    @property
    def found(self) -> frozenset[str]:
        """Every found term."""
        return self.required | self.preferred | self.leadership


def _word_pattern(word: str) -> str:
    # \b fails next to non-word characters ("C#", "C++"), so use lookarounds
    return rf"(?<!\w){re.escape(word)}(?!\w)"


class EntityClassifier:
    """
    Classifier over one category dictionary.

    Usage:
        classifier = EntityClassifier()
        entities = classifier.classify("Требования: Java, Spring. Желательно Kafka")
        entities.required   # frozenset({'Java', 'Spring'})
        entities.preferred  # frozenset()  (Kafka isn't in the default dictionary)
    """

    def __init__(
        self,
        dictionary: Optional[Mapping[str, tuple[str, ...]]] = None,
        entity_type: str = "technology",
        rules: tuple[ContextRule, ...] = CONTEXT_RULES,
    ):
        """
        Initialize the classifier.

        Args:
            dictionary: Category -> terms. Defaults to CLASSIFIER_TECHNOLOGIES
            entity_type: Label used in log messages
            rules: Ordered context rules

        Raises:
            DictionaryConfigError: If dictionary is not a category -> list-of-strings mapping
        """
        if dictionary is None:
            dictionary = CLASSIFIER_TECHNOLOGIES

        self.dictionary = validate_dictionary(dictionary)
        self.entity_type = entity_type
        self.rules = rules

        self.terms = tuple(
            dict.fromkeys(term for terms in self.dictionary.values() for term in terms)
        )
        self._term_regexes = {
            term: re.compile(_word_pattern(term), re.IGNORECASE) for term in self.terms
        }

    def find_terms(self, text: str) -> list[str]:
        """
        Find dictionary terms that occur as whole words in text.

        Args:
            text: Text to search

        Returns:
            Found terms in dictionary order
        """
        if not text:
            return []
        return [term for term in self.terms if self._term_regexes[term].search(text)]

    def classify_term(self, text: str, term: str) -> str:
        """
        Pick the bucket for one found term.

        A rule applies when one of its phrases appears as a whole word earlier
        on the same line as the term ("Leading" is not "lead"). Rules are tried
        in order; no match means required.

        Args:
            text: Text the term was found in
            term: The term

        Returns:
            Bucket name
        """
        term_pattern = _word_pattern(term)
        for rule in self.rules:
            for phrase in rule.phrases:
                context = re.compile(rf"{_word_pattern(phrase)}[^\n]*{term_pattern}", re.IGNORECASE)
                if context.search(text):
                    return rule.bucket
        return DEFAULT_BUCKET

    def classify(self, text: str) -> ClassifiedEntities:
        """
        Find and classify every dictionary term in text.

        Args:
            text: Request text

        Returns:
            ClassifiedEntities; each found term is in exactly one bucket
        """
        buckets = {REQUIRED: set(), PREFERRED: set(), LEADERSHIP: set()}

        for term in self.find_terms(text):
            buckets[self.classify_term(text, term)].add(term)

        result = ClassifiedEntities(
            required=frozenset(buckets[REQUIRED]),
            preferred=frozenset(buckets[PREFERRED]),
            leadership=frozenset(buckets[LEADERSHIP]),
        )

        log_classification(
            self.entity_type,
            required=len(result.required),
            preferred=len(result.preferred),
            leadership=len(result.leadership),
        )

        return result


def extract_technologies(
    text: str, dictionary: Optional[Mapping[str, tuple[str, ...]]] = None
) -> ClassifiedEntities:
    """Classify technology terms in text (default dictionary unless one is given)."""
    return EntityClassifier(dictionary, entity_type="technology").classify(text)


def extract_entities(
    text: str,
    entity_type: str,
    dictionary: Optional[Mapping[str, tuple[str, ...]]] = None,
) -> ClassifiedEntities:
    """
    Classify terms of any entity type (technology, platform, skill, domain, role).

    Args:
        text: Request text
        entity_type: Entity type; selects the built-in dictionary when none is given
        dictionary: Category -> terms override

    Raises:
        KeyError: If entity_type is unknown and no dictionary is given
    """
    if dictionary is None:
        dictionary = ENTITY_DICTIONARIES[entity_type]
    return EntityClassifier(dictionary, entity_type=entity_type).classify(text)
