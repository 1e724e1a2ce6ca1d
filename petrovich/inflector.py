"""
Russian Personal Name Inflection Module

This module inflects Russian first names, last names and middle names (patronymics) into
the six grammatical cases, taking the grammatical gender of the person into account.

## Overview

The core functionality is provided by the `RuleEngine` class, a rule-matching engine over
an immutable corpus of suffix rules:

1. **Filtering**: Keep the rules for the requested name part and gender
2. **Exception Lookup**: Whole-name exceptions are tried first, in corpus order
3. **Suffix Lookup**: General rules compete by suffix length, longest suffix wins
4. **Application**: The winning rule's case ending replaces the tail of the name
5. **Fallback**: Names no rule recognises come back unchanged

## Architecture

- **PetrovichConfig**: Immutable configuration (corpus paths, compound separator)
- **RuleEngine**: Per-(part, gender) candidate index built once, pure lookups afterwards
- **GenderDetector**: Gender guess from any subset of last/first/middle name
- **petrovich_data**: YAML corpus loading, validation and immutable rule records

## Usage Examples

```python
from petrovich import Case, Gender, firstname, lastname, middlename

firstname(Gender.MALE, "Саша", Case.DATIVE)
# Returns: "Саше"

lastname(Gender.MALE, "Станкевич", Case.PREPOSITIONAL)
# Returns: "Станкевиче"

lastname(Gender.FEMALE, "Станкевич", Case.PREPOSITIONAL)
# Returns: "Станкевич" (female surnames ending in a consonant do not decline)

middlename(Gender.FEMALE, "Прокопьевна", Case.ACCUSATIVE)
# Returns: "Прокопьевну"

lastname(Gender.MALE, "Салтыков-Щедрин", Case.GENITIVE)
# Returns: "Салтыкова-Щедрина" (every part of a compound is inflected)

from petrovich import detect_gender

detect_gender(firstname="Иван", middlename="Петрович")
# Returns: Gender.MALE
```

## Matching Semantics

- Patterns are compared on code points against the lower-cased name; the returned name
  keeps the caller's spelling of the stem.
- Exceptions: first matching rule in corpus order wins.
- Suffixes: the longest matching pattern across all applicable rules wins; corpus order
  breaks ties between patterns of equal length.
- Rules tagged `first_word` only apply to the first part of a hyphenated compound.

## Thread Safety

Rule tables are frozen after loading and the engine holds no mutable state, so any number
of threads may inflect concurrently.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from petrovich.enums import Case, Gender, NamePart
from petrovich.petrovich_data import (
    GENDER_PATH,
    RULES_PATH,
    GenderHeuristic,
    Rule,
    RuleTable,
    load_gender_heuristics,
    load_rules,
)


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class PetrovichConfig:
    """Immutable engine configuration."""

    rules_path: Path
    gender_path: Path
    compound_separator: str

    # Order in which name parts are consulted by gender detection
    detection_order: Tuple[NamePart, ...] = (NamePart.MIDDLENAME, NamePart.FIRSTNAME, NamePart.LASTNAME)

    def __post_init__(self):
        if not self.compound_separator:
            raise ValueError("compound_separator must be a non-empty string")

    @classmethod
    def create_default(cls) -> "PetrovichConfig":
        """Factory method for the bundled corpora."""
        return cls(rules_path=RULES_PATH, gender_path=GENDER_PATH, compound_separator="-")

    def with_rules_path(self, rules_path: Path) -> "PetrovichConfig":
        return replace(self, rules_path=Path(rules_path))

    def with_gender_path(self, gender_path: Path) -> "PetrovichConfig":
        return replace(self, gender_path=Path(gender_path))


# ════════════════════════════════════════════════════════════════════════════════
# RULE ENGINE
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class RuleMatch:
    """Rule selected for a name, with the pattern that matched."""

    rule: Rule
    pattern: str


@dataclass(frozen=True)
class CandidateSet:
    """Rules applicable to one (name part, gender) pair, in matching order."""

    exceptions: Tuple[Rule, ...]
    # (pattern, rule) pairs, longest pattern first, corpus order among equal lengths
    suffixes: Tuple[Tuple[str, Rule], ...]


class RuleEngine:
    """Selects and applies inflection rules for Russian personal names."""

    def __init__(self, table: Optional[RuleTable] = None, config: Optional[PetrovichConfig] = None):
        self._config = config or PetrovichConfig.create_default()
        self._table = table if table is not None else load_rules(self._config.rules_path)
        self._index = self._build_index(self._table)
        logging.debug(f"Rule engine indexed {len(self._index)} (part, gender) candidate sets")

    @property
    def table(self) -> RuleTable:
        return self._table

    @staticmethod
    def _build_index(table: RuleTable) -> Mapping[Tuple[NamePart, Gender], CandidateSet]:
        index: Dict[Tuple[NamePart, Gender], CandidateSet] = {}
        for part in NamePart:
            for gender in Gender:
                applicable = [rule for rule in table.rules if rule.part is part and gender in rule.gender]
                exceptions = tuple(rule for rule in applicable if rule.is_exception)
                pairs = [(pattern, rule) for rule in applicable if not rule.is_exception for pattern in rule.patterns]
                # sorted() is stable: equal lengths keep corpus order
                suffixes = tuple(sorted(pairs, key=lambda pair: len(pair[0]), reverse=True))
                index[(part, gender)] = CandidateSet(exceptions=exceptions, suffixes=suffixes)
        return MappingProxyType(index)

    def find_rule(self, part: NamePart, gender: Gender, name: str, first_word: bool = False) -> Optional[RuleMatch]:
        """
        Select the rule for a single word.

        Args:
            part: Which name part the word is
            gender: Grammatical gender of the person
            name: A single word (no compound separator)
            first_word: True when the word opens a hyphenated compound

        Returns:
            The selected rule and matched pattern, or None when the word is not recognised
        """
        if not name:
            return None

        folded = name.lower()
        candidates = self._index[(part, gender)]

        for rule in candidates.exceptions:
            if rule.first_word_only and not first_word:
                continue
            pattern = rule.match(folded)
            if pattern is not None:
                return RuleMatch(rule=rule, pattern=pattern)

        for pattern, rule in candidates.suffixes:
            if rule.first_word_only and not first_word:
                continue
            if rule.matches(pattern, folded):
                return RuleMatch(rule=rule, pattern=pattern)

        return None

    def inflect_word(self, part: NamePart, gender: Gender, name: str, case: Case, first_word: bool = False) -> str:
        """Inflect a single word, leaving it unchanged when no rule matches."""
        if case is Case.NOMINATIVE:
            return name
        found = self.find_rule(part, gender, name, first_word=first_word)
        if found is None:
            return name
        return found.rule.apply(name, case)

    def inflect(self, part: NamePart, gender: Gender, name: str, case: Case) -> str:
        """
        Inflect a name into the requested case.

        Hyphenated compounds are inflected part by part. The result is always a string:
        names no rule recognises, including the empty string, are returned unchanged.
        """
        if case is Case.NOMINATIVE or not name:
            return name

        separator = self._config.compound_separator
        words = name.split(separator)
        if len(words) == 1:
            return self.inflect_word(part, gender, name, case)

        return separator.join(
            self.inflect_word(part, gender, word, case, first_word=(i == 0)) for i, word in enumerate(words)
        )

    def firstname(self, gender: Gender, name: str, case: Case) -> str:
        return self.inflect(NamePart.FIRSTNAME, gender, name, case)

    def lastname(self, gender: Gender, name: str, case: Case) -> str:
        return self.inflect(NamePart.LASTNAME, gender, name, case)

    def middlename(self, gender: Gender, name: str, case: Case) -> str:
        return self.inflect(NamePart.MIDDLENAME, gender, name, case)


# ════════════════════════════════════════════════════════════════════════════════
# GENDER DETECTION
# ════════════════════════════════════════════════════════════════════════════════


class GenderDetector:
    """Guesses grammatical gender from the parts of a full name."""

    def __init__(
        self,
        heuristics: Optional[Mapping[NamePart, GenderHeuristic]] = None,
        config: Optional[PetrovichConfig] = None,
    ):
        self._config = config or PetrovichConfig.create_default()
        self._heuristics = heuristics if heuristics is not None else load_gender_heuristics(self._config.gender_path)

    def detect_part(self, part: NamePart, name: str) -> Optional[Gender]:
        heuristic = self._heuristics.get(part)
        if heuristic is None or not name:
            return None
        return heuristic.detect(name.lower())

    def detect(
        self,
        lastname: Optional[str] = None,
        firstname: Optional[str] = None,
        middlename: Optional[str] = None,
    ) -> Optional[Gender]:
        """
        Detect gender, trusting the middle name first, then the first name, then the last name.

        Returns None when no name part settles the question.
        """
        names: Dict[NamePart, Optional[str]] = {
            NamePart.LASTNAME: lastname,
            NamePart.FIRSTNAME: firstname,
            NamePart.MIDDLENAME: middlename,
        }
        for part in self._config.detection_order:
            name = names.get(part)
            if not name:
                continue
            gender = self.detect_part(part, name)
            if gender is not None:
                return gender
        return None


# ════════════════════════════════════════════════════════════════════════════════
# PERFORMANCE TESTING
# ════════════════════════════════════════════════════════════════════════════════


def run_performance_test() -> None:
    """Run a throughput test over the bundled corpus."""
    engine = RuleEngine()

    samples: List[Tuple[NamePart, Gender, str]] = [
        (NamePart.LASTNAME, Gender.MALE, "Иванов"),
        (NamePart.LASTNAME, Gender.FEMALE, "Иванова"),
        (NamePart.LASTNAME, Gender.MALE, "Достоевский"),
        (NamePart.LASTNAME, Gender.FEMALE, "Достоевская"),
        (NamePart.LASTNAME, Gender.MALE, "Салтыков-Щедрин"),
        (NamePart.LASTNAME, Gender.FEMALE, "Станкевич"),
        (NamePart.FIRSTNAME, Gender.MALE, "Пётр"),
        (NamePart.FIRSTNAME, Gender.FEMALE, "Любовь"),
        (NamePart.FIRSTNAME, Gender.MALE, "Саша"),
        (NamePart.MIDDLENAME, Gender.MALE, "Сергеевич"),
        (NamePart.MIDDLENAME, Gender.FEMALE, "Прокопьевна"),
        (NamePart.FIRSTNAME, Gender.FEMALE, "Изабель"),
    ] * 100

    cases = [case for case in Case if case is not Case.NOMINATIVE]
    total = len(samples) * len(cases)

    print(f"Inflecting {len(samples)} names into {len(cases)} cases ({total} calls)...")
    start = time.perf_counter()
    for part, gender, name in samples:
        for case in cases:
            engine.inflect(part, gender, name, case)
    elapsed = time.perf_counter() - start

    rate = total / elapsed
    per_call = (elapsed / total) * 1_000_000
    print(f"Inflected {total} forms in {elapsed:.3f}s")
    print(f"Rate: {rate:.0f} calls/second")
    print(f"Time per call: {per_call:.1f} microseconds")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global instances for module-level functions
_global_engine: Optional[RuleEngine] = None
_global_detector: Optional[GenderDetector] = None


def _get_global_engine() -> RuleEngine:
    """Get or create the global engine instance."""
    global _global_engine
    if _global_engine is None:
        _global_engine = RuleEngine()
    return _global_engine


def _get_global_detector() -> GenderDetector:
    """Get or create the global gender detector instance."""
    global _global_detector
    if _global_detector is None:
        _global_detector = GenderDetector()
    return _global_detector


def inflect(part: NamePart, gender: Gender, name: str, case: Case) -> str:
    """
    Module-level convenience function for name inflection.

    Args:
        part: Which part of the full name `name` is
        gender: Grammatical gender of the person
        name: Name in the nominative case
        case: Target case

    Returns:
        The inflected name, or `name` unchanged when it cannot be inflected
    """
    return _get_global_engine().inflect(part, gender, name, case)


def firstname(gender: Gender, name: str, case: Case) -> str:
    """Inflect a first name."""
    return inflect(NamePart.FIRSTNAME, gender, name, case)


def lastname(gender: Gender, name: str, case: Case) -> str:
    """Inflect a last name."""
    return inflect(NamePart.LASTNAME, gender, name, case)


def middlename(gender: Gender, name: str, case: Case) -> str:
    """Inflect a middle name (patronymic)."""
    return inflect(NamePart.MIDDLENAME, gender, name, case)


def detect_gender(
    lastname: Optional[str] = None,
    firstname: Optional[str] = None,
    middlename: Optional[str] = None,
) -> Optional[Gender]:
    """Guess gender from any subset of last, first and middle name. None when undecided."""
    return _get_global_detector().detect(lastname=lastname, firstname=firstname, middlename=middlename)


# CLI entry point
if __name__ == "__main__":
    run_performance_test()
