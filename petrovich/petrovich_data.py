# ═════════════════════════════════════════════════════════════════════════════════
# RULE CORPUS FOR RUSSIAN ANTHROPONYMS
# ═════════════════════════════════════════════════════════════════════════════════
#
# Two YAML files ship next to this module:
# 1. rules.yml: inflection rules per name part, split into exceptions and suffixes
# 2. gender.yml: gender heuristics per name part
#
# Both are parsed once, validated, and frozen into immutable structures:
# - Rule / RuleTable: frozen dataclasses with tuple and MappingProxyType fields
# - GenderMapping / GenderHeuristic: frozen dataclasses with tuple fields
#
# Validation failures raise ValueError naming the offending entry, so a broken
# corpus fails at import time instead of producing wrong inflections later.
# ═════════════════════════════════════════════════════════════════════════════════

from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Tuple

import yaml

from petrovich.enums import Case, Gender, MatchKind, NamePart

RULES_PATH = Path(__file__).with_name("rules.yml")
GENDER_PATH = Path(__file__).with_name("gender.yml")

# Corpus spelling of genders -> genders a rule applies to
GENDER_SETS: Mapping[str, FrozenSet[Gender]] = MappingProxyType(
    {
        "male": frozenset({Gender.MALE}),
        "female": frozenset({Gender.FEMALE}),
        "androgynous": frozenset({Gender.MALE, Gender.FEMALE}),
    }
)

# Order of the five modifiers in every rule
INFLECTED_CASES: Tuple[Case, ...] = (
    Case.GENITIVE,
    Case.DATIVE,
    Case.ACCUSATIVE,
    Case.INSTRUMENTAL,
    Case.PREPOSITIONAL,
)

SECTION_PARTS: Mapping[str, NamePart] = MappingProxyType(
    {
        "lastname": NamePart.LASTNAME,
        "firstname": NamePart.FIRSTNAME,
        "middlename": NamePart.MIDDLENAME,
    }
)

FIRST_WORD_TAG = "first_word"
KNOWN_TAGS: FrozenSet[str] = frozenset({FIRST_WORD_TAG})

UNCHANGED_MODIFIER = "."
STRIP_MARK = "-"


# ════════════════════════════════════════════════════════════════════════════════
# RULE RECORDS
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Ending:
    """Case ending: drop `strip` trailing code points, then append `suffix`."""

    strip: int
    suffix: str

    @classmethod
    def parse(cls, modifier: str) -> "Ending":
        """Parse a corpus modifier such as "--ой" or "."."""
        if modifier == UNCHANGED_MODIFIER:
            return cls(strip=0, suffix="")
        suffix = modifier.lstrip(STRIP_MARK)
        return cls(strip=len(modifier) - len(suffix), suffix=suffix)

    def apply(self, name: str) -> str:
        stem = name[: len(name) - self.strip] if self.strip else name
        return stem + self.suffix


NOMINATIVE_ENDING = Ending(strip=0, suffix="")


@dataclass(frozen=True)
class Rule:
    """One inflection rule of the corpus."""

    gender: FrozenSet[Gender]
    part: NamePart
    match_kind: MatchKind
    patterns: Tuple[str, ...]  # longest first
    is_exception: bool
    endings: Mapping[Case, Ending]
    tags: FrozenSet[str] = frozenset()

    @property
    def first_word_only(self) -> bool:
        return FIRST_WORD_TAG in self.tags

    def matches(self, pattern: str, folded_name: str) -> bool:
        if self.match_kind is MatchKind.EXACT:
            return folded_name == pattern
        return folded_name.endswith(pattern)

    def match(self, folded_name: str) -> Optional[str]:
        """Return the first (longest) pattern matching the case-folded name."""
        for pattern in self.patterns:
            if self.matches(pattern, folded_name):
                return pattern
        return None

    def apply(self, name: str, case: Case) -> str:
        if case is Case.NOMINATIVE:
            return name
        return self.endings[case].apply(name)


@dataclass(frozen=True)
class RuleTable:
    """All rules of a corpus in table order."""

    rules: Tuple[Rule, ...]

    def for_part(self, part: NamePart) -> Tuple[Rule, ...]:
        return tuple(rule for rule in self.rules if rule.part is part)

    def counts(self) -> Dict[NamePart, int]:
        return {part: len(self.for_part(part)) for part in NamePart}


@dataclass(frozen=True)
class GenderMapping:
    androgynous: Tuple[str, ...] = ()
    female: Tuple[str, ...] = ()
    male: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GenderHeuristic:
    """Exact names and endings that hint at the gender of one name part."""

    exceptions: Optional[GenderMapping]
    suffixes: GenderMapping

    def detect(self, folded_name: str) -> Optional[Gender]:
        """
        Look the case-folded name up in the exception lists, then in the suffix lists.

        An androgynous or missing exception falls through to the suffix lists;
        an androgynous suffix gives None.
        """
        if self.exceptions is not None:
            gender = _lookup(self.exceptions, lambda entry: folded_name == entry)
            if gender is not None:
                return gender
        return _lookup(self.suffixes, folded_name.endswith)


def _lookup(mapping: GenderMapping, hit: Callable[[str], bool]) -> Optional[Gender]:
    if any(hit(entry) for entry in mapping.androgynous):
        return None
    if any(hit(entry) for entry in mapping.female):
        return Gender.FEMALE
    if any(hit(entry) for entry in mapping.male):
        return Gender.MALE
    return None


# ═════════════════════════════════════════════════════════════════════════════════
# PARSING AND VALIDATION
# ═════════════════════════════════════════════════════════════════════════════════


def _describe(section: str, kind: str, index: int) -> str:
    return f"{section}.{kind}[{index}]"


def _parse_rule(raw: Dict[str, Any], part: NamePart, is_exception: bool, where: str) -> Rule:
    """Validate one raw corpus entry and build a Rule from it."""
    gender_name = raw.get("gender")
    if gender_name not in GENDER_SETS:
        raise ValueError(f"Unknown gender in {where}: {gender_name!r}")

    tests = raw.get("test") or []
    if not tests:
        raise ValueError(f"Empty test list in {where}")
    patterns = tuple(str(test) for test in tests)
    for pattern in patterns:
        if not pattern:
            raise ValueError(f"Empty pattern in {where}")
        if pattern != pattern.lower():
            raise ValueError(f"Pattern must be lower case in {where}: {pattern!r}")

    mods = raw.get("mods") or []
    if len(mods) != len(INFLECTED_CASES):
        raise ValueError(f"Expected {len(INFLECTED_CASES)} modifiers in {where}, got {len(mods)}")

    shortest = min(len(pattern) for pattern in patterns)
    endings: Dict[Case, Ending] = {}
    for case, modifier in zip(INFLECTED_CASES, mods):
        ending = Ending.parse(str(modifier))
        if ending.strip > shortest:
            raise ValueError(f"Modifier {modifier!r} strips more than pattern length {shortest} in {where}")
        endings[case] = ending
    endings[Case.NOMINATIVE] = NOMINATIVE_ENDING

    tags = frozenset(raw.get("tags") or ())
    unknown_tags = tags - KNOWN_TAGS
    if unknown_tags:
        raise ValueError(f"Unknown tags in {where}: {sorted(unknown_tags)}")

    return Rule(
        gender=GENDER_SETS[gender_name],
        part=part,
        match_kind=MatchKind.EXACT if is_exception else MatchKind.SUFFIX,
        # stable sort keeps corpus order between patterns of equal length
        patterns=tuple(sorted(patterns, key=len, reverse=True)),
        is_exception=is_exception,
        endings=MappingProxyType(endings),
        tags=tags,
    )


def build_rule_table(raw: Mapping[str, Any]) -> RuleTable:
    """Build a RuleTable from the parsed YAML structure."""
    unknown_sections = set(raw) - set(SECTION_PARTS)
    if unknown_sections:
        raise ValueError(f"Unknown name parts in rule corpus: {sorted(unknown_sections)}")

    rules: List[Rule] = []
    for section, part in SECTION_PARTS.items():
        rule_list = raw.get(section) or {}
        for kind, is_exception in (("exceptions", True), ("suffixes", False)):
            for index, entry in enumerate(rule_list.get(kind) or []):
                rules.append(_parse_rule(entry, part, is_exception, _describe(section, kind, index)))
    return RuleTable(rules=tuple(rules))


def _parse_gender_mapping(raw: Optional[Mapping[str, Any]], where: str) -> GenderMapping:
    raw = raw or {}
    unknown = set(raw) - set(GENDER_SETS)
    if unknown:
        raise ValueError(f"Unknown gender keys in {where}: {sorted(unknown)}")
    return GenderMapping(**{key: tuple(str(entry) for entry in (raw.get(key) or ())) for key in GENDER_SETS})


def build_gender_heuristics(raw: Mapping[str, Any]) -> Mapping[NamePart, GenderHeuristic]:
    """Build per-part gender heuristics from the parsed YAML structure."""
    sections = (raw or {}).get("gender")
    if not isinstance(sections, Mapping):
        raise ValueError("Gender corpus must have a top-level 'gender' mapping")

    heuristics: Dict[NamePart, GenderHeuristic] = {}
    for section, part in SECTION_PARTS.items():
        entry = sections.get(section) or {}
        exceptions = entry.get("exceptions")
        heuristics[part] = GenderHeuristic(
            exceptions=(
                _parse_gender_mapping(exceptions, f"gender.{section}.exceptions") if exceptions is not None else None
            ),
            suffixes=_parse_gender_mapping(entry.get("suffixes"), f"gender.{section}.suffixes"),
        )
    return MappingProxyType(heuristics)


def _read_yaml(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@lru_cache(maxsize=None)
def load_rules(path: Path = RULES_PATH) -> RuleTable:
    """Load and validate an inflection corpus. Results are cached per path."""
    table = build_rule_table(_read_yaml(path) or {})
    counts = ", ".join(f"{part.value}={count}" for part, count in table.counts().items())
    logging.debug(f"Loaded {len(table.rules)} inflection rules from {path} ({counts})")
    return table


@lru_cache(maxsize=None)
def load_gender_heuristics(path: Path = GENDER_PATH) -> Mapping[NamePart, GenderHeuristic]:
    """Load and validate a gender heuristics corpus. Results are cached per path."""
    heuristics = build_gender_heuristics(_read_yaml(path))
    logging.debug(f"Loaded gender heuristics for {len(heuristics)} name parts from {path}")
    return heuristics


# Validate the bundled corpora at import time
load_rules(RULES_PATH)
load_gender_heuristics(GENDER_PATH)
