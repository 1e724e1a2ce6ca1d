from petrovich.enums import Case, Gender, MatchKind, NamePart
from petrovich.inflector import (
    GenderDetector,
    PetrovichConfig,
    RuleEngine,
    detect_gender,
    firstname,
    inflect,
    lastname,
    middlename,
)
from petrovich.deprecated import Petrovich

__all__ = [
    "Case",
    "Gender",
    "MatchKind",
    "NamePart",
    "GenderDetector",
    "PetrovichConfig",
    "RuleEngine",
    "detect_gender",
    "firstname",
    "inflect",
    "lastname",
    "middlename",
    "Petrovich",
]
