from enum import Enum


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class Case(Enum):
    """Russian grammatical cases. NOMINATIVE is the dictionary form and never changes a name."""

    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    PREPOSITIONAL = "prepositional"


class NamePart(Enum):
    FIRSTNAME = "firstname"
    LASTNAME = "lastname"
    MIDDLENAME = "middlename"


class MatchKind(Enum):
    EXACT = "exact"  # whole name equals the pattern
    SUFFIX = "suffix"  # name ends with the pattern
