"""Deprecated object-style API, kept for callers of the early releases."""

import warnings
from typing import Optional

from petrovich import inflector
from petrovich.enums import Case, Gender


def _warn(replacement: str) -> None:
    warnings.warn(
        f"Petrovich is deprecated, use petrovich.{replacement} instead",
        DeprecationWarning,
        stacklevel=3,
    )


class Petrovich:
    """Thin wrapper around the module-level functions. Use those instead."""

    def __init__(self):
        warnings.warn(
            "Petrovich is deprecated, use the free functions of the petrovich package instead",
            DeprecationWarning,
            stacklevel=2,
        )

    def firstname(self, gender: Gender, name: str, case: Case) -> str:
        _warn("firstname")
        return inflector.firstname(gender, name, case)

    def middlename(self, gender: Gender, name: str, case: Case) -> str:
        _warn("middlename")
        return inflector.middlename(gender, name, case)

    def lastname(self, gender: Gender, name: str, case: Case) -> str:
        _warn("lastname")
        return inflector.lastname(gender, name, case)

    @staticmethod
    def detect_gender(middlename: str) -> Optional[Gender]:
        _warn("detect_gender")
        return inflector.detect_gender(middlename=middlename)
