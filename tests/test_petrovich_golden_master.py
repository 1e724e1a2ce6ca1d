"""
Golden Master Test Suite for the Inflection Corpus

The golden master is the hand-verified declension grid below: every form was
worked out against rules.yml and checked against Russian usage. Edits to the
corpus or to the matching engine that change any of these forms fail here.
A wider set of names is run through all cases and genders to make sure the
corpus never raises and always keeps the nominative form.
"""

import sys
from pathlib import Path
from typing import Dict, List, Tuple

# Add the parent directory to path to import petrovich
sys.path.insert(0, str(Path(__file__).parent.parent))

from petrovich import Case, Gender, NamePart, inflect

M = Gender.MALE
F = Gender.FEMALE

GridKey = Tuple[NamePart, Gender, str]

# (genitive, dative, accusative, instrumental, prepositional)
GOLDEN_GRID: Dict[GridKey, Tuple[str, str, str, str, str]] = {
    (NamePart.LASTNAME, M, "Петров"): ("Петрова", "Петрову", "Петрова", "Петровым", "Петрове"),
    (NamePart.LASTNAME, F, "Петрова"): ("Петровой", "Петровой", "Петрову", "Петровой", "Петровой"),
    (NamePart.LASTNAME, M, "Донской"): ("Донского", "Донскому", "Донского", "Донским", "Донском"),
    (NamePart.LASTNAME, M, "Горький"): ("Горького", "Горькому", "Горького", "Горьким", "Горьком"),
    (NamePart.LASTNAME, F, "Горькая"): ("Горькой", "Горькой", "Горькую", "Горькой", "Горькой"),
    (NamePart.LASTNAME, M, "Белый"): ("Белого", "Белому", "Белого", "Белым", "Белом"),
    (NamePart.LASTNAME, M, "Вышний"): ("Вышнего", "Вышнему", "Вышнего", "Вышним", "Вышнем"),
    (NamePart.LASTNAME, F, "Зимняя"): ("Зимней", "Зимней", "Зимнюю", "Зимней", "Зимней"),
    (NamePart.LASTNAME, M, "Кривошея"): ("Кривошеи", "Кривошее", "Кривошею", "Кривошеей", "Кривошее"),
    (NamePart.LASTNAME, M, "Берия"): ("Берия", "Берия", "Берия", "Берия", "Берия"),
    (NamePart.LASTNAME, M, "Дурново"): ("Дурново", "Дурново", "Дурново", "Дурново", "Дурново"),
    (NamePart.LASTNAME, M, "Молодец"): ("Молодца", "Молодцу", "Молодца", "Молодцом", "Молодце"),
    (NamePart.LASTNAME, F, "Хакамада"): ("Хакамады", "Хакамаде", "Хакамаду", "Хакамадой", "Хакамаде"),
    (NamePart.LASTNAME, M, "Ремарк"): ("Ремарка", "Ремарку", "Ремарка", "Ремарком", "Ремарке"),
    (NamePart.LASTNAME, F, "Ахмадулина"): ("Ахмадулиной", "Ахмадулиной", "Ахмадулину", "Ахмадулиной", "Ахмадулиной"),
    (NamePart.LASTNAME, M, "Ким"): ("Кима", "Киму", "Кима", "Кимом", "Киме"),
    (NamePart.LASTNAME, F, "Ким"): ("Ким", "Ким", "Ким", "Ким", "Ким"),
    (NamePart.LASTNAME, M, "Римский-Корсаков"): (
        "Римского-Корсакова",
        "Римскому-Корсакову",
        "Римского-Корсакова",
        "Римским-Корсаковым",
        "Римском-Корсакове",
    ),
    (NamePart.FIRSTNAME, M, "Александр"): ("Александра", "Александру", "Александра", "Александром", "Александре"),
    (NamePart.FIRSTNAME, M, "Ваня"): ("Вани", "Ване", "Ваню", "Ваней", "Ване"),
    (NamePart.FIRSTNAME, M, "Кузьма"): ("Кузьмы", "Кузьме", "Кузьму", "Кузьмой", "Кузьме"),
    (NamePart.FIRSTNAME, F, "Нинель"): ("Нинель", "Нинель", "Нинель", "Нинель", "Нинель"),
    (NamePart.FIRSTNAME, F, "Анна-Мария"): ("Анны-Марии", "Анне-Марии", "Анну-Марию", "Анной-Марией", "Анне-Марии"),
    (NamePart.MIDDLENAME, M, "Ильич"): ("Ильича", "Ильичу", "Ильича", "Ильичем", "Ильиче"),
    (NamePart.MIDDLENAME, F, "Петровна"): ("Петровны", "Петровне", "Петровну", "Петровной", "Петровне"),
    (NamePart.MIDDLENAME, M, "Оглы"): ("Оглы", "Оглы", "Оглы", "Оглы", "Оглы"),
}

INFLECTED_CASES = [Case.GENITIVE, Case.DATIVE, Case.ACCUSATIVE, Case.INSTRUMENTAL, Case.PREPOSITIONAL]

LASTNAMES = [
    "Иванов",
    "Иванова",
    "Сидоров",
    "Кузнецов",
    "Смирнова",
    "Толстой",
    "Толстая",
    "Достоевский",
    "Достоевская",
    "Станкевич",
    "Гоголь",
    "Шевченко",
    "Черных",
    "Цой",
    "Гусь",
    "Дюма",
    "Скворец",
    "Шостакович",
    "Салтыков-Щедрин",
    "Бонч-Бруевич",
]

FIRSTNAMES = [
    "Саша",
    "Иван",
    "Лев",
    "Пётр",
    "Павел",
    "Илья",
    "Игорь",
    "Алексей",
    "Георгий",
    "Николай",
    "Никита",
    "Шота",
    "Мария",
    "Ольга",
    "Маша",
    "Таня",
    "Любовь",
    "Изабель",
    "Кармен",
]

MIDDLENAMES = [
    "Петрович",
    "Сергеич",
    "Прокопьевна",
    "Ильинична",
    "Кызы",
]

SWEEP_CASES: List[GridKey] = [
    (part, gender, name)
    for part, names in (
        (NamePart.LASTNAME, LASTNAMES),
        (NamePart.FIRSTNAME, FIRSTNAMES),
        (NamePart.MIDDLENAME, MIDDLENAMES),
    )
    for name in names
    for gender in Gender
] + list(GOLDEN_GRID)


def test_golden_master_grid():
    """Every hand-verified form of the golden master is reproduced."""
    mismatches = []
    for (part, gender, name), expected in GOLDEN_GRID.items():
        current = tuple(inflect(part, gender, name, case) for case in INFLECTED_CASES)
        if current != expected:
            mismatches.append(
                f"Mismatch for {part.value} {gender.value} '{name}':\n"
                f"  Golden:  {expected}\n"
                f"  Current: {current}"
            )

    if mismatches:
        raise AssertionError(
            f"Golden master validation failed with {len(mismatches)} mismatches:\n"
            + "\n".join(mismatches[:10])  # Show first 10 mismatches
        )
    print(f"Validated {len(GOLDEN_GRID)} names against golden master")


def test_sweep_has_no_exceptions():
    """Every name inflects into every case for both genders without raising."""
    failures = []
    for part, gender, name in SWEEP_CASES:
        for case in Case:
            try:
                result = inflect(part, gender, name, case)
            except Exception as e:
                failures.append(f"{part.value} {gender.value} '{name}' {case.value}: {e}")
                continue
            if not isinstance(result, str) or not result:
                failures.append(f"{part.value} {gender.value} '{name}' {case.value}: got {result!r}")
    assert not failures, "Inflection failed for:\n" + "\n".join(failures[:10])


def test_sweep_nominative_is_input():
    """The nominative form reproduces the input name."""
    for part, gender, name in SWEEP_CASES:
        result = inflect(part, gender, name, Case.NOMINATIVE)
        assert result == name, f"Nominative changed for {part.value} {gender.value} '{name}': {result}"


if __name__ == "__main__":
    # Print the current grid to help verify a corpus change by eye
    for (part, gender, name), expected in GOLDEN_GRID.items():
        current = tuple(inflect(part, gender, name, case) for case in INFLECTED_CASES)
        marker = "  " if current == expected else "!!"
        print(f"{marker} {part.value:<10} {gender.value:<6} {name} -> {current}")
