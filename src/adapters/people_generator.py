"""Random people datasets for trying the analyzer out.

Birth years are uniform in [MIN_YEAR, MAX_YEAR]; death years are uniform in
[birth, MAX_YEAR]. Output is tab-indented JSON using the same keys the loader
reads.
"""

from __future__ import annotations

import json
import random
from pathlib import Path

from core.domain.models import MAX_YEAR, MIN_YEAR

MIN_PEOPLE = 1
MAX_PEOPLE = 9001

_FIRST_NAMES = (
    "Ada", "Alan", "Alice", "Amelia", "Arthur", "Beatrice", "Bob", "Carmen",
    "Charles", "Clara", "Daniel", "Dorothy", "Edgar", "Elena", "Ernest", "Eva",
    "Frances", "Frank", "George", "Grace", "Harold", "Hazel", "Irene", "Isaac",
    "Jack", "Joan", "Julia", "Karl", "Lena", "Leonard", "Lucia", "Marie",
    "Martin", "Nora", "Oscar", "Pablo", "Rosa", "Ruth", "Samuel", "Sofia",
    "Thomas", "Vera", "Walter", "Winifred",
)
_LAST_NAMES = (
    "Abbott", "Baker", "Castillo", "Curie", "Dalton", "Evans", "Fischer",
    "Garcia", "Hopper", "Ibarra", "Jensen", "Keller", "Lovelace", "Moreno",
    "Novak", "Olsen", "Petrov", "Quinn", "Ramos", "Schmidt", "Turing", "Ueda",
    "Vargas", "Weber", "Young", "Zimmermann",
)


def generate_people(count: int, *, seed: int | None = None) -> list[dict[str, object]]:
    """Generate `count` random people as plain JSON-ready dicts."""

    if not MIN_PEOPLE <= count <= MAX_PEOPLE:
        raise ValueError(
            f"Specified number of people ({count}) is out of valid range [{MIN_PEOPLE} - {MAX_PEOPLE}]"
        )

    rng = random.Random(seed)
    people: list[dict[str, object]] = []
    for _ in range(count):
        birth_year = rng.randint(MIN_YEAR, MAX_YEAR)
        death_year = rng.randint(birth_year, MAX_YEAR)
        people.append(
            {
                "name": f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
                "birthYear": birth_year,
                "deathYear": death_year,
            }
        )
    return people


def write_people(*, people: list[dict[str, object]], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(people, ensure_ascii=False, indent="\t") + "\n", encoding="utf-8")
    return output_path
