from __future__ import annotations

import csv
import random
from collections.abc import Sequence
from pathlib import Path

from record_matcher.models import Record

_FIRST_NAMES = [
    "John",
    "Jane",
    "Alice",
    "Bob",
    "Sue",
    "Max",
    "Maya",
    "Daniel",
    "Olivia",
    "Noah",
]
_LAST_NAMES = [
    "Smith",
    "Johnson",
    "Brown",
    "Taylor",
    "Wilson",
    "Davies",
    "Martin",
    "Thomas",
]
_DOMAINS = ["gmail.com", "outlook.com", "yahoo.com", "example.com"]


class ReferenceDatasetGenerator:
    """Generate synthetic contact rows (with intentional dupes) for tests and benchmarks.

    Duplicates keep at least one email or phone of their source row, rendered
    differently: case and whitespace drift on emails, punctuation on phones,
    values moved to the sibling column, or other fields blanked out.
    """

    def __init__(self, seed: int = 7) -> None:
        self._rng = random.Random(seed)

    def generate(
        self,
        columns: Sequence[str],
        size: int,
        duplicate_rate: float = 0.15,
    ) -> list[Record]:
        if size <= 0:
            return []

        records: list[Record] = []
        unique_count = int(size * (1.0 - duplicate_rate))
        unique_count = max(1, min(unique_count, size))

        for i in range(unique_count):
            profile = self._profile(i)
            attrs: dict[str, str | None] = {
                column: self._value_for_column(column, i, profile) for column in columns
            }
            records.append(Record(key=i, attributes=attrs))

        while len(records) < size:
            source = self._rng.choice(records[:unique_count])
            attrs = dict(source.attributes)
            self._perturb(attrs)
            records.append(Record(key=len(records), attributes=attrs))

        self._rng.shuffle(records)
        return [Record(key=position, attributes=record.attributes) for position, record in enumerate(records)]

    def _profile(self, idx: int) -> dict[str, str]:
        first_name = self._rng.choice(_FIRST_NAMES)
        last_name = self._rng.choice(_LAST_NAMES)
        email_local = f"{first_name}.{last_name}{idx}".lower()
        has_second_email = self._rng.random() < 0.3
        has_second_phone = self._rng.random() < 0.3

        return {
            "first_name": first_name,
            "last_name": last_name,
            "email": f"{email_local}@{self._rng.choice(_DOMAINS)}",
            "email2": f"{email_local}@work.example.com" if has_second_email else "",
            "phone": f"555{idx % 10000000:07d}",
            "phone2": f"444{idx % 10000000:07d}" if has_second_phone else "",
            "zip": f"{10000 + (idx % 89999)}",
        }

    def _value_for_column(self, column: str, idx: int, profile: dict[str, str]) -> str:
        lowered = column.lower()

        if "email" in lowered:
            return profile["email2"] if lowered.endswith("2") else profile["email"]
        if "phone" in lowered:
            return profile["phone2"] if lowered.endswith("2") else profile["phone"]
        if "first" in lowered:
            return profile["first_name"]
        if "last" in lowered:
            return profile["last_name"]
        if "zip" in lowered or "postcode" in lowered:
            return profile["zip"]
        return f"{column}_{idx:07d}"

    def _perturb(self, attrs: dict[str, str | None]) -> None:
        email_cols = [c for c in attrs if "email" in c.lower()]
        phone_cols = [c for c in attrs if "phone" in c.lower()]

        mutation = self._rng.choice(["email", "phone", "move", "mixed"])

        if mutation in {"email", "mixed"} and email_cols:
            col = self._rng.choice(email_cols)
            if attrs[col]:
                attrs[col] = self._email_variant(attrs[col])

        if mutation in {"phone", "mixed"} and phone_cols:
            col = self._rng.choice(phone_cols)
            if attrs[col]:
                attrs[col] = self._phone_variant(attrs[col])

        if mutation == "move":
            self._move_variant(attrs, email_cols)
            self._move_variant(attrs, phone_cols)

        if mutation == "email" and phone_cols:
            attrs[self._rng.choice(phone_cols)] = ""
        if mutation == "phone" and email_cols:
            attrs[self._rng.choice(email_cols)] = ""

    def _email_variant(self, email: str) -> str:
        variant = self._rng.choice(["upper", "capitalize", "padded"])
        if variant == "upper":
            return email.upper()
        if variant == "capitalize":
            return email.capitalize()
        return f"  {email} "

    def _phone_variant(self, phone: str) -> str:
        digits = "".join(ch for ch in phone if ch.isdigit())
        if len(digits) != 10:
            return phone
        variant = self._rng.choice(["parens", "dashes", "dots"])
        if variant == "parens":
            return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
        if variant == "dashes":
            return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:]}"

    def _move_variant(self, attrs: dict[str, str | None], columns: list[str]) -> None:
        if len(columns) < 2:
            return
        first, second = columns[0], columns[1]
        attrs[first], attrs[second] = attrs[second], attrs[first]


def write_dataset_csv(path: Path, records: Sequence[Record], columns: Sequence[str]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(columns))
        writer.writeheader()
        for record in records:
            writer.writerow({column: record.attributes.get(column) or "" for column in columns})
    return path
