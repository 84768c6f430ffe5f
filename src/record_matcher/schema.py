from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping, Sequence


class FieldTag(StrEnum):
    EMAIL = "EMAIL"
    PHONE = "PHONE"


_TAG_TOKENS = {
    FieldTag.EMAIL: "email",
    FieldTag.PHONE: "phone",
}


@dataclass(frozen=True)
class RecordSchema:
    """Maps source columns to the semantic tags used for matching."""

    tag_to_columns: Mapping[FieldTag, tuple[str, ...]]

    @classmethod
    def from_mapping(cls, mapping: Mapping[FieldTag, Sequence[str]]) -> "RecordSchema":
        frozen = {tag: tuple(columns) for tag, columns in mapping.items()}
        return cls(tag_to_columns=frozen)

    @classmethod
    def from_columns(cls, columns: Sequence[str]) -> "RecordSchema":
        """Classify columns by name: any column containing "email" or "phone"."""
        mapping: dict[FieldTag, list[str]] = {tag: [] for tag in _TAG_TOKENS}
        for column in columns:
            lowered = column.lower()
            for tag, token in _TAG_TOKENS.items():
                if token in lowered:
                    mapping[tag].append(column)
        return cls.from_mapping(mapping)

    def columns_for(self, tag: FieldTag) -> tuple[str, ...]:
        return self.tag_to_columns.get(tag, ())

    def values_for(self, attributes: Mapping[str, object], tag: FieldTag) -> list[str]:
        values: list[str] = []
        for column in self.columns_for(tag):
            value = attributes.get(column)
            if value is None:
                continue
            values.append(str(value))
        return values
