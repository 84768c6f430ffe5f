from __future__ import annotations

from typing import assert_never

from record_matcher.config import MatchMode
from record_matcher.models import Record
from record_matcher.schema import FieldTag, RecordSchema


class MatchValueExtractor:
    """Collects the values a record contributes to clustering under one match mode.

    Values are expected to be normalized already. Empty or whitespace-only
    values are dropped so that records with no data never link through them,
    and repeats within one record are collapsed.
    """

    def __init__(self, schema: RecordSchema, mode: MatchMode | str) -> None:
        self._schema = schema
        self._mode = MatchMode.parse(mode)

    @property
    def mode(self) -> MatchMode:
        return self._mode

    def extract(self, record: Record) -> tuple[str, ...]:
        match self._mode:
            case MatchMode.EMAIL:
                raw = self._emails(record)
            case MatchMode.PHONE:
                raw = self._phones(record)
            case MatchMode.EMAIL_OR_PHONE:
                raw = self._emails(record) + self._phones(record)
            case _:
                assert_never(self._mode)
        return _usable(raw)

    def _emails(self, record: Record) -> list[str]:
        return self._schema.values_for(record.attributes, FieldTag.EMAIL)

    def _phones(self, record: Record) -> list[str]:
        return self._schema.values_for(record.attributes, FieldTag.PHONE)


def _usable(values: list[str]) -> tuple[str, ...]:
    # dict keeps first-seen order
    kept = {value: None for value in values if value.strip()}
    return tuple(kept)
