from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from record_matcher.models import Record
from record_matcher.schema import FieldTag, RecordSchema

_NON_DIGITS = re.compile(r"\D")


def normalize_email(value: str) -> str:
    return value.strip().lower()


def normalize_phone(value: str) -> str:
    return _NON_DIGITS.sub("", value)


DEFAULT_TAG_TRANSFORMS: dict[FieldTag, Callable[[str], str]] = {
    FieldTag.EMAIL: normalize_email,
    FieldTag.PHONE: normalize_phone,
}


class FunctionalCleaner:
    """Applies one transform per semantic tag to every column carrying that tag.

    Absent values are left absent; records are copied, never mutated in place.
    """

    def __init__(
        self,
        schema: RecordSchema,
        tag_transforms: dict[FieldTag, Callable[[str], str]] | None = None,
    ) -> None:
        self._schema = schema
        self._tag_transforms = DEFAULT_TAG_TRANSFORMS if tag_transforms is None else tag_transforms

    def clean(self, records: Sequence[Record]) -> list[Record]:
        cleaned: list[Record] = []
        for record in records:
            attrs = dict(record.attributes)
            for tag, transform in self._tag_transforms.items():
                for column in self._schema.columns_for(tag):
                    value = attrs.get(column)
                    if value is None:
                        continue
                    attrs[column] = transform(str(value))
            cleaned.append(Record(key=record.key, attributes=attrs, group_id=record.group_id))
        return cleaned
