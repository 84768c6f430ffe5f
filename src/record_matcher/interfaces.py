from __future__ import annotations

from typing import Protocol, Sequence

from record_matcher.models import Record


class ColumnCleaner(Protocol):
    """Step 1: normalize match fields into a canonical representation."""

    def clean(self, records: Sequence[Record]) -> list[Record]:
        ...


class ValueExtractor(Protocol):
    """Step 2: produce the candidate match values of a single record."""

    def extract(self, record: Record) -> tuple[str, ...]:
        ...


class MatchPipeline(Protocol):
    """Unified pipeline interface: records in, annotated records out."""

    def run(self, records: Sequence[Record]) -> list[Record]:
        ...
