from __future__ import annotations

from collections.abc import Sequence

from record_matcher.config import MatchMode
from record_matcher.interfaces import ColumnCleaner
from record_matcher.models import Record
from record_matcher.schema import RecordSchema
from record_matcher.steps.cleanup import FunctionalCleaner
from record_matcher.steps.clustering import SharedValueClusterer
from record_matcher.steps.extraction import MatchValueExtractor


class LocalMatchPipeline:
    """In-memory runner: clean, cluster on shared values, annotate with group ids."""

    def __init__(
        self,
        schema: RecordSchema,
        mode: MatchMode | str,
        cleaner: ColumnCleaner | None = None,
    ) -> None:
        self._extractor = MatchValueExtractor(schema=schema, mode=mode)
        self._cleaner = cleaner or FunctionalCleaner(schema=schema)
        self._clusterer = SharedValueClusterer(self._extractor)

    @property
    def mode(self) -> MatchMode:
        return self._extractor.mode

    def run(self, records: Sequence[Record]) -> list[Record]:
        cleaned = self._cleaner.clean(records)
        return self._clusterer.annotate(cleaned)
