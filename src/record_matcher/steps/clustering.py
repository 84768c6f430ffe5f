from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from itertools import combinations

from record_matcher.interfaces import ValueExtractor
from record_matcher.models import Group, Record
from record_matcher.steps.disjoint_set import DisjointSet

logger = logging.getLogger(__name__)


class SharedValueClusterer:
    """Groups records that share a match value directly or through a chain of records.

    Group ids start at 1 and follow the input order of each group's first
    record. Records sharing nothing with another record get no group.
    """

    def __init__(self, extractor: ValueExtractor) -> None:
        self._extractor = extractor

    def cluster(self, records: Sequence[Record]) -> list[Group]:
        if not records:
            return []

        forest: DisjointSet[int] = DisjointSet()
        union_count = 0
        index = self._index(records)
        for keys in index.values():
            if len(keys) < 2:
                continue
            for left, right in combinations(keys, 2):
                forest.union(left, right)
                union_count += 1
        logger.debug("Indexed %d match values, performed %d unions", len(index), union_count)

        group_of: dict[int, int] = {}
        for position, members in enumerate(forest.groups()):
            for key in members:
                group_of[key] = position

        groups: list[Group] = []
        numbered: dict[int, Group] = {}
        for record in records:
            position = group_of.get(record.key)
            if position is None:
                continue
            group = numbered.get(position)
            if group is None:
                group = Group(group_id=len(groups) + 1)
                numbered[position] = group
                groups.append(group)
            group.record_keys.append(record.key)

        logger.info("Formed %d groups from %d records", len(groups), len(records))
        return groups

    def assign(self, records: Sequence[Record]) -> dict[int, int]:
        """Map each grouped record key to its group id."""
        return {key: group.group_id for group in self.cluster(records) for key in group.record_keys}

    def annotate(self, records: Sequence[Record]) -> list[Record]:
        """Write group ids onto the records; ungrouped records are cleared."""
        assignments = self.assign(records)
        for record in records:
            record.group_id = assignments.get(record.key)
        logger.info("Annotated %d of %d records", len(assignments), len(records))
        return list(records)

    def _index(self, records: Sequence[Record]) -> dict[str, list[int]]:
        index: dict[str, list[int]] = defaultdict(list)
        for record in records:
            for value in self._extractor.extract(record):
                index[value].append(record.key)
        return index
