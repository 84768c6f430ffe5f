from __future__ import annotations

import csv
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from record_matcher.models import Record

logger = logging.getLogger(__name__)

GROUP_ID_COLUMN = "user_id"
OUTPUT_SUFFIX = "_with_user_ids.csv"

_WHITESPACE = re.compile(r"\s+")


@dataclass(slots=True)
class RecordTable:
    """Records loaded from one CSV file plus the headers needed to write it back."""

    raw_headers: list[str]
    columns: list[str]
    records: list[Record] = field(default_factory=list)


def normalize_header(header: str) -> str:
    return _WHITESPACE.sub("_", header.strip().lower())


def output_path_for(path: Path) -> Path:
    if path.suffix.lower() == ".csv":
        return path.with_name(f"{path.stem}{OUTPUT_SUFFIX}")
    return path.with_name(f"{path.name}{OUTPUT_SUFFIX}")


def read_records_csv(path: Path) -> RecordTable:
    with path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        raw_headers = next(reader, None)
        if raw_headers is None:
            logger.warning("No header row in %s", path)
            return RecordTable(raw_headers=[], columns=[])

        normalized = [normalize_header(header) for header in raw_headers]
        columns = list(dict.fromkeys(normalized))
        records: list[Record] = []
        for row in reader:
            attrs: dict[str, str | None] = {column: None for column in columns}
            filled: set[str] = set()
            for column, value in zip(normalized, row):
                if column in filled:
                    continue
                attrs[column] = value
                filled.add(column)
            records.append(Record(key=len(records), attributes=attrs))

    logger.info("Loaded %d records with %d columns from %s", len(records), len(columns), path)
    return RecordTable(raw_headers=list(raw_headers), columns=columns, records=records)


def write_annotated_csv(path: Path, table: RecordTable, records: Sequence[Record] | None = None) -> Path:
    """Write ``user_id`` followed by the original columns, in input order."""
    rows = table.records if records is None else records
    normalized = [normalize_header(header) for header in table.raw_headers]
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow([GROUP_ID_COLUMN, *table.raw_headers])
        for record in rows:
            group_id = "" if record.group_id is None else str(record.group_id)
            values = [record.attributes.get(column) for column in normalized]
            writer.writerow([group_id, *("" if value is None else value for value in values)])

    logger.info("Wrote %d records to %s", len(rows), path)
    return path
