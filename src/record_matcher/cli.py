from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from record_matcher.config import MatchConfigError, MatchMode
from record_matcher.datasets import CONTACT_COLUMNS, ReferenceDatasetGenerator, write_dataset_csv
from record_matcher.interfaces import MatchPipeline
from record_matcher.models import Record
from record_matcher.runners import LocalMatchPipeline
from record_matcher.schema import FieldTag, RecordSchema
from record_matcher.storage import RecordTable, output_path_for, read_records_csv, write_annotated_csv

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        if args.command == "match":
            match_file(mode=args.mode, input_csv=args.input_csv, output=args.output)
            return 0
        if args.command == "run-test":
            run_test(
                size=args.size,
                duplicate_rate=args.duplicate_rate,
                seed=args.seed,
                mode=args.mode,
                output_dir=args.output_dir,
                input_csv=args.input_csv,
                show_groups=args.show_groups,
            )
            return 0
    except MatchConfigError as exc:
        parser.error(str(exc))
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


def match_file(*, mode: MatchMode | str, input_csv: Path, output: Path | None = None) -> Path:
    """Annotate ``input_csv`` with group ids and write the result next to it."""
    match_mode = MatchMode.parse(mode)
    table = read_records_csv(input_csv)
    annotated = _run_pipeline(table, match_mode)
    output_path = output or output_path_for(input_csv)
    write_annotated_csv(output_path, table, annotated)
    print(f"Wrote output to {output_path}")
    return output_path


def run_test(
    *,
    size: int,
    duplicate_rate: float,
    seed: int,
    mode: MatchMode | str,
    output_dir: Path,
    input_csv: Path | None,
    show_groups: int,
) -> dict[str, object]:
    match_mode = MatchMode.parse(mode)
    output_dir.mkdir(parents=True, exist_ok=True)

    if input_csv is None:
        generated = ReferenceDatasetGenerator(seed=seed).generate(
            columns=CONTACT_COLUMNS,
            size=size,
            duplicate_rate=duplicate_rate,
        )
        dataset_path = write_dataset_csv(output_dir / "test_dataset.csv", generated, CONTACT_COLUMNS)
    else:
        dataset_path = input_csv

    table = read_records_csv(dataset_path)
    annotated = _run_pipeline(table, match_mode)

    annotated_path = write_annotated_csv(output_dir / output_path_for(dataset_path).name, table, annotated)
    summary_path = output_dir / "summary.json"
    summary = _build_summary(
        records=annotated,
        mode=match_mode,
        dataset_path=dataset_path,
        annotated_path=annotated_path,
    )
    _write_json(summary_path, summary)

    print(f"Dataset: {dataset_path}")
    print(f"Annotated: {annotated_path}")
    print(f"Summary: {summary_path}")
    print("---")
    print(f"mode={summary['mode']}")
    print(f"records={summary['record_count']}")
    print(f"groups={summary['group_count']}")
    print(f"grouped_records={summary['grouped_record_count']}")
    print(f"avg_group_size={summary['avg_group_size']}")
    if show_groups > 0:
        print("---")
        print("sample_groups=")
        print(json.dumps(_group_sample_payload(annotated, limit=show_groups), indent=2))
    return summary


def _run_pipeline(table: RecordTable, mode: MatchMode) -> list[Record]:
    schema = RecordSchema.from_columns(table.columns)
    logger.debug(
        "Email columns: %s; phone columns: %s",
        schema.columns_for(FieldTag.EMAIL),
        schema.columns_for(FieldTag.PHONE),
    )
    pipeline: MatchPipeline = LocalMatchPipeline(schema=schema, mode=mode)
    return pipeline.run(table.records)


def _group_sizes(records: list[Record]) -> dict[int, int]:
    sizes: dict[int, int] = {}
    for record in records:
        if record.group_id is not None:
            sizes[record.group_id] = sizes.get(record.group_id, 0) + 1
    return sizes


def _build_summary(
    *,
    records: list[Record],
    mode: MatchMode,
    dataset_path: Path,
    annotated_path: Path,
) -> dict[str, object]:
    group_sizes = list(_group_sizes(records).values())

    return {
        "mode": mode.value,
        "record_count": len(records),
        "group_count": len(group_sizes),
        "grouped_record_count": sum(group_sizes),
        "avg_group_size": round(sum(group_sizes) / len(group_sizes), 3) if group_sizes else 0.0,
        "max_group_size": max(group_sizes) if group_sizes else 0,
        "min_group_size": min(group_sizes) if group_sizes else 0,
        "dataset_path": str(dataset_path),
        "annotated_path": str(annotated_path),
    }


def _group_sample_payload(records: list[Record], limit: int = 10) -> list[dict[str, Any]]:
    members: dict[int, list[Record]] = {}
    for record in records:
        if record.group_id is not None:
            members.setdefault(record.group_id, []).append(record)

    ranked = sorted(members.items(), key=lambda item: (-len(item[1]), item[0]))
    payload: list[dict[str, Any]] = []
    for group_id, group_records in ranked[:limit]:
        payload.append(
            {
                "group_id": group_id,
                "size": len(group_records),
                "records": [
                    {"key": record.key, "attributes": record.attributes} for record in group_records
                ],
            }
        )
    return payload


def _build_parser() -> argparse.ArgumentParser:
    modes = [mode.value for mode in MatchMode]
    parser = argparse.ArgumentParser(
        prog="record-matcher",
        description="Assign shared user ids to CSV rows that share an email or phone",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    subparsers = parser.add_subparsers(dest="command")

    match_parser = subparsers.add_parser("match", help="Annotate a CSV file with user ids")
    match_parser.add_argument("mode", choices=modes)
    match_parser.add_argument("input_csv", type=Path)
    match_parser.add_argument("--output", type=Path, default=None)

    run_test_parser = subparsers.add_parser(
        "run-test",
        help="Generate or load a test dataset, run matching, and output annotated rows + summary",
    )
    run_test_parser.add_argument("--size", type=int, default=2000)
    run_test_parser.add_argument("--duplicate-rate", type=float, default=0.15)
    run_test_parser.add_argument("--seed", type=int, default=42)
    run_test_parser.add_argument("--mode", choices=modes, default=MatchMode.EMAIL_OR_PHONE.value)
    run_test_parser.add_argument("--input-csv", type=Path, default=None)
    run_test_parser.add_argument("--output-dir", type=Path, default=Path("data/cli_output"))
    run_test_parser.add_argument("--show-groups", type=int, default=5)

    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper()), format=_LOG_FORMAT)


def _write_json(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


if __name__ == "__main__":
    sys.exit(main())
