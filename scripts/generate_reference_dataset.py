from __future__ import annotations

import argparse
from pathlib import Path

from record_matcher.datasets import CONTACT_COLUMNS, ReferenceDatasetGenerator, write_dataset_csv


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate synthetic contact dataset with duplicates")
    parser.add_argument("--size", type=int, default=10000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--duplicate-rate", type=float, default=0.15)
    parser.add_argument("--output", type=Path, default=Path("data/reference_contacts.csv"))
    args = parser.parse_args()

    records = ReferenceDatasetGenerator(seed=args.seed).generate(
        columns=CONTACT_COLUMNS,
        size=args.size,
        duplicate_rate=args.duplicate_rate,
    )

    args.output.parent.mkdir(parents=True, exist_ok=True)
    write_dataset_csv(args.output, records, CONTACT_COLUMNS)


if __name__ == "__main__":
    main()
