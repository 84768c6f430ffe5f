from record_matcher.datasets import CONTACT_COLUMNS, ReferenceDatasetGenerator
from record_matcher.runners import LocalMatchPipeline
from record_matcher.schema import RecordSchema
from record_matcher.storage import normalize_header


def test_generator_is_deterministic_for_a_seed() -> None:
    first = ReferenceDatasetGenerator(seed=3).generate(columns=CONTACT_COLUMNS, size=50)
    second = ReferenceDatasetGenerator(seed=3).generate(columns=CONTACT_COLUMNS, size=50)

    assert [r.attributes for r in first] == [r.attributes for r in second]
    assert [r.key for r in first] == list(range(50))


def test_generator_handles_non_positive_size() -> None:
    assert ReferenceDatasetGenerator().generate(columns=CONTACT_COLUMNS, size=0) == []


def test_generated_duplicates_are_grouped() -> None:
    records = ReferenceDatasetGenerator(seed=11).generate(
        columns=CONTACT_COLUMNS,
        size=100,
        duplicate_rate=0.3,
    )
    for record in records:
        record.attributes = {normalize_header(k): v for k, v in record.attributes.items()}
    columns = [normalize_header(column) for column in CONTACT_COLUMNS]

    annotated = LocalMatchPipeline(schema=RecordSchema.from_columns(columns), mode="email_or_phone").run(records)
    grouped = [record for record in annotated if record.group_id is not None]

    # 70 unique profiles, 30 duplicates of them: every duplicate lands in a group with its source.
    assert len(grouped) >= 30 + 1
    assert max(record.group_id for record in grouped) <= 30
