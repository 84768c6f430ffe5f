import pytest

from record_matcher.config import MatchConfigError, MatchMode
from record_matcher.models import Record
from record_matcher.schema import FieldTag, RecordSchema
from record_matcher.steps import MatchValueExtractor


def _schema() -> RecordSchema:
    return RecordSchema.from_columns(["firstname", "email1", "email2", "phone1", "work_phone"])


def _record(**attributes: str | None) -> Record:
    return Record(key=0, attributes=dict(attributes))


def test_schema_classifies_columns_by_name() -> None:
    schema = RecordSchema.from_columns(["FirstName", "Email1", "home_PHONE", "email_or_phone"])

    assert schema.columns_for(FieldTag.EMAIL) == ("Email1", "email_or_phone")
    assert schema.columns_for(FieldTag.PHONE) == ("home_PHONE", "email_or_phone")


def test_schema_with_no_matching_columns() -> None:
    schema = RecordSchema.from_columns(["firstname", "zip"])

    assert schema.columns_for(FieldTag.EMAIL) == ()
    assert schema.columns_for(FieldTag.PHONE) == ()


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        ("email", ("a@x.com", "b@x.com")),
        ("phone", ("5551234567", "5559999999")),
        ("email_or_phone", ("a@x.com", "b@x.com", "5551234567", "5559999999")),
    ],
)
def test_extract_by_mode(mode: str, expected: tuple[str, ...]) -> None:
    record = _record(
        firstname="Ann",
        email1="a@x.com",
        email2="b@x.com",
        phone1="5551234567",
        work_phone="5559999999",
    )

    assert MatchValueExtractor(_schema(), mode).extract(record) == expected


def test_extract_discards_absent_empty_and_blank_values() -> None:
    record = _record(firstname="Ann", email1="", email2="   ", phone1=None)
    extractor = MatchValueExtractor(_schema(), MatchMode.EMAIL_OR_PHONE)

    assert extractor.extract(record) == ()


def test_extract_collapses_repeated_values_within_a_record() -> None:
    record = _record(email1="a@x.com", email2="a@x.com")

    assert MatchValueExtractor(_schema(), "email").extract(record) == ("a@x.com",)


def test_unknown_mode_is_rejected_at_construction() -> None:
    with pytest.raises(MatchConfigError, match="Unsupported match mode"):
        MatchValueExtractor(_schema(), "fax")


def test_mode_parse_accepts_enum_and_string() -> None:
    assert MatchMode.parse(MatchMode.PHONE) is MatchMode.PHONE
    assert MatchMode.parse(" Email_Or_Phone ") is MatchMode.EMAIL_OR_PHONE
    assert issubclass(MatchConfigError, ValueError)
