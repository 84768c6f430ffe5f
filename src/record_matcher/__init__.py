"""Record matching by shared email and phone values."""

from record_matcher.config import MatchConfigError, MatchMode
from record_matcher.models import Group, Record
from record_matcher.schema import FieldTag, RecordSchema

__all__ = ["Group", "Record", "MatchConfigError", "MatchMode", "FieldTag", "RecordSchema"]
