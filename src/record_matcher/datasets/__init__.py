from record_matcher.datasets.profiles import CONTACT_COLUMNS
from record_matcher.datasets.reference import ReferenceDatasetGenerator, write_dataset_csv

__all__ = ["CONTACT_COLUMNS", "ReferenceDatasetGenerator", "write_dataset_csv"]
