from record_matcher.steps.cleanup import FunctionalCleaner, normalize_email, normalize_phone
from record_matcher.steps.clustering import SharedValueClusterer
from record_matcher.steps.disjoint_set import DisjointSet
from record_matcher.steps.extraction import MatchValueExtractor

__all__ = [
    "FunctionalCleaner",
    "normalize_email",
    "normalize_phone",
    "SharedValueClusterer",
    "DisjointSet",
    "MatchValueExtractor",
]
