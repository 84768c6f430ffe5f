from record_matcher.runners.local import LocalMatchPipeline

__all__ = ["LocalMatchPipeline"]
