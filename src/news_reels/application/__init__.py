"""Application layer – use cases and pipeline orchestration."""

from news_reels.application.content import ContentFetcher, RetryPolicy
from news_reels.application.pipeline import ReelPipeline

__all__ = ["ContentFetcher", "ReelPipeline", "RetryPolicy"]
