"""Domain models and value objects."""

from news_reels.domain.models import (
    INDIA,
    WORLD,
    LocalizedSegment,
    NewsDigest,
    NewsItem,
    Reel,
    RunReport,
    SeoMetadata,
    Translation,
)

__all__ = [
    "INDIA",
    "WORLD",
    "LocalizedSegment",
    "NewsDigest",
    "NewsItem",
    "Reel",
    "RunReport",
    "SeoMetadata",
    "Translation",
]
