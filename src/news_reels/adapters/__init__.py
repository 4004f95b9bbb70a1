"""
Adapters – concrete implementations of ports.
Every external service is wrapped here; swap one by passing an override
to default_adapters() (tests inject fakes the same way).
"""

from news_reels.adapters.assembler import MoviePyReelAssembler
from news_reels.adapters.content import GeminiContentBackend
from news_reels.adapters.image import YahooImageFetcher
from news_reels.adapters.tts import OpenAIFmSynthesizer
from news_reels.adapters.upload import YouTubeUploader
from news_reels.adapters.video import MoviePyCompositor


def default_adapters(**overrides):
    """
    Build default adapter instances (use news_reels.config).
    Overrides: content_fetcher=..., narrator=..., etc. for testing or another provider.
    """
    from news_reels.application.content import ContentFetcher

    defaults = {
        "content_fetcher": ContentFetcher(GeminiContentBackend()),
        "narrator": OpenAIFmSynthesizer(),
        "illustrations": YahooImageFetcher(),
        "compositor": MoviePyCompositor(),
        "assembler": MoviePyReelAssembler(),
        "uploader": YouTubeUploader(),
    }
    defaults.update(overrides)
    return defaults


__all__ = [
    "GeminiContentBackend",
    "MoviePyCompositor",
    "MoviePyReelAssembler",
    "OpenAIFmSynthesizer",
    "YahooImageFetcher",
    "YouTubeUploader",
    "default_adapters",
]
