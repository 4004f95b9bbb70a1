"""Ports (interfaces) – depend on these, implement in adapters."""

from news_reels.ports.interfaces import (
    IContentBackend,
    IIllustrationFetcher,
    INarrationSynthesizer,
    IReelAssembler,
    IUploader,
    IVideoCompositor,
    StreamInfo,
)

__all__ = [
    "IContentBackend",
    "IIllustrationFetcher",
    "INarrationSynthesizer",
    "IReelAssembler",
    "IUploader",
    "IVideoCompositor",
    "StreamInfo",
]
