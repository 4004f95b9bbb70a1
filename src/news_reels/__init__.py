"""
News Reels – automated multilingual news reels.

Use from project root:
  from news_reels.application.pipeline import ReelPipeline
  from news_reels.adapters import default_adapters
  pipeline = ReelPipeline(**default_adapters())
  pipeline.run("2025-09-22")

Every external service (Gemini, narration, image search, video toolchain,
YouTube) sits behind a port in news_reels.ports; swap adapters to test or
to change providers.
"""

__version__ = "0.3.0"
