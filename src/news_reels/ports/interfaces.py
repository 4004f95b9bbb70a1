"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the application layer depends only on these abstractions.
Tests inject fakes for every external service through the same ports.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class StreamInfo:
    """What a probe found in a media file."""
    path: str
    has_video: bool
    has_audio: bool
    duration: Optional[float] = None


class IContentBackend(ABC):
    """Generative-text backend that answers a prompt with free text."""

    def is_configured(self) -> bool:
        """False when the backend cannot possibly answer (e.g. no API key)."""
        return True

    @abstractmethod
    def generate(self, model: str, prompt: str) -> str:
        """Return the raw text produced by `model` for `prompt`."""
        pass


class INarrationSynthesizer(ABC):
    """Text-to-speech for a single segment."""

    @abstractmethod
    def synthesize(
        self,
        text: str,
        output_path: str,
        vibe: Optional[Dict[str, str]] = None,
    ) -> str:
        """Write audio for `text` to `output_path`; raise on failure."""
        pass


class IIllustrationFetcher(ABC):
    """Finds and stores one illustration for a topic."""

    @abstractmethod
    def fetch(self, query: str, save_path: str) -> Optional[str]:
        """Save an image for `query`; return the path or None when nothing usable was found."""
        pass


class IVideoCompositor(ABC):
    """Two-stage compositing of one segment's clip."""

    @abstractmethod
    def overlay_image(self, video_file: str, image_file: str, output_file: str) -> str:
        """Stage one: still image over the base video."""
        pass

    @abstractmethod
    def generate_reel(
        self,
        image_file: str,
        video_file: str,
        audio_file: str,
        title_text: str,
        desc_text: str,
        output_file: str,
    ) -> str:
        """Stage two: animated captions + narration, cut to narration length."""
        pass


class IReelAssembler(ABC):
    """Concatenates clips into one final video."""

    @abstractmethod
    def merge_videos(self, video_files: List[str], output_file: str) -> str:
        """Concatenate in the given order; raise when nothing can be merged."""
        pass


class IUploader(ABC):
    """Publish video (e.g. YouTube)."""

    @abstractmethod
    def upload_video(
        self,
        video_path: str,
        title: str,
        description: str = "",
        tags: Optional[List[str]] = None,
        category_id: str = "25",
        privacy_status: str = "private",
        publish_at: Optional[str] = None,
        default_language: Optional[str] = None,
        thumbnail_path: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Upload video; return result dict with e.g. 'video_id' and 'url', or None."""
        pass
