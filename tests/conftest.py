import json
from pathlib import Path

import pytest
import requests

from news_reels.application.content import ContentFetcher
from news_reels.ports.interfaces import (
    IContentBackend,
    IIllustrationFetcher,
    INarrationSynthesizer,
    IReelAssembler,
    IUploader,
    IVideoCompositor,
)

LANGUAGES = ["gujarati", "hindi", "english"]


def make_item(label, languages=LANGUAGES, india=False):
    item = {
        lang: {
            "title": f"{label} title in {lang}",
            "description": f"{label} description in {lang}",
            "why_it_matters": f"{label} matters in {lang}",
        }
        for lang in languages
    }
    if india:
        item["india"] = True
    return item


def make_payload(india=1, world=1):
    return {
        "India": [make_item(f"India {i + 1}", india=True) for i in range(india)],
        "World": [make_item(f"World {i + 1}") for i in range(world)],
        "title": "22 Sep Daily News #breakingnews",
        "tags": "india news, world news, breaking news",
        "hashtags": "#news, #india",
    }


class FakeBackend(IContentBackend):
    """Replies per model: a string is returned, an exception is raised."""

    def __init__(self, replies=None, default=None, configured=True):
        self.replies = replies or {}
        self.default = default
        self.configured = configured
        self.calls = []

    def is_configured(self):
        return self.configured

    def generate(self, model, prompt):
        self.calls.append(model)
        reply = self.replies.get(model, self.default)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeNarrator(INarrationSynthesizer):
    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.calls = []

    def synthesize(self, text, output_path, vibe=None):
        self.calls.append((text, output_path))
        if Path(output_path).name in self.fail_on:
            raise requests.Timeout("narration timed out")
        Path(output_path).write_bytes(b"ID3fake")
        return output_path


class FakeIllustrations(IIllustrationFetcher):
    def __init__(self, found=True):
        self.found = found
        self.calls = []

    def fetch(self, query, save_path):
        self.calls.append((query, save_path))
        if not self.found:
            return None
        Path(save_path).write_bytes(b"\x89PNG fake")
        return save_path


class FakeCompositor(IVideoCompositor):
    def __init__(self):
        self.overlays = []
        self.reels = []

    def overlay_image(self, video_file, image_file, output_file):
        self.overlays.append((video_file, image_file, output_file))
        Path(output_file).write_bytes(b"frame")
        return output_file

    def generate_reel(self, image_file, video_file, audio_file, title_text, desc_text, output_file):
        self.reels.append({
            "image_file": image_file,
            "video_file": video_file,
            "audio_file": audio_file,
            "title_text": title_text,
            "desc_text": desc_text,
            "output_file": output_file,
        })
        Path(output_file).write_bytes(b"reel")
        return output_file


class FakeAssembler(IReelAssembler):
    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.merges = {}

    def merge_videos(self, video_files, output_file):
        name = Path(output_file).name
        if any(f"final_{lang}_" in name for lang in self.fail_for):
            raise ValueError("No playable videos to merge.")
        if not video_files:
            raise ValueError("No videos provided to merge.")
        self.merges[name] = list(video_files)
        Path(output_file).write_bytes(b"final")
        return output_file


class FakeUploader(IUploader):
    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.calls = []

    def upload_video(self, video_path, title, description="", tags=None, category_id="25",
                     privacy_status="private", publish_at=None, default_language=None,
                     thumbnail_path=None):
        self.calls.append({
            "video_path": video_path,
            "title": title,
            "tags": tags,
            "category_id": category_id,
            "publish_at": publish_at,
            "default_language": default_language,
            "thumbnail_path": thumbnail_path,
        })
        if any(lang in Path(video_path).name for lang in self.fail_for):
            return None
        return {"video_id": "abc123", "url": "https://www.youtube.com/watch?v=abc123"}


class FakeResponse:
    def __init__(self, content=b"", text="", status_code=200):
        self.content = content
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class FakeSession:
    """Answers GETs from a queue; an exception in the queue is raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def payload():
    return make_payload()


@pytest.fixture
def fakes(payload):
    backend = FakeBackend(default=json.dumps(payload, ensure_ascii=False))
    return {
        "content_fetcher": ContentFetcher(backend, models=["model-a"]),
        "narrator": FakeNarrator(),
        "illustrations": FakeIllustrations(),
        "compositor": FakeCompositor(),
        "assembler": FakeAssembler(),
        "uploader": FakeUploader(),
    }


@pytest.fixture
def bookends(tmp_path):
    assets = tmp_path / "assets"
    assets.mkdir()
    intro = assets / "intro.mp4"
    outro = assets / "outro.mp4"
    intro.write_bytes(b"intro")
    outro.write_bytes(b"outro")
    return str(intro), str(outro)
