import json
import random
from pathlib import Path

from conftest import FakeAssembler, FakeBackend, FakeIllustrations, FakeNarrator, FakeUploader, make_payload

from news_reels.application.content import ContentFetcher
from news_reels.application.pipeline import ReelPipeline
from news_reels.domain.models import INDIA, WORLD

DATE = "2025-09-22"


def _pipeline(tmp_path, fakes, bookends=(None, None), waits=None, **kwargs):
    intro, outro = bookends
    return ReelPipeline(
        **fakes,
        output_root=tmp_path / "output",
        base_videos={INDIA: "Reel_3.mp4", WORLD: "Reel_4.mp4"},
        intro=intro or str(tmp_path / "missing_intro.mp4"),
        outro=outro or str(tmp_path / "missing_outro.mp4"),
        sleep=(waits.append if waits is not None else (lambda s: None)),
        rng=random.Random(7),
        **kwargs,
    )


def test_end_to_end_two_items_three_languages(tmp_path, fakes, bookends):
    waits = []
    report = _pipeline(tmp_path, fakes, bookends, waits).run(DATE)
    out = tmp_path / "output" / DATE
    intro, outro = bookends

    assert report.segments == 6
    assert len(fakes["narrator"].calls) == 6
    assert sorted(p.name for p in out.glob("audio_*.mp3")) == [
        f"audio_{n}_{lang}.mp3" for n in (1, 2) for lang in ("english", "gujarati", "hindi")
    ]
    assert sorted(p.name for p in out.glob("img*.png")) == ["img1.png", "img2.png"]
    assert len(fakes["compositor"].reels) == 6

    assert report.succeeded
    assert [reel.language for reel in report.reels] == ["gujarati", "hindi", "english"]
    for lang in ("gujarati", "hindi", "english"):
        assert fakes["assembler"].merges[f"final_{lang}_video.mp4"] == [
            intro,
            str(out / f"reel_{lang}1.mp4"),
            str(out / f"reel_{lang}2.mp4"),
            outro,
        ]

    assert len(waits) == 6
    assert all(2.0 <= w <= 5.0 for w in waits)
    assert (out / f"news_{DATE}.txt").exists()


def test_base_video_follows_region(tmp_path, fakes):
    _pipeline(tmp_path, fakes).run(DATE)

    bases = [video for video, _, _ in fakes["compositor"].overlays]
    assert bases == ["Reel_3.mp4"] * 3 + ["Reel_4.mp4"] * 3


def test_captions_are_wrapped_and_narration_uses_description(tmp_path, fakes):
    _pipeline(tmp_path, fakes).run(DATE)

    first = fakes["compositor"].reels[0]
    assert first["title_text"] == "India 1 title in gujarati"
    assert first["audio_file"].endswith("audio_1_gujarati.mp3")
    assert fakes["narrator"].calls[0][0] == "India 1 description in gujarati"


def test_existing_illustration_is_reused(tmp_path, fakes):
    out = tmp_path / "output" / DATE
    out.mkdir(parents=True)
    (out / "img1.png").write_bytes(b"cached")

    _pipeline(tmp_path, fakes).run(DATE)

    queries = [query for query, _ in fakes["illustrations"].calls]
    assert queries == ["World 1 title in gujarati"]
    assert (out / "img1.png").read_bytes() == b"cached"


def test_failed_segment_is_dropped_and_run_continues(tmp_path, fakes):
    fakes["narrator"] = FakeNarrator(fail_on={"audio_1_hindi.mp3"})
    out = tmp_path / "output" / DATE

    report = _pipeline(tmp_path, fakes).run(DATE)

    assert report.clips["hindi"] == [str(out / "reel_hindi2.mp4")]
    assert len(report.clips["english"]) == 2
    assert report.succeeded


def test_missing_illustration_skips_item(tmp_path, fakes):
    fakes["illustrations"] = FakeIllustrations(found=False)

    report = _pipeline(tmp_path, fakes).run(DATE)

    assert fakes["compositor"].overlays == []
    assert all(not reel.ok for reel in report.reels)
    assert not report.succeeded


def test_assembly_failure_is_isolated_per_language(tmp_path, fakes):
    fakes["assembler"] = FakeAssembler(fail_for={"hindi"})

    report = _pipeline(tmp_path, fakes).run(DATE)

    assert report.failed_languages == ["hindi"]
    assert "No playable videos" in next(r.error for r in report.reels if r.language == "hindi")
    assert {r.language for r in report.reels if r.ok} == {"gujarati", "english"}
    assert not report.succeeded


def test_missing_bookends_are_left_out(tmp_path, fakes):
    _pipeline(tmp_path, fakes).run(DATE)

    merged = fakes["assembler"].merges["final_english_video.mp4"]
    assert [Path(p).name for p in merged] == ["reel_english1.mp4", "reel_english2.mp4"]


def test_empty_digest_produces_nothing(tmp_path, fakes):
    fakes["content_fetcher"] = ContentFetcher(FakeBackend(configured=False), models=["m"])

    report = _pipeline(tmp_path, fakes).run(DATE)

    assert report.segments == 0
    assert report.reels == []
    assert not report.succeeded
    assert fakes["narrator"].calls == []


def test_reuse_digest_skips_the_backend(tmp_path, fakes):
    backend = FakeBackend(default=RuntimeError("should not be called"))
    fakes["content_fetcher"] = ContentFetcher(backend, models=["m"])
    out = tmp_path / "output" / DATE
    out.mkdir(parents=True)
    (out / f"news_{DATE}.txt").write_text(json.dumps(make_payload(india=1, world=0)), encoding="utf-8")

    report = _pipeline(tmp_path, fakes).run(DATE, reuse_digest=True)

    assert backend.calls == []
    assert report.segments == 3
    assert report.succeeded


def test_upload_after_assembly(tmp_path, fakes):
    uploader = FakeUploader()
    fakes["uploader"] = uploader

    report = _pipeline(tmp_path, fakes, upload_after=True, publish_delay_minutes=0).run(DATE)

    assert [call["default_language"] for call in uploader.calls] == ["gu", "hi", "en"]
    assert all(call["title"] == "22 Sep Daily News #breakingnews" for call in uploader.calls)
    assert all(Path(call["thumbnail_path"]).exists() for call in uploader.calls)
    assert [r["status"] for r in report.uploads] == ["success"] * 3


def test_no_upload_unless_requested(tmp_path, fakes):
    _pipeline(tmp_path, fakes).run(DATE)
    assert fakes["uploader"].calls == []
