"""
Reel pipeline – single responsibility: orchestrate digest → narration → illustration → composite → assembly → optional upload.
Depends only on port interfaces (SOLID – Dependency Inversion).
"""

import random
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from news_reels import config
from news_reels.application.content import ContentFetcher, load_digest
from news_reels.application.publish import find_final_videos, publish_reels
from news_reels.domain.models import INDIA, WORLD, LocalizedSegment, NewsDigest, Reel, RunReport
from news_reels.ports.interfaces import (
    IIllustrationFetcher,
    INarrationSynthesizer,
    IReelAssembler,
    IUploader,
    IVideoCompositor,
)
from news_reels.text import prepare_text, title_width


class ReelPipeline:
    """
    Orchestrates one run for one date.
    All dependencies are injected (ports); no concrete implementations here.

    Segments are produced strictly one at a time; only the per-language
    assembly fans out, and the run waits for every language before reporting.
    """

    def __init__(
        self,
        *,
        content_fetcher: ContentFetcher,
        narrator: INarrationSynthesizer,
        illustrations: IIllustrationFetcher,
        compositor: IVideoCompositor,
        assembler: IReelAssembler,
        uploader: Optional[IUploader] = None,
        upload_after: bool = False,
        output_root=None,
        base_videos: Optional[Dict[str, str]] = None,
        intro=None,
        outro=None,
        languages: Optional[Sequence[str]] = None,
        delay_range: Tuple[float, float] = (config.REQUEST_DELAY_MIN, config.REQUEST_DELAY_MAX),
        sleep: Callable[[float], None] = time.sleep,
        rng=random,
        max_workers: Optional[int] = None,
        category_id: str = config.YOUTUBE_CATEGORY_ID,
        privacy_status: str = config.YOUTUBE_PRIVACY_STATUS,
        publish_delay_minutes: int = config.YOUTUBE_PUBLISH_DELAY_MINUTES,
    ):
        self._content = content_fetcher
        self._narrator = narrator
        self._illustrations = illustrations
        self._compositor = compositor
        self._assembler = assembler
        self._uploader = uploader
        self._upload_after = upload_after
        self._output_root = Path(output_root or config.OUTPUT_DIR)
        self._base_videos = base_videos or {
            INDIA: str(config.BASE_VIDEO_INDIA),
            WORLD: str(config.BASE_VIDEO_WORLD),
        }
        self._intro = str(intro if intro is not None else config.INTRO_VIDEO)
        self._outro = str(outro if outro is not None else config.OUTRO_VIDEO)
        self._languages = list(languages) if languages else None
        self._delay_range = delay_range
        self._sleep = sleep
        self._rng = rng
        self._max_workers = max_workers
        self._category_id = category_id
        self._privacy_status = privacy_status
        self._publish_delay_minutes = publish_delay_minutes

    def run(self, date: str, reuse_digest: bool = False) -> RunReport:
        """Produce every reel for `date`. Returns a report; never raises for per-item failures."""
        print("=" * 60)
        print(f"Generating news reels for {date}...")
        print("=" * 60)

        output_dir = config.output_dir_for(date, self._output_root)
        report = RunReport(date=date, output_dir=str(output_dir))

        print("\n[1/4] Fetching news digest...")
        digest = self._load_digest(date, output_dir, reuse_digest)
        if digest.is_empty:
            print("⚠️  No news available to generate reels. Exiting.")
            return report

        segments = digest.segments()
        report.segments = len(segments)
        languages = self._languages or digest.languages()
        print(f"  {len(digest.items)} items x {len(languages)} languages = {len(segments)} segments")

        print("\n[2/4] Producing segment clips...")
        report.clips = {lang: [] for lang in languages}
        for i, segment in enumerate(segments, 1):
            print(f"\n  [{i}/{len(segments)}] News {segment.number} ({segment.language}): {segment.title[:60]}")
            self._delay()
            try:
                clip = self.produce_segment(segment, output_dir)
            except Exception as e:
                print(f"  ❌ Skipping News {segment.number} ({segment.language}): {e}")
                continue
            report.clips.setdefault(segment.language, []).append(clip)

        print("\n[3/4] Assembling final reels...")
        report.reels = self.assemble_all(report.clips, output_dir)
        for reel in report.reels:
            if reel.ok:
                print(f"  ✅ Final video for {reel.language}: {reel.path}")
            else:
                print(f"  ❌ Final video for {reel.language} failed: {reel.error}")

        if self._upload_after:
            print("\n[4/4] Uploading to YouTube...")
            report.uploads = self._do_upload(date, output_dir, digest, report.reels)
        else:
            print("\n[4/4] Upload skipped")

        return report

    def _load_digest(self, date: str, output_dir: Path, reuse: bool) -> NewsDigest:
        dump = output_dir / f"news_{date}.txt"
        if reuse and dump.exists():
            print(f"  💾 Reusing saved digest: {dump}")
            return load_digest(dump)
        return self._content.fetch(date, output_dir=output_dir)

    def _delay(self) -> None:
        low, high = self._delay_range
        if high <= 0:
            return
        self._sleep(self._rng.uniform(low, high))

    def produce_segment(self, segment: LocalizedSegment, output_dir: Path) -> str:
        """Narration, illustration, frame and caption composites for one segment. Raises on any failure."""
        n, lang = segment.number, segment.language

        audio_path = output_dir / f"audio_{n}_{lang}.mp3"
        print(f"  🎙️ Generating audio for News {n}")
        self._narrator.synthesize(segment.description, str(audio_path))

        image_path = output_dir / f"img{n}.png"
        if image_path.exists():
            print(f"  ✅ Image already exists: {image_path}")
        elif self._illustrations.fetch(segment.title, str(image_path)):
            print(f"  🖼️ Image generated: {image_path}")
        else:
            raise RuntimeError(f"no illustration for News {n}")

        base_video = self._base_videos[INDIA if segment.is_india else WORLD]
        frame_path = output_dir / f"output_{n}_{lang}.mp4"
        self._compositor.overlay_image(base_video, str(image_path), str(frame_path))

        reel_path = output_dir / f"reel_{lang}{n}.mp4"
        self._compositor.generate_reel(
            image_file=str(image_path),
            video_file=str(frame_path),
            audio_file=str(audio_path),
            title_text=prepare_text(segment.title, title_width(lang)),
            desc_text=prepare_text(segment.description, config.DESCRIPTION_LINE_WIDTH),
            output_file=str(reel_path),
        )
        return str(reel_path)

    def _with_bookends(self, clips: List[str]) -> List[str]:
        ordered = list(clips)
        if Path(self._intro).exists():
            ordered.insert(0, self._intro)
        if Path(self._outro).exists():
            ordered.append(self._outro)
        return ordered

    def _assemble(self, language: str, clips: List[str], output_dir: Path) -> Reel:
        ordered = self._with_bookends(clips)
        reel = Reel(language=language, clips=ordered)
        if not clips:
            reel.error = "No clips produced for this language"
            return reel
        output_file = output_dir / f"final_{language}_video.mp4"
        try:
            reel.path = self._assembler.merge_videos(ordered, str(output_file))
        except Exception as e:
            reel.error = str(e)
        return reel

    def assemble_all(self, clips: Dict[str, List[str]], output_dir: Path) -> List[Reel]:
        """One assembly task per language; waits for all of them."""
        if not clips:
            return []
        workers = self._max_workers or len(clips)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(self._assemble, language, language_clips, output_dir)
                for language, language_clips in clips.items()
            ]
            return [future.result() for future in futures]

    def _do_upload(self, date: str, output_dir: Path, digest: NewsDigest, reels: List[Reel]) -> List[dict]:
        if self._uploader is None:
            print("⚠️  No uploader configured; videos are saved locally")
            return []
        videos = [(reel.language, reel.path) for reel in reels if reel.ok]
        if not videos:
            videos = find_final_videos(output_dir)
        results = publish_reels(
            videos,
            self._uploader,
            date,
            seo=digest.seo,
            category_id=self._category_id,
            privacy_status=self._privacy_status,
            publish_delay_minutes=self._publish_delay_minutes,
            thumbnail_dir=output_dir,
        )
        for result in results:
            if result["status"] == "success":
                print(f"\n🎉 {result['language']} published: {result['youtube'].get('url', '')}")
            else:
                print(f"\n⚠️  {result['language']} upload failed, video is saved locally")
        return results
