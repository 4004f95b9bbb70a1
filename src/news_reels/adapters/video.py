"""IVideoCompositor adapter built on moviepy (ffmpeg underneath)."""

import os
from typing import Callable, List, Optional, Tuple

from moviepy import AudioFileClip, CompositeAudioClip, CompositeVideoClip, ImageClip, TextClip, VideoFileClip, vfx
from moviepy.video.io.ffmpeg_reader import ffmpeg_parse_infos

from news_reels import config
from news_reels.ports.interfaces import IVideoCompositor, StreamInfo

IMAGE_POSITION = (50, 50)  # stage one overlay
BANNER_SIZE = (1080, 800)  # stage two illustration band
IMAGE_FADE = 1.0
TEXT_X = 60
TITLE_Y = 1190
DESC_Y = 1390
SLIDE_DURATION = 0.8
TITLE_START = 0.0
DESC_START = 0.8


def probe_streams(path: str) -> StreamInfo:
    """Report which streams a media file carries; unreadable files have none."""
    try:
        infos = ffmpeg_parse_infos(path)
    except (OSError, KeyError, IndexError) as e:
        print(f"  ⚠️  Could not probe {path}: {e}")
        return StreamInfo(path=path, has_video=False, has_audio=False)
    return StreamInfo(
        path=path,
        has_video=bool(infos.get("video_found")),
        has_audio=bool(infos.get("audio_found")),
        duration=infos.get("duration"),
    )


def probe_duration(path: str, default: float = config.DEFAULT_AUDIO_DURATION) -> float:
    duration = probe_streams(path).duration
    return duration if duration else default


def resolve_font(preferred, fallback: str) -> Optional[str]:
    """Preferred font, else a system font, else None (Pillow's default font)."""
    for candidate in (preferred, fallback):
        if candidate and os.path.exists(candidate):
            return str(candidate)
    return None


def slide_in(target_x: int, y: int, text_width: int, duration: float = SLIDE_DURATION) -> Callable[[float], Tuple[int, int]]:
    """Position function: enter from beyond the left edge, settle at target_x."""
    def position(t: float) -> Tuple[int, int]:
        if t < duration:
            return (int(-text_width + (target_x + text_width) * (t / duration)), y)
        return (target_x, y)
    return position


def fit_audio(audio, duration: float):
    """Cut or pad `audio` to exactly `duration` seconds; padding is silence."""
    if audio.duration > duration:
        return audio.subclipped(0, duration)
    if audio.duration < duration:
        return CompositeAudioClip([audio]).with_duration(duration)
    return audio


class MoviePyCompositor(IVideoCompositor):
    """Stage one (image over base video) and stage two (captions + narration)."""

    def __init__(
        self,
        title_font=None,
        text_font=None,
        fps: int = config.FPS,
        default_duration: float = config.DEFAULT_AUDIO_DURATION,
    ):
        self.title_font = resolve_font(title_font or config.FONT_FILE, config.FALLBACK_TITLE_FONT)
        self.text_font = resolve_font(text_font or config.FONT_FILE, config.FALLBACK_TEXT_FONT)
        self.fps = fps
        self.default_duration = default_duration

    def overlay_image(self, video_file: str, image_file: str, output_file: str) -> str:
        if not video_file or not image_file or not output_file:
            raise ValueError("Missing file path for overlay")

        base = VideoFileClip(video_file)
        try:
            image = (
                ImageClip(image_file)
                .with_duration(base.duration)
                .with_position(IMAGE_POSITION)
            )
            # The base track's audio, if any, carries over through the composite
            composite = CompositeVideoClip([base, image], size=base.size)
            composite.write_videofile(
                output_file,
                fps=base.fps or self.fps,
                codec="libx264",
                audio_codec="aac",
                ffmpeg_params=["-pix_fmt", "yuv420p"],
                logger=None,
            )
        finally:
            base.close()
        return output_file

    def _text_layers(
        self,
        text: str,
        font: Optional[str],
        font_size: int,
        color: str,
        y: int,
        start: float,
        duration: float,
        shadow_offset: int,
        line_spacing: int,
    ) -> List:
        """Text plus a drop shadow, both sliding in from the left starting at `start`."""
        layers = []
        for fill, dx in (("black", shadow_offset), (color, 0)):
            clip = TextClip(
                font=font,
                text=text,
                font_size=font_size,
                color=fill,
                interline=line_spacing,
                method="label",
                duration=max(duration - start, 0.1),
            )
            layers.append(
                clip.with_start(start)
                .with_position(slide_in(TEXT_X + dx, y + dx, clip.w))
                .with_effects([vfx.CrossFadeIn(SLIDE_DURATION)])
            )
        return layers

    def generate_reel(
        self,
        image_file: str,
        video_file: str,
        audio_file: str,
        title_text: str,
        desc_text: str,
        output_file: str,
    ) -> str:
        duration = max(1, round(probe_duration(audio_file, self.default_duration)))
        print(f"  🎵 Audio duration: {duration}s")

        base = narration = None
        try:
            base = VideoFileClip(video_file)
            narration = AudioFileClip(audio_file)
            background = base
            if base.duration < duration:
                background = background.with_effects([vfx.Loop(duration=duration)])
            background = background.subclipped(0, duration)

            banner = (
                ImageClip(image_file)
                .resized(BANNER_SIZE)
                .with_duration(duration)
                .with_position((0, 0))
                .with_effects([vfx.CrossFadeIn(IMAGE_FADE), vfx.CrossFadeOut(IMAGE_FADE)])
            )
            layers = [background, banner]
            layers += self._text_layers(
                title_text, self.title_font, 50, "white", TITLE_Y, TITLE_START, duration,
                shadow_offset=2, line_spacing=15,
            )
            layers += self._text_layers(
                desc_text, self.text_font, 36, "yellow", DESC_Y, DESC_START, duration,
                shadow_offset=1, line_spacing=16,
            )

            final = (
                CompositeVideoClip(layers, size=base.size)
                .with_audio(fit_audio(narration, duration))
                .with_duration(duration)
            )
            final.write_videofile(
                output_file,
                fps=base.fps or self.fps,
                codec="libx264",
                audio_codec="aac",
                preset="medium",
                ffmpeg_params=["-crf", "18"],
                logger=None,
            )
        finally:
            for clip in (narration, base):
                if clip is not None:
                    clip.close()
        print(f"  ✅ Reel generated: {output_file}")
        return output_file
