"""IReelAssembler adapter: concatenate clips with moviepy into one encode."""

from typing import Callable, List, Tuple

import numpy as np
from moviepy import VideoFileClip, concatenate_videoclips
from moviepy.audio.AudioClip import AudioArrayClip

from news_reels import config
from news_reels.adapters.video import probe_streams
from news_reels.ports.interfaces import IReelAssembler, StreamInfo

AUDIO_FPS = 44100


def silent_track(duration: float, fps: int = AUDIO_FPS) -> AudioArrayClip:
    """Stereo silence of the given length."""
    frames = max(1, int(round(duration * fps)))
    return AudioArrayClip(np.zeros((frames, 2)), fps=fps)


class MoviePyReelAssembler(IReelAssembler):
    """
    Concatenates clips in the order given and re-encodes once to a single
    H.264/AAC profile. Clips without audio get a silent track so every
    segment carries one video and one audio stream; clips without video
    are left out.
    """

    def __init__(
        self,
        size: Tuple[int, int] = (config.VIDEO_WIDTH, config.VIDEO_HEIGHT),
        fps: int = config.FPS,
        prober: Callable[[str], StreamInfo] = probe_streams,
    ):
        self.size = tuple(size)
        self.fps = fps
        self._probe = prober

    def validate_videos(self, video_files: List[str]) -> List[StreamInfo]:
        return [self._probe(path) for path in video_files]

    def _load(self, info: StreamInfo):
        clip = VideoFileClip(info.path)
        if tuple(clip.size) != self.size:
            clip = clip.resized(self.size)
        if not info.has_audio or clip.audio is None:
            clip = clip.with_audio(silent_track(clip.duration))
        return clip

    def merge_videos(self, video_files: List[str], output_file: str) -> str:
        if not video_files:
            raise ValueError("No videos provided to merge.")

        results = self.validate_videos(video_files)
        missing_audio = [r.path for r in results if r.has_video and not r.has_audio]
        if missing_audio:
            print(f"  ⚠️  These files have no audio (padding with silence): {missing_audio}")
        missing_video = [r.path for r in results if not r.has_video]
        if missing_video:
            print(f"  ⚠️  These files have no video stream (skipped): {missing_video}")

        playable = [r for r in results if r.has_video]
        if not playable:
            raise ValueError("No playable videos to merge.")

        clips = []
        try:
            for info in playable:
                clips.append(self._load(info))
            final = concatenate_videoclips(clips, method="compose")
            final.write_videofile(
                output_file,
                fps=self.fps,
                codec="libx264",
                audio_codec="aac",
                audio_bitrate="192k",
                audio_fps=AUDIO_FPS,
                preset="veryfast",
                ffmpeg_params=["-crf", "23"],
                logger=None,
            )
        finally:
            for clip in clips:
                clip.close()
        print(f"  ✅ Videos merged: {output_file}")
        return output_file
