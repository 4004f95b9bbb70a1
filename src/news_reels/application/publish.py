"""
Upload step: find the final reels, render a thumbnail for each language and
hand them to the uploader one at a time.
"""

import re
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from news_reels.adapters.thumbnail import generate_thumbnail
from news_reels.domain.models import SeoMetadata
from news_reels.ports.interfaces import IUploader

FINAL_VIDEO_PATTERN = re.compile(r"^final_([a-zA-Z]+)_.*\.(mp4|mkv|mov|avi)$")

LANGUAGE_CODES = {"english": "en", "hindi": "hi", "gujarati": "gu"}


def find_final_videos(output_dir) -> List[Tuple[str, str]]:
    """(language, path) for every final_<language>_*.mp4 in the directory."""
    folder = Path(output_dir)
    if not folder.is_dir():
        print(f"⚠️  Folder for date not found: {folder}")
        return []
    found = []
    for path in sorted(folder.iterdir()):
        match = FINAL_VIDEO_PATTERN.match(path.name)
        if match:
            found.append((match.group(1), str(path)))
    return found


def publish_time(delay_minutes: int, now: Optional[datetime] = None) -> Optional[str]:
    """RFC 3339 publish time `delay_minutes` from now, or None to publish immediately."""
    if delay_minutes <= 0:
        return None
    now = now or datetime.now(timezone.utc)
    return (now + timedelta(minutes=delay_minutes)).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def build_metadata(date: str, seo: Optional[SeoMetadata]) -> Dict[str, Any]:
    seo = seo or SeoMetadata()
    title = seo.title or f"{date} Daily News Update | #breakingnews #breakingnewsshorts"
    description = "📝 Stay informed with top India & World news in 120 seconds!"
    if seo.hashtags:
        description += f"\n\n{seo.hashtags}"
    tags = seo.tag_list or ["within 24 hours news", "india news today", "breaking news shorts"]
    return {"title": title, "description": description, "tags": tags}


def publish_reels(
    videos: List[Tuple[str, str]],
    uploader: IUploader,
    date: str,
    seo: Optional[SeoMetadata] = None,
    category_id: str = "25",
    privacy_status: str = "private",
    publish_delay_minutes: int = 0,
    thumbnail_dir=None,
    thumbnail_renderer: Callable[..., str] = generate_thumbnail,
) -> List[Dict[str, Any]]:
    """Upload each (language, path); one failure does not stop the rest."""
    metadata = build_metadata(date, seo)
    results = []
    for language, path in videos:
        try:
            thumbnail = thumbnail_renderer(language, output_dir=thumbnail_dir, date=date)
            youtube_data = uploader.upload_video(
                video_path=path,
                title=metadata["title"],
                description=metadata["description"],
                tags=metadata["tags"],
                category_id=category_id,
                privacy_status=privacy_status,
                publish_at=publish_time(publish_delay_minutes),
                default_language=LANGUAGE_CODES.get(language),
                thumbnail_path=thumbnail,
            )
            if not youtube_data:
                raise RuntimeError("upload returned no video id")
            results.append({
                "path": path,
                "language": language,
                "thumbnail": thumbnail,
                "youtube": youtube_data,
                "status": "success",
            })
        except Exception as e:
            print(f"❌ Error processing video {path}: {e}")
            results.append({"path": path, "language": language, "status": "failed", "error": str(e)})
    return results
