"""
CLI entrypoint. Use from project root:
  news-reels [--date 2025-09-22] [--upload]
  news-reels --upload-only --date 2025-09-22
  python -m news_reels --reuse-digest
"""

import argparse
from datetime import datetime
from typing import List, Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate multilingual daily news reels (SOLID pipeline)"
    )
    parser.add_argument(
        "--date",
        type=str,
        default=datetime.now().strftime("%Y-%m-%d"),
        help="Bulletin date, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--upload",
        action="store_true",
        help="Upload final reels to YouTube after generation",
    )
    parser.add_argument(
        "--upload-only",
        action="store_true",
        help="Skip generation and upload the final_* videos already in the date folder",
    )
    parser.add_argument(
        "--reuse-digest",
        action="store_true",
        help="Reuse news_<date>.txt from a previous run instead of asking the model again",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Do not wait between items",
    )
    return parser


def _upload_only(date: str, uploader) -> int:
    from news_reels import config
    from news_reels.application.content import load_digest
    from news_reels.application.publish import find_final_videos, publish_reels

    output_dir = config.OUTPUT_DIR / date
    videos = find_final_videos(output_dir)
    if not videos:
        print(f"⚠️  No final videos found in {output_dir}")
        return 1
    dump = output_dir / f"news_{date}.txt"
    seo = load_digest(dump).seo if dump.exists() else None
    results = publish_reels(
        videos,
        uploader,
        date,
        seo=seo,
        category_id=config.YOUTUBE_CATEGORY_ID,
        privacy_status=config.YOUTUBE_PRIVACY_STATUS,
        publish_delay_minutes=config.YOUTUBE_PUBLISH_DELAY_MINUTES,
        thumbnail_dir=output_dir,
    )
    return 0 if results and all(r["status"] == "success" for r in results) else 1


def main(argv: Optional[List[str]] = None, adapters: Optional[dict] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        from news_reels import config
        from news_reels.adapters import default_adapters
        from news_reels.application.pipeline import ReelPipeline

        adapters = adapters if adapters is not None else default_adapters()
        if args.upload_only:
            return _upload_only(args.date, adapters["uploader"])

        pipeline = ReelPipeline(
            **adapters,
            upload_after=args.upload or config.YOUTUBE_AUTO_UPLOAD,
            delay_range=(0.0, 0.0) if args.no_delay else (config.REQUEST_DELAY_MIN, config.REQUEST_DELAY_MAX),
        )
        report = pipeline.run(args.date, reuse_digest=args.reuse_digest)
    except Exception as e:
        print(f"❌ Fatal error: {e}")
        return 1

    print("\n" + "=" * 60)
    if report.succeeded:
        print(f"✅ All reels generated in {report.output_dir}")
        return 0
    failed = report.failed_languages
    print(f"❌ Run incomplete. Failed languages: {', '.join(failed) if failed else 'all'}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
