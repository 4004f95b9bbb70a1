"""Per-language thumbnail card for uploaded reels."""

import os
from datetime import datetime
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from news_reels import config

WIDTH, HEIGHT = 1080, 1920
BACKGROUND = "#222239"
ACCENT = "#d71e1f"
FOOTER = "#9fb6da"

LANGUAGE_NAMES = {
    "english": "English",
    "hindi": "Hindi",
    "gujarati": "Gujarati",
    "en": "English",
    "hi": "Hindi",
    "gu": "Gujarati",
}


def _font(size: int, bold: bool = False):
    path = config.FALLBACK_TITLE_FONT if bold else config.FALLBACK_TEXT_FONT
    try:
        return ImageFont.truetype(path, size)
    except OSError:
        return ImageFont.load_default()


def _wrap(draw: ImageDraw.ImageDraw, text: str, font, max_width: int) -> list:
    lines, line = [], ""
    for word in text.split(" "):
        candidate = f"{line} {word}".strip()
        if line and draw.textlength(candidate, font=font) > max_width:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


def generate_thumbnail(
    language: str,
    output_dir=None,
    date: Optional[str] = None,
    logo_path=None,
) -> str:
    """Render thumb_<language>.png and return its path."""
    date = date or datetime.now().strftime("%Y-%m-%d")
    logo_path = logo_path or config.LOGO_FILE

    img = Image.new("RGB", (WIDTH, HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(img)

    if logo_path and os.path.exists(logo_path):
        with Image.open(logo_path) as logo:
            logo = logo.convert("RGBA").resize((1000, 800))
            img.paste(logo, ((WIDTH - 1000) // 2, 50), logo)

    draw.rounded_rectangle((60, 1000, WIDTH - 60, 1720), radius=28, fill="white")
    draw.rounded_rectangle((60, 992, 88, 1728), radius=8, fill=ACCENT)

    headline_font = _font(64, bold=True)
    y = 1100
    for line in _wrap(draw, f"{date} | Daily News Update | News Shorts", headline_font, WIDTH - 200):
        draw.text((120, y), line, fill="black", font=headline_font)
        y += 70

    draw.text((120, 1290), "Top headlines & quick updates", fill="black", font=_font(42))
    draw.text((120, 1390), LANGUAGE_NAMES.get(language, language), fill=ACCENT, font=_font(50, bold=True))
    footer = "New episode | Within 24 Hours News"
    footer_font = _font(30)
    footer_width = draw.textlength(footer, font=footer_font)
    draw.text((WIDTH - 72 - footer_width, HEIGHT - 84), footer, fill=FOOTER, font=footer_font)

    output_dir = output_dir or config.THUMBNAIL_DIR
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"thumb_{language}.png")
    img.save(path)
    return path
