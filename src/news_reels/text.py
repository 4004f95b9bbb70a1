"""Text helpers: recover JSON from model output and wrap caption text."""

import re
import textwrap

_LEADING_FENCE = re.compile(r"^```(?:json)?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```$")

TITLE_WIDTHS = {"english": 40, "gujarati": 36}
DEFAULT_TITLE_WIDTH = 38


def clean_model_json(text: str) -> str:
    """
    Strip Markdown fences and stray prose around a JSON object.

    Returns "{}" for empty input. A fenced payload and its unfenced
    equivalent produce the same string.
    """
    if not text:
        return "{}"
    cleaned = text.strip()
    cleaned = _LEADING_FENCE.sub("", cleaned)
    cleaned = _TRAILING_FENCE.sub("", cleaned)

    first_curly = cleaned.find("{")
    last_curly = cleaned.rfind("}")
    if first_curly != -1 and last_curly != -1:
        cleaned = cleaned[first_curly:last_curly + 1]
    return cleaned.strip()


def prepare_text(text: str, max_line_length: int = 45) -> str:
    """Greedy word wrap; words longer than the width get a line of their own."""
    lines = textwrap.wrap(
        text or "",
        width=max_line_length,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return "\n".join(lines)


def title_width(language: str) -> int:
    return TITLE_WIDTHS.get(language, DEFAULT_TITLE_WIDTH)
