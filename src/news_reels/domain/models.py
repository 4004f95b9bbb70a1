"""Domain models – immutable digest types plus per-run results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

INDIA = "India"
WORLD = "World"


@dataclass(frozen=True)
class Translation:
    """One language rendering of a news item."""
    title: str = ""
    description: str = ""
    why_it_matters: str = ""

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Translation":
        return cls(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            why_it_matters=str(data.get("why_it_matters") or ""),
        )

    def to_payload(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "why_it_matters": self.why_it_matters,
        }


@dataclass(frozen=True)
class NewsItem:
    item_id: int
    translations: Tuple[Tuple[str, Translation], ...]
    is_india: bool = False

    @property
    def languages(self) -> List[str]:
        return [lang for lang, _ in self.translations]

    def translation(self, language: str) -> Optional[Translation]:
        for lang, value in self.translations:
            if lang == language:
                return value
        return None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {lang: t.to_payload() for lang, t in self.translations}
        if self.is_india:
            payload["india"] = True
        return payload


@dataclass(frozen=True)
class LocalizedSegment:
    """One language of one news item – the unit of media work."""
    item_id: int
    language: str
    title: str
    description: str
    is_india: bool

    @property
    def number(self) -> int:
        """1-based index used in output file names."""
        return self.item_id + 1


@dataclass(frozen=True)
class SeoMetadata:
    title: Optional[str] = None
    tags: Optional[str] = None
    hashtags: Optional[str] = None

    @property
    def tag_list(self) -> List[str]:
        if not self.tags:
            return []
        return [t.strip() for t in self.tags.split(",") if t.strip()]


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


@dataclass(frozen=True)
class NewsDigest:
    """Structured news for one date, split into India and World."""
    india: Tuple[NewsItem, ...] = ()
    world: Tuple[NewsItem, ...] = ()
    seo: SeoMetadata = field(default_factory=SeoMetadata)

    @classmethod
    def empty(cls) -> "NewsDigest":
        return cls()

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "NewsDigest":
        """
        Build a digest from the model's JSON object.

        Non-list regions become empty, non-object entries are dropped and
        per-item keys that are not language objects (e.g. "india": true)
        are ignored; an entry left with no language at all is dropped.
        Item ids follow source order, India first.
        """
        items: Dict[str, List[NewsItem]] = {INDIA: [], WORLD: []}
        next_id = 0
        for region in (INDIA, WORLD):
            entries = payload.get(region)
            if not isinstance(entries, list):
                continue
            for entry in entries:
                if not isinstance(entry, dict):
                    continue
                translations = tuple(
                    (lang, Translation.from_payload(value))
                    for lang, value in entry.items()
                    if isinstance(value, dict)
                )
                if not translations:
                    continue
                items[region].append(
                    NewsItem(item_id=next_id, translations=translations, is_india=region == INDIA)
                )
                next_id += 1

        seo = SeoMetadata(
            title=_as_text(payload.get("title")),
            tags=_as_text(payload.get("tags")),
            hashtags=_as_text(payload.get("hashtags")),
        )
        return cls(india=tuple(items[INDIA]), world=tuple(items[WORLD]), seo=seo)

    def to_payload(self) -> Dict[str, Any]:
        return {
            INDIA: [item.to_payload() for item in self.india],
            WORLD: [item.to_payload() for item in self.world],
            "title": self.seo.title,
            "tags": self.seo.tags,
            "hashtags": self.seo.hashtags,
        }

    @property
    def items(self) -> List[NewsItem]:
        return list(self.india) + list(self.world)

    @property
    def is_empty(self) -> bool:
        return not self.india and not self.world

    def languages(self) -> List[str]:
        """Language tags in order of first appearance."""
        seen: List[str] = []
        for item in self.items:
            for lang in item.languages:
                if lang not in seen:
                    seen.append(lang)
        return seen

    def segments(self) -> List[LocalizedSegment]:
        """Flatten into one segment per item and language, in item order."""
        segments = []
        for item in self.items:
            for lang, t in item.translations:
                segments.append(
                    LocalizedSegment(
                        item_id=item.item_id,
                        language=lang,
                        title=t.title,
                        description=t.description,
                        is_india=item.is_india,
                    )
                )
        return segments


@dataclass
class Reel:
    """Outcome of assembling one language's final video."""
    language: str
    clips: List[str] = field(default_factory=list)
    path: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.path is not None and self.error is None


@dataclass
class RunReport:
    date: str
    output_dir: str
    segments: int = 0
    clips: Dict[str, List[str]] = field(default_factory=dict)
    reels: List[Reel] = field(default_factory=list)
    uploads: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.reels) and all(r.ok for r in self.reels)

    @property
    def failed_languages(self) -> List[str]:
        return [r.language for r in self.reels if not r.ok]
