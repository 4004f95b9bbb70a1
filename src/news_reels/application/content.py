"""
Content fetcher – asks the content backend for a multilingual digest,
walking an ordered list of models under a retry policy.
Total failure degrades to an empty digest instead of raising.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from news_reels import config
from news_reels.domain.models import NewsDigest
from news_reels.ports.interfaces import IContentBackend
from news_reels.text import clean_model_json


def no_backoff(attempt: int) -> float:
    return 0.0


def exponential_backoff(base: float = 1.0, factor: float = 2.0, cap: float = 30.0) -> Callable[[int], float]:
    """Delay before retry n (1-based): base * factor**(n-1), capped."""
    def backoff(attempt: int) -> float:
        return min(cap, base * factor ** (attempt - 1))
    return backoff


@dataclass
class RetryPolicy:
    """
    How many attempts to make and how long to wait between them.

    max_attempts=None means one attempt per candidate. A larger value
    cycles through the candidates again.
    """
    max_attempts: Optional[int] = None
    backoff: Callable[[int], float] = no_backoff
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def attempts(self, candidates: Sequence[str]) -> Iterator[Tuple[int, str]]:
        if not candidates:
            return
        limit = len(candidates) if self.max_attempts is None else self.max_attempts
        for attempt in range(limit):
            if attempt:
                delay = self.backoff(attempt)
                if delay > 0:
                    self.sleep(delay)
            yield attempt, candidates[attempt % len(candidates)]


def build_prompt(date: str, languages: Sequence[str]) -> str:
    """Prompt for the daily multilingual bulletin, strict JSON only."""
    non_english = [lang.capitalize() for lang in languages if lang != "english"]
    proofread = " and ".join(non_english) if non_english else "all"
    example_item = ",\n".join(
        f'        "{lang}": {{\n'
        f'          "title": "Factual headline in {lang.capitalize()} (around 50 characters)",\n'
        f'          "description": "Concise 2-3 sentence summary in {lang.capitalize()} with concrete, verifiable details",\n'
        f'          "why_it_matters": "Sharp 1-2 sentence analysis in {lang.capitalize()} of the long-term impact"\n'
        f"        }}"
        for lang in languages
    )
    return f"""You are a professional multilingual journalist and an expert geopolitical and economic analyst.
Your task is to prepare a "Daily Knowledge Bulletin" for {date} in valid JSON format, focusing on detailed, non-generic analysis.

**Strict rules**:
1. Insert a call-to-action message at the end of **only one** description (either in the India or the World section).
2. Focus on **detailed, non-generic information** in every field, especially "description" and "why_it_matters".
3. Provide only 4-5 major key events in each section ("India" and "World").
4. News must be serious and knowledgeable: policy, economy, environment, science, technology, health, defence, or international relations.
5. Exclude entertainment, celebrity, lifestyle, and sports.
6. Do not use apostrophes in any field.
7. After generating the {proofread} text, proofread it for spelling, grammar and natural phrasing. It must read as if written by a native speaker.
8. Return only the final valid JSON object with no comments, explanations, or extra text.

The JSON must strictly follow this structure:
{{
  "India": [
    {{
{example_item}
    }}
  ],
  "World": [
    {{
{example_item}
    }}
  ],
  "title": "The single best catchy YouTube Shorts title (45-60 characters) with India and global context, urgency and curiosity hooks, the date ({date}) and 1-2 strong hashtags",
  "tags": "8-12 SEO-friendly, keyword-rich tags (about 250 characters, comma-separated) for India and global news",
  "hashtags": "3-5 relevant hashtags (comma-separated) reflecting urgency and trending topics"
}}"""


def save_digest(digest: NewsDigest, date: str, output_dir) -> Path:
    path = Path(output_dir) / f"news_{date}.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(digest.to_payload(), indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def load_digest(path) -> NewsDigest:
    """Re-read a digest dump written by save_digest."""
    with open(path, encoding="utf-8") as f:
        return NewsDigest.from_payload(json.load(f))


class ContentFetcher:
    """
    Fetches the day's digest from the content backend.
    Models are tried in the given order; the retry policy decides how many
    attempts are made and how long to wait in between.
    """

    def __init__(
        self,
        backend: IContentBackend,
        models: Optional[List[str]] = None,
        retry_policy: Optional[RetryPolicy] = None,
        languages: Optional[List[str]] = None,
        prompt_builder: Callable[[str, Sequence[str]], str] = build_prompt,
    ):
        self._backend = backend
        self._models = list(models if models is not None else config.GEMINI_MODELS)
        self._retry = retry_policy or RetryPolicy()
        self._languages = list(languages or config.NEWS_LANGUAGES)
        self._prompt_builder = prompt_builder

    @property
    def models(self) -> List[str]:
        return list(self._models)

    def fetch(self, date: str, output_dir=None) -> NewsDigest:
        """Return the digest for `date`, or an empty digest when every attempt fails."""
        print(f"📰 Fetching news for {date}...")
        digest = self._fetch(date)
        if output_dir is not None:
            path = save_digest(digest, date, output_dir)
            print(f"  💾 Digest saved: {path}")
        return digest

    def _fetch(self, date: str) -> NewsDigest:
        if not self._backend.is_configured():
            print("⚠️  Content backend is not configured (missing API key)")
            return NewsDigest.empty()

        prompt = self._prompt_builder(date, self._languages)
        last_error: Optional[Exception] = None
        for attempt, model in self._retry.attempts(self._models):
            print(f"  🔄 Attempt {attempt + 1} with model: {model}")
            try:
                digest = self._attempt(model, prompt)
            except Exception as e:
                last_error = e
                print(f"  ❌ Attempt {attempt + 1} failed: {e}")
                continue
            print(f"  ✅ Got {len(digest.india)} India news & {len(digest.world)} World news")
            return digest

        print(f"❌ All retries failed: {last_error}")
        return NewsDigest.empty()

    def _attempt(self, model: str, prompt: str) -> NewsDigest:
        text = (self._backend.generate(model, prompt) or "").strip()
        try:
            parsed = json.loads(clean_model_json(text))
        except json.JSONDecodeError as e:
            raise ValueError(f"model returned invalid JSON: {text[:200]}") from e
        if not isinstance(parsed, dict):
            raise ValueError("model returned JSON that is not an object")

        digest = NewsDigest.from_payload(parsed)
        if digest.is_empty:
            raise ValueError("Empty news arrays")
        return digest
