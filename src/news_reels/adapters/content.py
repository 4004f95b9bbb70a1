"""IContentBackend adapter using the Gemini SDK."""

from typing import Optional

import google.generativeai as genai

from news_reels import config
from news_reels.ports.interfaces import IContentBackend


class GeminiContentBackend(IContentBackend):
    """Gemini via google-generativeai; one GenerativeModel per requested model name."""

    def __init__(self, api_key: Optional[str] = None, temperature: float = 0.7):
        self._api_key = api_key if api_key is not None else config.GEMINI_API_KEY
        self._temperature = temperature
        self._configured = False

    def is_configured(self) -> bool:
        return bool((self._api_key or "").strip())

    def generate(self, model: str, prompt: str) -> str:
        if not self.is_configured():
            raise RuntimeError("GEMINI_API_KEY is not set")
        if not self._configured:
            genai.configure(api_key=self._api_key)
            self._configured = True

        response = genai.GenerativeModel(model).generate_content(
            prompt,
            generation_config={"temperature": self._temperature},
        )
        # .text raises ValueError when the candidate was blocked; the fetcher treats it as a failed attempt
        return response.text
