"""INarrationSynthesizer adapter for the openai.fm speech endpoint."""

import json
import os
from typing import Dict, Optional

import requests

from news_reels import config
from news_reels.ports.interfaces import INarrationSynthesizer


class OpenAIFmSynthesizer(INarrationSynthesizer):
    """
    GET-style TTS: text and style descriptor travel as query parameters,
    the response body is the audio file.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        voice: Optional[str] = None,
        vibe: Optional[Dict[str, str]] = None,
        generation_id: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url or config.TTS_API_URL
        self.voice = voice or config.TTS_VOICE
        self.vibe = vibe if vibe is not None else config.NARRATION_VIBE
        self.generation_id = generation_id or config.TTS_GENERATION_ID
        self.timeout = timeout or config.TTS_TIMEOUT
        self._http = session or requests

    def build_params(self, text: str, vibe: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        return {
            "input": text,
            "prompt": json.dumps(vibe if vibe is not None else self.vibe, ensure_ascii=False),
            "voice": self.voice,
            "generation": self.generation_id,
        }

    def synthesize(
        self,
        text: str,
        output_path: str,
        vibe: Optional[Dict[str, str]] = None,
    ) -> str:
        try:
            response = self._http.get(
                self.api_url,
                params=self.build_params(text, vibe),
                headers={"User-Agent": config.BROWSER_USER_AGENT},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            print(f"  ❌ Failed TTS: {e}")
            raise

        os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
        with open(output_path, "wb") as f:
            f.write(response.content)
        print(f"  ✅ Audio saved: {output_path}")
        return output_path
