"""IIllustrationFetcher adapter scraping an image search results page."""

import io
import os
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import requests
from bs4 import BeautifulSoup
from PIL import Image, ImageOps

from news_reels import config
from news_reels.ports.interfaces import IIllustrationFetcher


@dataclass(frozen=True)
class ImageResult:
    url: str
    label: str = ""


def clean_image_url(url: str) -> str:
    """Drop the query string (?pid=..., size hints) from a thumbnail URL."""
    return url.split("?")[0]


def fit_to_canvas(image: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """Scale into `size` keeping aspect ratio, centred on a transparent canvas."""
    image = image.convert("RGBA")
    fitted = ImageOps.contain(image, size)
    canvas = Image.new("RGBA", size, (0, 0, 0, 0))
    offset = ((size[0] - fitted.width) // 2, (size[1] - fitted.height) // 2)
    canvas.paste(fitted, offset)
    return canvas


class YahooImageFetcher(IIllustrationFetcher):
    """
    First-match-wins image scraping: the first result whose source is not a
    blocked host is downloaded and normalized to a fixed canvas.
    """

    def __init__(
        self,
        search_url: Optional[str] = None,
        blocked_hosts: Optional[Sequence[str]] = None,
        canvas_size: Tuple[int, int] = config.IMAGE_CANVAS_SIZE,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        self.search_url = search_url or config.IMAGE_SEARCH_URL
        hosts = blocked_hosts if blocked_hosts is not None else config.BLOCKED_IMAGE_HOSTS
        self.blocked_hosts = [h.lower() for h in hosts]
        self.canvas_size = canvas_size
        self.timeout = timeout or config.IMAGE_TIMEOUT
        self._http = session or requests
        self._headers = {"User-Agent": config.BROWSER_USER_AGENT}

    def _is_blocked(self, source: str) -> bool:
        source = source.lower()
        return any(host in source for host in self.blocked_hosts)

    def find_first_image(self, html: str) -> Optional[ImageResult]:
        soup = BeautifulSoup(html, "html.parser")
        for i, entry in enumerate(soup.select("li.ld"), 1):
            img = entry.find("img")
            src = img and (img.get("data-src") or img.get("src"))
            if not src:
                continue
            if self._is_blocked(entry.get("data") or ""):
                print(f"  ❌ Skipped (blocked source) #{i}")
                continue
            link = entry.select_one("a.img")
            label = link.get("aria-label", "") if link else ""
            return ImageResult(url=clean_image_url(src), label=label)
        return None

    def fetch(self, query: str, save_path: str) -> Optional[str]:
        try:
            response = self._http.get(
                self.search_url,
                params={"p": query},
                headers=self._headers,
                timeout=self.timeout,
            )
            response.raise_for_status()

            result = self.find_first_image(response.text)
            if result is None:
                print(f"  ⚠️  No valid images to download for: {query[:60]}")
                return None
            print(f"  ✅ First valid image found: {result.url[:80]}")

            image_response = self._http.get(result.url, headers=self._headers, timeout=self.timeout)
            image_response.raise_for_status()
            with Image.open(io.BytesIO(image_response.content)) as image:
                canvas = fit_to_canvas(image, self.canvas_size)

            os.makedirs(os.path.dirname(os.path.abspath(save_path)), exist_ok=True)
            canvas.save(save_path, format="PNG")
            print(f"  💾 Image saved as {save_path}")
            return save_path
        except (requests.RequestException, OSError) as e:
            print(f"  ❌ Error fetching image: {e}")
            return None
