import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_list(key: str, default: str) -> list:
    return [v.strip() for v in os.getenv(key, default).split(",") if v.strip()]


# Gemini Configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
# Tried in order until one returns a usable digest
GEMINI_MODELS = _env_list(
    "GEMINI_MODELS",
    "gemini-2.5-flash,gemini-2.5-pro,gemini-2.0-flash,gemini-1.5-flash,gemini-1.5-pro",
)

# Languages requested from the model; also the order reels are assembled in
NEWS_LANGUAGES = _env_list("NEWS_LANGUAGES", "gujarati,hindi,english")

# Narration (openai.fm) Configuration
TTS_API_URL = os.getenv("TTS_API_URL", "https://www.openai.fm/api/generate")
TTS_VOICE = os.getenv("TTS_VOICE", "onyx")
TTS_GENERATION_ID = os.getenv("TTS_GENERATION_ID", "67612c8-4975-452f-af3f-d44cca8915e5")
TTS_TIMEOUT = int(os.getenv("TTS_TIMEOUT", "60"))  # seconds

# Style descriptor sent verbatim with every narration request
NARRATION_VIBE = {
    "Voice": "Confident, high-energy, like a breaking-news anchor on speed mode.",
    "Tone": "Sharp, dynamic, and urgent. Captures attention instantly with no downtime.",
    "Pacing": (
        "Fast and continuous; headlines delivered in a machine-gun rhythm, with slightly "
        "slower pacing for secondary details before snapping back to rapid-fire."
    ),
    "Emotion": (
        "Controlled urgency with subtle variation. Urgency dominates, but allow tiny pitch "
        "shifts every few headlines to keep it human and engaging."
    ),
    "Pronunciation": (
        "Very crisp and precise. Emphasize impact words like 'breaking', 'alert', 'urgent', "
        "while letting filler words glide quickly."
    ),
    "Pauses": (
        "Micro-pauses only, about 0.3-0.4s between headlines for breathing space, slightly "
        "longer (0.6s) after big impactful news before resuming speed."
    ),
}

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)

# Illustration (image search) Configuration
IMAGE_SEARCH_URL = os.getenv("IMAGE_SEARCH_URL", "https://in.images.search.yahoo.com/search/images")
IMAGE_CANVAS_SIZE = (970, 950)  # width, height
BLOCKED_IMAGE_HOSTS = _env_list("BLOCKED_IMAGE_HOSTS", "youtube")
IMAGE_TIMEOUT = int(os.getenv("IMAGE_TIMEOUT", "30"))

# Informal rate limiting between items (seconds)
REQUEST_DELAY_MIN = float(os.getenv("REQUEST_DELAY_MIN", "2.0"))
REQUEST_DELAY_MAX = float(os.getenv("REQUEST_DELAY_MAX", "5.0"))

# Video Configuration
FPS = 30
VIDEO_WIDTH = 1080
VIDEO_HEIGHT = 1920  # Vertical format for Shorts/Reels (9:16)
DEFAULT_AUDIO_DURATION = 30  # seconds, used when narration length cannot be probed
DESCRIPTION_LINE_WIDTH = 50

# Assets
ASSETS_DIR = Path(os.getenv("ASSETS_DIR", "assets"))
INTRO_VIDEO = ASSETS_DIR / "REELS" / "Reel_1.mp4"
BASE_VIDEO_INDIA = ASSETS_DIR / "REELS" / "Reel_3.mp4"
BASE_VIDEO_WORLD = ASSETS_DIR / "REELS" / "Reel_4.mp4"
OUTRO_VIDEO = ASSETS_DIR / "REELS" / "Reel_5.mp4"
FONT_FILE = ASSETS_DIR / "font" / "Nirmala-UI.ttf"
FALLBACK_TITLE_FONT = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"
FALLBACK_TEXT_FONT = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"
LOGO_FILE = ASSETS_DIR / "logo.png"

# YouTube Upload Configuration
YOUTUBE_CREDENTIALS_FILE = os.getenv("YOUTUBE_CREDENTIALS_FILE", "client_secret.json")
YOUTUBE_TOKEN_FILE = os.getenv("YOUTUBE_TOKEN_FILE", "token.json")
YOUTUBE_AUTO_UPLOAD = os.getenv("YOUTUBE_AUTO_UPLOAD", "false").lower() == "true"
YOUTUBE_PRIVACY_STATUS = os.getenv("YOUTUBE_PRIVACY_STATUS", "private")  # public, unlisted, private
YOUTUBE_CATEGORY_ID = os.getenv("YOUTUBE_CATEGORY_ID", "25")  # 25 = News & Politics
# Minutes from upload until the video goes public; 0 publishes with YOUTUBE_PRIVACY_STATUS
YOUTUBE_PUBLISH_DELAY_MINUTES = int(os.getenv("YOUTUBE_PUBLISH_DELAY_MINUTES", "0"))

# Output directories
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", "output"))
THUMBNAIL_DIR = Path(os.getenv("THUMBNAIL_DIR", "temp_thumbs"))


def output_dir_for(date: str, root: Path = None) -> Path:
    """Per-date output directory, created on first use."""
    path = Path(root or OUTPUT_DIR) / date
    path.mkdir(parents=True, exist_ok=True)
    return path
