# This project was developed with assistance from AI tools.
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _resolve_path(env_var: str, default: str, base_dir: Path) -> str:
    """Resolve a file path, making relative paths absolute from base_dir."""
    path = os.getenv(env_var, default)
    if not path or os.path.isabs(path):
        return path
    return str(base_dir / path)


def _urls(env_var: str, default: str = "") -> tuple[str, ...]:
    """Comma-separated list of URLs, tried in order."""
    raw = os.getenv(env_var, default)
    return tuple(url.strip() for url in raw.split(",") if url.strip())


class Config:
    """Application configuration."""

    # ==========================================================================
    # OpenAI / LLM Settings
    # ==========================================================================
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    # LLM parameters
    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.0"))
    LLM_MAX_RETRIES: int = int(os.getenv("LLM_MAX_RETRIES", "3"))
    LLM_RETRY_DELAY: float = float(os.getenv("LLM_RETRY_DELAY", "1.0"))

    # ==========================================================================
    # Text Processing Limits
    # ==========================================================================
    # Maximum characters of source-PDF text sent to the LLM for extraction
    EXTRACTION_MAX_CHARS: int = int(os.getenv("EXTRACTION_MAX_CHARS", "30000"))

    # ==========================================================================
    # OCR Settings (for scanned PDFs)
    # ==========================================================================
    # Fill pages without a usable text layer with docTR OCR
    OCR_ENABLED: bool = os.getenv("OCR_ENABLED", "true").lower() in ("true", "1", "yes")

    # Pages with fewer characters than this are treated as scans
    OCR_MIN_CHARS_PER_PAGE: int = int(os.getenv("OCR_MIN_CHARS_PER_PAGE", "50"))

    # Minimum free VRAM (GB) required to use GPU for OCR
    OCR_MIN_FREE_VRAM_GB: float = float(os.getenv("OCR_MIN_FREE_VRAM_GB", "3.0"))

    # ==========================================================================
    # Rendering Assets
    # ==========================================================================
    BASE_DIR: Path = Path(__file__).parent

    TEMPLATE_VERSION: str = os.getenv("TEMPLATE_VERSION", "51-1")
    # Leave both unset to render onto fresh pages instead of a template
    TEMPLATE_PATH: str = _resolve_path("TEMPLATE_PATH", "", BASE_DIR)
    TEMPLATE_URLS: tuple[str, ...] = _urls("TEMPLATE_URL")

    FONT_NAME: str = os.getenv("FONT_NAME", "NotoSansJP")
    FONT_PATH: str = _resolve_path("FONT_PATH", "assets/NotoSansJP-Regular.ttf", BASE_DIR)
    FONT_URLS: tuple[str, ...] = _urls(
        "FONT_URL",
        "https://raw.githubusercontent.com/google/fonts/main/ofl/notosansjp/NotoSansJP%5Bwght%5D.ttf",
    )

    # "line" draws checkmarks as strokes; "glyph" uses the font's ✓ when it has one
    MARK_STYLE: str = os.getenv("MARK_STYLE", "line")

    ASSET_TIMEOUT: float = float(os.getenv("ASSET_TIMEOUT", "30"))

    # ==========================================================================
    # Hazard Lookup
    # ==========================================================================
    GEOCODER_URL: str = os.getenv(
        "GEOCODER_URL", "https://msearch.gsi.go.jp/address-search/AddressSearch"
    )
    GEOCODER_TIMEOUT: float = float(os.getenv("GEOCODER_TIMEOUT", "10"))

    # ==========================================================================
    # Agency Preset
    # ==========================================================================
    # JSON file with the agency's own broker / officer / guarantee association
    AGENCY_PRESET_PATH: str = _resolve_path("AGENCY_PRESET_PATH", "", BASE_DIR)

    # ==========================================================================
    # Directory Paths and Storage
    # ==========================================================================
    OUTPUT_DIR: Path = Path(os.getenv("OUTPUT_DIR", "./output"))

    # Database path (relative paths resolved from BASE_DIR)
    EXTRACTION_CACHE_DB_PATH: str = _resolve_path("EXTRACTION_CACHE_DB_PATH", ".extraction_cache.db", BASE_DIR)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration required for extraction."""
        if not cls.OPENAI_API_KEY:
            raise ValueError("OPENAI_API_KEY is required. Set it in .env file.")

        cls.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)


config = Config()
