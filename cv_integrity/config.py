"""
Configuration settings for the CV validation engine.

Paths and defaults can be overridden through environment variables
(or a local .env file).
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent

# Schema resource fetched once per process; ships inside the package
BUNDLED_SCHEMA_PATH = _PACKAGE_DIR / "schema" / "cv.schema.json"
SCHEMA_PATH = Path(os.getenv("CV_SCHEMA_PATH", BUNDLED_SCHEMA_PATH))

# Content document checked by the self-check tool, relative to the working directory
CV_PATH = Path(os.getenv("CV_PATH", "data/cv.json"))

# Languages with hand-authored error messages
SUPPORTED_LANGUAGES = ("pt", "es", "en")
DEFAULT_LANGUAGE = os.getenv("CV_DEFAULT_LANGUAGE", "pt")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def get_message_language(document=None, lang: str = None) -> str:
    """Pick the language for messages: explicit, then the document default."""
    if lang:
        return lang
    meta = document.get("meta") if isinstance(document, dict) else None
    if isinstance(meta, dict) and isinstance(meta.get("defaultLanguage"), str) and meta["defaultLanguage"]:
        return meta["defaultLanguage"]
    return DEFAULT_LANGUAGE
