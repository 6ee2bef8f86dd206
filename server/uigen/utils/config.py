# uigen/utils/config.py
import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

logger = logging.getLogger(__name__)

# Gemini endpoint + fixed decoding parameters
GEMINI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models"
GEMINI_MODEL = "gemini-1.5-flash"
GENERATION_CONFIG = {
    "temperature": 0.3,
    "maxOutputTokens": 8192,
    "topP": 0.8,
    "topK": 10,
}

# Generated artifact location (relative to project root)
OUTPUT_SUBDIR = "app"
OUTPUT_FILENAME = "GeneratedUI.tsx"

# Store the generated component is wired to
STORE_HOOK = "useFuyouStore"
STORE_MODULE = "@/store/fuyouStore"

LOG_DIR = os.environ.get("AI_BACKEND_LOG_DIR", "./ai_backend_logs")
LOG_LEVEL = os.environ.get("UIGEN_LOG_LEVEL", "INFO")


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.environ.get(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> Optional[float]:
    val = os.environ.get(name, "").strip()
    if not val:
        return None
    try:
        return float(val)
    except ValueError:
        logger.warning("Ignoring malformed %s=%r; no timeout will be set", name, val)
        return None


class Settings(BaseModel):
    api_key: Optional[str] = Field(None, description="Gemini API key; None means fallback-only")
    project_root: Path = Field(default_factory=Path.cwd, description="Root the artifact is written under")
    model: str = Field(GEMINI_MODEL, description="Gemini model name")
    endpoint: str = Field(GEMINI_ENDPOINT, description="Base URL of the models collection")
    http_timeout: Optional[float] = Field(None, description="Request timeout in seconds; None = transport default")
    debug: bool = Field(False, description="Dump prompts and raw responses to log_dir")
    log_dir: str = Field(LOG_DIR, description="Directory for debug dumps")


def load_settings(project_root: Optional[str] = None) -> Settings:
    """
    Read configuration from the environment once. The result is meant to be
    passed explicitly to the generator/client rather than re-read per call.
    """
    api_key = (os.environ.get("GEMINI_API_KEY") or "").strip() or None
    root = project_root or os.environ.get("UIGEN_PROJECT_ROOT") or os.getcwd()
    return Settings(
        api_key=api_key,
        project_root=Path(root),
        model=os.environ.get("UIGEN_MODEL", GEMINI_MODEL),
        endpoint=os.environ.get("UIGEN_API_ENDPOINT", GEMINI_ENDPOINT).rstrip("/"),
        http_timeout=_env_float("UIGEN_HTTP_TIMEOUT"),
        debug=_env_bool("UIGEN_DEBUG"),
        log_dir=os.environ.get("AI_BACKEND_LOG_DIR", LOG_DIR),
    )
