# config.py
# env driven settings (.env is loaded once, on import)

from __future__ import annotations
import os
from dotenv import load_dotenv

load_dotenv()

# generation provider
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_JSON_MODE = (os.getenv("GEMINI_JSON_MODE", "0").lower() not in ["0", "false", "no", ""])


# provider timeout (seconds). unset / 0 -> wait for the provider indefinitely
def parse_timeout(raw: str | None) -> float | None:
    try:
        return float(raw or 0) or None
    except ValueError:
        raise RuntimeError(f"GENERATION_TIMEOUT_S must be a number of seconds, got {raw!r}") from None


GENERATION_TIMEOUT_S = parse_timeout(os.getenv("GENERATION_TIMEOUT_S"))

# CORS origins
FRONTEND_LOCAL = os.getenv("FRONTEND_LOCAL", "http://localhost:8080")
FRONTEND_PROD = os.getenv("FRONTEND_PROD", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
