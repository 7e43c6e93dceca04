"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

from mailstrip.config.constants import DEFAULT_MAX_LINE_BYTES

load_dotenv()


# --- Scanner ---
MAX_LINE_BYTES: int = int(os.getenv("MAILSTRIP_MAX_LINE_BYTES", str(DEFAULT_MAX_LINE_BYTES)))

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Privacy ---
MAX_BODY_LOG_CHARS: int = int(os.getenv("MAX_BODY_LOG_CHARS", "80"))

# --- Runner ---
REPORT_SUFFIX: str = os.getenv("MAILSTRIP_REPORT_SUFFIX", ".fragments.json")
