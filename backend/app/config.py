import os
from pathlib import Path

from dotenv import load_dotenv

APP_DIR = Path(__file__).resolve().parent
BACKEND_DIR = APP_DIR.parent

load_dotenv(BACKEND_DIR / ".env")


def parse_bool(value, default: bool = False) -> bool:
    if value is None:
        return default
    key = str(value).strip().lower()
    if key in {"1", "true", "yes", "on"}:
        return True
    if key in {"0", "false", "no", "off"}:
        return False
    return default


HOST = os.environ.get("ITEMS_API_HOST", "127.0.0.1")
PORT = int(os.environ.get("ITEMS_API_PORT", "8080"))
LOG_LEVEL = os.environ.get("ITEMS_API_LOG_LEVEL", "INFO").upper()
ACCESS_LOG = parse_bool(os.environ.get("ITEMS_API_ACCESS_LOG"), default=False)
