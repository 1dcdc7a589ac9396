# app/utils/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[2]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
ASSETS_DIR = Path(os.getenv("ASSETS_DIR", BASE_DIR / "assets"))
INDEX_FILE = os.getenv("INDEX_FILE", "index.html")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# reject non-numeric id/age with 400 instead of not-found / empty list
STRICT_PARAMS = os.getenv("STRICT_PARAMS", "false").lower() in ("1", "true", "yes")
