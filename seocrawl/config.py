import os
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

try:
    from dotenv import load_dotenv
except ImportError:
    logging.warning("python-dotenv not available; using environment variables only")
else:
    loaded = load_dotenv()
    if not loaded and Path(".env").exists():
        raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw


def get_optional_str_env(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw


def get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.exception("Invalid %s: %r", name, raw)
        return default


def get_optional_int_env(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        logging.exception("Invalid %s: %r", name, raw)
        return None


def get_float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logging.exception("Invalid %s: %r", name, raw)
        return default


def default_database_url(now: Optional[datetime] = None) -> str:
    """SQLite file named after the crawl start time, e.g. crawler_20240101_120000.db."""
    now = now or datetime.now()
    return f"sqlite:///crawler_{now.strftime('%Y%m%d_%H%M%S')}.db"


DATABASE_URL = get_optional_str_env("DATABASE_URL")
USER_AGENT = get_optional_str_env("USER_AGENT")
SEED_URL = get_str_env("SEED_URL", "http://books.toscrape.com")
MAX_URLS = get_int_env("MAX_URLS", 100)
WORKER_COUNT = get_int_env("WORKER_COUNT", 5)
WORKLIST_CAPACITY = get_int_env("WORKLIST_CAPACITY", 100)
DISCOVERY_TIMEOUT = get_float_env("DISCOVERY_TIMEOUT", 10.0)
SCRAPE_TIMEOUT = get_float_env("SCRAPE_TIMEOUT", 30.0)
MAX_DISCOVERY_BRANCHES = get_optional_int_env("MAX_DISCOVERY_BRANCHES")
LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO")
