import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

loaded = load_dotenv()
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logger.exception("Invalid %s: %r", name, raw)
		return default


def get_optional_int_env(name: str) -> Optional[int]:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return None
	try:
		return int(raw)
	except ValueError:
		logger.exception("Invalid %s: %r", name, raw)
		return None


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except ValueError:
		logger.exception("Invalid %s: %r", name, raw)
		return default


def get_bool_env(name: str, default: bool) -> bool:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw.strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = get_str_env("WORDCRAWL_LOG_LEVEL", "INFO").upper()
DEFAULT_PARALLELISM = get_optional_int_env("WORDCRAWL_PARALLELISM")
DEFAULT_DEPTH = get_int_env("WORDCRAWL_DEFAULT_DEPTH", 2)
DEFAULT_TIMEOUT_SECONDS = get_float_env("WORDCRAWL_TIMEOUT_SECONDS", 10.0)
DEFAULT_POPULAR_WORD_COUNT = get_int_env("WORDCRAWL_POPULAR_WORD_COUNT", 10)
DEFAULT_FAIL_FAST = get_bool_env("WORDCRAWL_FAIL_FAST", False)
