"""
Service configuration read from the environment.
"""
import os


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str):
    value = os.environ.get(name)
    if not value:
        return None  # requests waits indefinitely
    return float(value)


HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))

DATA_SOURCE_URL = os.environ.get(
    "DATA_SOURCE_URL",
    "https://s3.amazonaws.com/roxiler.com/product_transaction.json",
)
FETCH_TIMEOUT = _env_timeout("FETCH_TIMEOUT")

INITIALIZE_ON_STARTUP = _env_flag("INITIALIZE_ON_STARTUP")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
