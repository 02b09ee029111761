import logging
import os
from datetime import date
from typing import TypedDict

from dotenv import load_dotenv


DEFAULTS = {
    "ROSTER_EPOCH": "2023-01-01",
    "API_HOST": "0.0.0.0",
    "API_PORT": "8000",
    "LOG_DIR": "/data/logs",
    "LOG_LEVEL": "INFO",
}


class AppConfig(TypedDict):
    """Configuration for the application"""

    SPREADSHEET_ID: str
    GOOGLE_CLIENT_ID: str
    ROSTER_EPOCH: date
    API_HOST: str
    API_PORT: int
    LOG_DIR: str
    LOG_LEVEL: str


def load_config() -> AppConfig:
    """Load configuration from environment variables"""
    load_dotenv()

    required_vars = {
        "SPREADSHEET_ID": os.getenv("SPREADSHEET_ID"),
        "GOOGLE_CLIENT_ID": os.getenv("GOOGLE_CLIENT_ID"),
    }

    missing = [k for k, v in required_vars.items() if not v]
    if missing:
        raise OSError(f"Missing required environment variables: {', '.join(missing)}")

    optional_vars = {k: os.getenv(k) or default for k, default in DEFAULTS.items()}
    try:
        epoch = date.fromisoformat(optional_vars["ROSTER_EPOCH"])
        port = int(optional_vars["API_PORT"])
    except ValueError as e:
        raise OSError(f"Invalid environment variable: {e}") from e

    log_level = optional_vars["LOG_LEVEL"].upper()
    if log_level not in logging.getLevelNamesMapping():
        raise OSError(f"Invalid environment variable: unknown LOG_LEVEL {log_level!r}")

    return {
        "SPREADSHEET_ID": required_vars["SPREADSHEET_ID"],
        "GOOGLE_CLIENT_ID": required_vars["GOOGLE_CLIENT_ID"],
        "ROSTER_EPOCH": epoch,
        "API_HOST": optional_vars["API_HOST"],
        "API_PORT": port,
        "LOG_DIR": optional_vars["LOG_DIR"],
        "LOG_LEVEL": log_level,
    }
