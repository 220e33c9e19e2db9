# /app/core/config.py

"""
Process configuration for the Teacher Dashboard API.

Values are read from the environment (a local `.env` file is loaded first for
development). Nothing here talks to Google; building the Sheets client from
these settings is the job of `sheets_service`.
"""

import os
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SCOPES = "https://www.googleapis.com/auth/spreadsheets.readonly"


class ConfigurationError(ValueError):
    """Raised when a required setting is missing or malformed."""


def _split_list(raw: str) -> List[str]:
    # Accepts comma- or space-separated values.
    parts = [p.strip() for p in raw.replace(",", " ").split()]
    return [p for p in parts if p]


@dataclass
class Settings:
    spreadsheet_id: str
    credentials_info: Dict[str, Any]
    scopes: List[str] = field(default_factory=lambda: [DEFAULT_SCOPES])


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_cors_origins() -> List[str]:
    return _split_list(os.getenv("CORS_ORIGINS", "*")) or ["*"]


def load_settings() -> Settings:
    """
    Builds a Settings object from the environment.

    Raises:
        ConfigurationError: if SPREADSHEET_ID or GOOGLE_CREDENTIALS is missing,
            or GOOGLE_CREDENTIALS is not a JSON object.
    """
    spreadsheet_id = os.getenv("SPREADSHEET_ID")
    if not spreadsheet_id:
        raise ConfigurationError("SPREADSHEET_ID is required in the environment.")

    raw_credentials = os.getenv("GOOGLE_CREDENTIALS")
    if not raw_credentials:
        raise ConfigurationError("GOOGLE_CREDENTIALS is required in the environment.")

    try:
        credentials_info = json.loads(raw_credentials)
    except json.JSONDecodeError:
        raise ConfigurationError("GOOGLE_CREDENTIALS must be a valid JSON string.")
    if not isinstance(credentials_info, dict):
        raise ConfigurationError("GOOGLE_CREDENTIALS must be a JSON object.")

    return Settings(
        spreadsheet_id=spreadsheet_id,
        credentials_info=credentials_info,
        scopes=_split_list(os.getenv("SHEETS_SCOPES", DEFAULT_SCOPES)),
    )
