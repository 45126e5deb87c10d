"""Environment-variable-based configuration for the weekly report job."""

from __future__ import annotations

import os
from pathlib import Path

REPORT_API_KEY: str = os.environ.get("REPORT_API_KEY") or os.environ.get("DEEPSEEK_API_KEY", "")
REPORT_API_BASE_URL: str = os.environ.get("REPORT_API_BASE_URL", "https://api.deepseek.com/v1")
REPORT_MODEL: str = os.environ.get("REPORT_MODEL", "deepseek-chat")
DATA_DIR: Path = Path(os.environ.get("FITTRACK_DATA_DIR", "~/.fittrack")).expanduser()
USER_ID: str = os.environ.get("FITTRACK_USER_ID", "default")
REPORT_WEEKDAY: str = os.environ.get("REPORT_WEEKDAY", "sun")
REPORT_HOUR: int = int(os.environ.get("REPORT_HOUR", "20"))
REPORT_MINUTE: int = int(os.environ.get("REPORT_MINUTE", "0"))
