"""Environment-driven settings. A local .env file is read at import."""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _split_origins(val: str) -> List[str]:
    return [origin.strip() for origin in val.split(",") if origin.strip()]


CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS", "http://localhost:5173"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# Directory of course JSON files; unset means the tables bundled with `courses`.
COURSE_DATA_DIR: Optional[str] = os.getenv("COURSE_DATA_DIR") or None
DEFAULT_COURSE_ID = os.getenv("DEFAULT_COURSE_ID", "liphook")
