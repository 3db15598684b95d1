from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class DirectoryConfig:
    title: str = "Local Business Directory API"
    data_dir: Path = Path(os.getenv("LISTINGS_DATA_DIR", Path(__file__).resolve().parent / "data"))
    default_locale: str = os.getenv("LISTINGS_DEFAULT_LOCALE", "es")
    log_level: str = os.getenv("LISTINGS_LOG_LEVEL", "INFO")


DEFAULT_DIRECTORY_CONFIG = DirectoryConfig()
