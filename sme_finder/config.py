from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


# Base directory of the project/package (more stable than CWD under systemd)
_PKG_DIR = Path(__file__).resolve().parent
_BASE_DIR = _PKG_DIR.parent  # project root when running from repo or install dir

COMPANIES_HOUSE_SEARCH_URL = (
    "https://api.company-information.service.gov.uk/advanced-search/companies"
)


@dataclass(frozen=True)
class Settings:
    # Companies House REST API key, sent as the Basic auth username
    api_key: str = ""

    # Listen address/port
    host: str = "0.0.0.0"
    port: int = 5173

    # Upstream advanced-search endpoint and per-request timeout (seconds)
    upstream_url: str = COMPANIES_HOUSE_SEARCH_URL
    upstream_timeout: float = 15.0

    # Used when the client sends no location
    default_location: str = "Nottingham"

    # Paths
    public_dir: str = str(_BASE_DIR / "public")
    logs_file: str = str(_BASE_DIR / "data" / "logs.json")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, after loading a local .env file.
        Variables already present in the environment win over .env entries.
        """
        load_dotenv()
        return cls(
            api_key=os.getenv("COMPANIES_HOUSE_API_KEY", ""),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            upstream_url=os.getenv("COMPANIES_HOUSE_SEARCH_URL", cls.upstream_url),
            upstream_timeout=float(os.getenv("UPSTREAM_TIMEOUT", str(cls.upstream_timeout))),
            default_location=os.getenv("DEFAULT_LOCATION", cls.default_location),
            public_dir=os.getenv("SME_PUBLIC_DIR", cls.public_dir),
            logs_file=os.getenv("SME_LOGS_FILE", cls.logs_file),
        )
