from __future__ import annotations

import base64
import urllib.parse
from typing import Dict

import httpx

from .config import Settings


def basic_auth_header(api_key: str) -> str:
    # Companies House: API key as username, empty password
    token = base64.b64encode(f"{api_key}:".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_search_url(base_url: str, params: Dict[str, str]) -> str:
    parts = urllib.parse.urlparse(base_url)
    return urllib.parse.urlunparse(parts._replace(query=urllib.parse.urlencode(params)))


class CompaniesHouseClient:
    """Thin client for the advanced-search endpoint.

    A fresh httpx.Client is opened per call, so instances hold nothing but the
    immutable settings and can be shared between request threads.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def search(self, params: Dict[str, str]) -> httpx.Response:
        headers = {
            "Authorization": basic_auth_header(self.settings.api_key),
            "Accept": "application/json",
        }
        with httpx.Client(timeout=self.settings.upstream_timeout, follow_redirects=True) as client:
            return client.get(self.settings.upstream_url, params=params, headers=headers)
