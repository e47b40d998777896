"""Shared fixtures: settings pointing at a temporary public dir and event log."""

from __future__ import annotations

from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from sme_finder.config import Settings
from sme_finder.proxy import create_app_with_error_handler

UPSTREAM_HOST = "upstream.test"
UPSTREAM_PATH = "/advanced-search/companies"
UPSTREAM_URL = f"https://{UPSTREAM_HOST}{UPSTREAM_PATH}"
INDEX_HTML = "<!doctype html><title>SME Finder</title>"


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (public / "app.js").write_text("console.log('ok');", encoding="utf-8")
    return public


@pytest.fixture
def settings(tmp_path: Path, public_dir: Path) -> Settings:
    return Settings(
        api_key="test-key",
        upstream_url=UPSTREAM_URL,
        upstream_timeout=2.0,
        public_dir=str(public_dir),
        logs_file=str(tmp_path / "data" / "logs.json"),
    )


@pytest.fixture
def app(settings: Settings) -> Flask:
    app = create_app_with_error_handler(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()
