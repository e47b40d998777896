from __future__ import annotations

import base64

import httpx
import respx

from sme_finder.upstream import CompaniesHouseClient, basic_auth_header, build_search_url

from .conftest import UPSTREAM_HOST, UPSTREAM_PATH, UPSTREAM_URL


def test_basic_auth_header_uses_key_with_empty_password():
    header = basic_auth_header("abc123")

    assert header.startswith("Basic ")
    assert base64.b64decode(header[len("Basic "):]).decode() == "abc123:"


def test_basic_auth_header_for_missing_key():
    assert basic_auth_header("") == "Basic " + base64.b64encode(b":").decode()


def test_build_search_url_encodes_params():
    url = build_search_url(UPSTREAM_URL, {"location": "Sutton in Ashfield", "size": "10"})
    assert url == f"{UPSTREAM_URL}?location=Sutton+in+Ashfield&size=10"


def test_search_sends_params_and_auth(settings, respx_mock: respx.MockRouter):
    route = respx_mock.get(host=UPSTREAM_HOST, path=UPSTREAM_PATH).mock(
        return_value=httpx.Response(200, json={"items": []})
    )

    resp = CompaniesHouseClient(settings).search({"location": "Nottingham", "size": "5"})

    assert resp.status_code == 200
    sent = route.calls.last.request
    assert sent.url.params["location"] == "Nottingham"
    assert sent.url.params["size"] == "5"
    assert sent.headers["Authorization"] == basic_auth_header("test-key")
    assert sent.headers["Accept"] == "application/json"
