from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, Response, jsonify, make_response, request, send_from_directory
from werkzeug.exceptions import HTTPException

from .config import Settings
from .logger import append_log, new_request_id, time_ms, utc_now_iso
from .query import CompanySearch
from .upstream import CompaniesHouseClient, build_search_url


def _event(rid: str, started: int, backend_url: str, status: Any, **extra: Any) -> Dict[str, Any]:
    event = {
        "timestamp": utc_now_iso(),
        "request_id": rid,
        "source_ip": request.remote_addr or "unknown",
        "method": request.method,
        "url": request.url,
        "backend_url": backend_url,
        "status": status,
        "user_agent": request.headers.get("User-Agent", ""),
        "response_time_ms": time_ms() - started,
    }
    event.update(extra)
    return event


def _with_request_id(resp: Response, rid: str) -> Response:
    resp.headers["X-Request-ID"] = rid
    return resp


def create_app(settings: Settings, client: Optional[CompaniesHouseClient] = None) -> Flask:
    app = Flask(__name__, static_folder=settings.public_dir, static_url_path="")
    # Relay upstream JSON in the order it was received
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.config["SME_SETTINGS"] = settings

    companies = client or CompaniesHouseClient(settings)

    @app.get("/")
    def index():
        return send_from_directory(settings.public_dir, "index.html")

    @app.get("/healthz")
    def healthz():
        return {"status": "ok", "api_key_configured": settings.has_api_key}

    @app.get("/api/companies")
    def search_companies():
        started = time_ms()
        rid = new_request_id()
        backend_url = ""

        try:
            search = CompanySearch.from_args(request.args, settings.default_location)
            params = search.upstream_params()
            backend_url = build_search_url(settings.upstream_url, params)
            upstream = companies.search(params)

            if not upstream.is_success:
                append_log(settings.logs_file, _event(rid, started, backend_url, upstream.status_code))
                body = {"error": "Upstream error", "status": upstream.status_code, "body": upstream.text}
                return _with_request_id(make_response(jsonify(body), upstream.status_code), rid)

            data = upstream.json()
        except Exception as e:  # network, timeout, bad JSON, anything else
            app.logger.exception("Company search failed (request_id=%s)", rid)
            append_log(
                settings.logs_file,
                _event(rid, started, backend_url, "ERROR", error=str(e)),
            )
            body = {"error": "Server error", "details": str(e)}
            return _with_request_id(make_response(jsonify(body), 500), rid)

        append_log(settings.logs_file, _event(rid, started, backend_url, upstream.status_code))
        return _with_request_id(make_response(jsonify(data), 200), rid)

    return app


def create_app_with_error_handler(
    settings: Settings, client: Optional[CompaniesHouseClient] = None
) -> Flask:
    """Same as create_app(), but with a global error handler so nothing escapes
    as an HTML traceback. Prefer this in runners.
    """
    app = create_app(settings, client)

    @app.errorhandler(Exception)
    def _handle_unexpected_error(e: Exception):  # type: ignore[override]
        if isinstance(e, HTTPException):
            return e
        rid = new_request_id()
        app.logger.exception("Unhandled error (request_id=%s)", rid)
        append_log(
            settings.logs_file,
            _event(rid, time_ms(), "", 500, error=str(e), unhandled_exception=True),
        )
        resp = make_response(jsonify({"error": "Internal Server Error", "request_id": rid}), 500)
        return _with_request_id(resp, rid)

    return app
