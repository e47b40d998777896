from __future__ import annotations

import logging

from .config import Settings
from .logger import configure_logging
from .proxy import create_app_with_error_handler

log = logging.getLogger(__name__)


def main() -> None:
    configure_logging()
    settings = Settings.from_env()

    if not settings.has_api_key:
        log.warning(
            "COMPANIES_HOUSE_API_KEY is not set. Upstream searches will be rejected "
            "and /api/companies will relay the upstream error."
        )

    app = create_app_with_error_handler(settings)
    log.info("SME Finder running on http://localhost:%d", settings.port)
    # Flask built-in server, one thread per request; for prod, run under a WSGI server
    app.run(host=settings.host, port=settings.port, threaded=True, debug=False)


if __name__ == "__main__":
    main()
