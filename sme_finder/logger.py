from __future__ import annotations

import logging
import os
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

import orjson

_log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def new_request_id() -> str:
    return uuid.uuid4().hex


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def time_ms() -> int:
    return int(time.time() * 1000)


def append_log(logs_file: str, event: Dict[str, Any]) -> None:
    """Append one event as a JSON line. Never raises: a broken log file must
    not break the response being served.
    """
    try:
        os.makedirs(os.path.dirname(logs_file) or ".", exist_ok=True)
        line = orjson.dumps(event).decode("utf-8")
        with open(logs_file, "a", encoding="utf-8", errors="replace") as f:
            f.write(line + "\n")
    except (OSError, TypeError) as e:
        _log.warning("Could not write event to %s: %s", logs_file, e)
