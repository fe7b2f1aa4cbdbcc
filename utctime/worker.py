"""utctime worker: JSON-lines protocol for time conversions.

The worker exposes TimeConverter over stdin/stdout so that processes
written in other languages can share one conversion implementation:
- JSON-lines protocol over stdin/stdout
- One request per line, one response per line
- Logging goes to stderr; stdout carries protocol lines only

Protocol:
  Request:  {"id": <int>, "op": "<operation>", ...params...}
  Response: {"id": <int>, "status": "ok"|"error", ...result OR error...}

Operations:
  to_epoch  {"year", "month", "day", "hour"?, "minute"?, "second"?} -> {"seconds"}
  decode    {"text"}                                                -> {"seconds"}
  encode    {"millis"}                                              -> {"text"}
  now       {}                                                      -> {"seconds"}
  shutdown  {}                                                      -> {}
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Callable, TextIO

from utctime import __version__
from utctime.converter import TimeConverter
from utctime.core.broken_down import BrokenDownTime
from utctime.errors import UtcTimeError

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

# Environment variable selecting the stderr log level
LOG_LEVEL_ENV = "UTCTIME_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Worker version
WORKER_VERSION = __version__


class InvalidArgument(Exception):
    """A request is missing a parameter or has one of the wrong type."""


def resolve_log_level(name: str | None) -> str:
    """Return a valid logging level name, falling back to DEFAULT_LOG_LEVEL."""
    level = (name or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def _error(error_code: str, message: str) -> dict:
    return {
        "status": "error",
        "error_code": error_code,
        "message": message,
    }


def _require_int(request: dict, name: str, default: int | None = None) -> int:
    value = request.get(name, default)
    if value is None:
        raise InvalidArgument(f"{name} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    return value


# =============================================================================
# Operation Handlers
# =============================================================================

def handle_to_epoch(converter: TimeConverter, request: dict) -> dict:
    """Handle 'to_epoch' operation."""
    utc = BrokenDownTime(
        year=_require_int(request, "year"),
        month=_require_int(request, "month"),
        day=_require_int(request, "day"),
        hour=_require_int(request, "hour", 0),
        minute=_require_int(request, "minute", 0),
        second=_require_int(request, "second", 0),
    )
    return {
        "status": "ok",
        "seconds": converter.to_utc_epoch(utc),
    }


def handle_decode(converter: TimeConverter, request: dict) -> dict:
    """Handle 'decode' operation."""
    text = request.get("text")
    if not isinstance(text, str):
        raise InvalidArgument("text must be a string")
    return {
        "status": "ok",
        "seconds": converter.iso8601_to_unix(text),
    }


def handle_encode(converter: TimeConverter, request: dict) -> dict:
    """Handle 'encode' operation."""
    millis = _require_int(request, "millis")
    return {
        "status": "ok",
        "text": converter.to_utc_iso8601(millis),
    }


def handle_now(converter: TimeConverter, request: dict) -> dict:
    """Handle 'now' operation."""
    return {
        "status": "ok",
        "seconds": converter.current_unix_time(),
    }


def handle_shutdown(converter: TimeConverter, request: dict) -> dict:
    """Handle 'shutdown' operation."""
    return {
        "status": "ok",
    }


HANDLERS: dict[str, Callable[[TimeConverter, dict], dict]] = {
    "to_epoch": handle_to_epoch,
    "decode": handle_decode,
    "encode": handle_encode,
    "now": handle_now,
    "shutdown": handle_shutdown,
}


def handle_request(converter: TimeConverter, request: Any) -> dict:
    """Dispatch one decoded request and build its response."""
    if not isinstance(request, dict):
        return {"id": None, **_error("InvalidRequest", "request must be a JSON object")}

    request_id = request.get("id")
    op = request.get("op", "")
    if not isinstance(op, str):
        return {"id": request_id, **_error("InvalidRequest", "op must be a string")}
    handler = HANDLERS.get(op)

    if handler is None:
        result = _error("UnknownOperation", f"Unknown operation: {op}")
    else:
        try:
            result = handler(converter, request)
        except InvalidArgument as e:
            result = _error("InvalidArgument", str(e))
        except UtcTimeError as e:
            result = _error(e.error_code, str(e))
        except Exception as e:
            logger.exception("operation %s failed", op)
            result = _error("InternalError", str(e))

    result["id"] = request_id
    return result


# =============================================================================
# Main Loop
# =============================================================================

def run(
    converter: TimeConverter,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    """Serve requests from stdin until EOF or a shutdown request."""

    def send(message: dict) -> None:
        stdout.write(json.dumps(message) + "\n")
        stdout.flush()

    send({"status": "ready", "version": WORKER_VERSION})

    for line in stdin:
        line = line.strip()
        if not line:
            continue

        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            send({"id": None, **_error("InvalidRequest", f"Invalid JSON: {e}")})
            continue

        send(handle_request(converter, request))

        if isinstance(request, dict) and request.get("op") == "shutdown":
            break


def main() -> None:
    """Main worker loop."""
    logging.basicConfig(
        stream=sys.stderr,
        level=resolve_log_level(os.environ.get(LOG_LEVEL_ENV)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(TimeConverter(), sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
