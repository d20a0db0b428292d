"""Log Output: JSON and text formatters carrying the reorder context fields.

Log lines and the context they attach (via `extra=`):
    reorder_service   "Client 3 moved backlog -> complete at priority 1"
                      client_id, status (target lane), priority (final slot),
                      updates (rows written in the batch)
    reorder_service   no-op (debug) and rolled-back batch (error): client_id
    error_handlers    domain errors: error_code, path
    database / seed / health / lifespan: message only

Invariants:
    - Every line has timestamp (from the record), level, logger and message
    - Context fields appear only when set, always in CONTEXT_FIELDS order
    - setup_logging installs exactly one handler no matter how often the
      lifespan runs

Design Decisions:
    - stdlib logging; format picked by Settings.log_format ("json" | "text")
    - Text lines append context as key=value so local runs keep the same data
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "client_id", "status", "priority", "updates", "error_code", "path",
)


def context_fields(record: logging.LogRecord) -> dict:
    """Context attached to a record through `extra=`, in field order."""
    return {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **context_fields(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = context_fields(record)
        if not fields:
            return line
        head, sep, tail = line.partition("\n")
        pairs = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the shiptivity handler on the root logger, replacing any earlier one."""
    for old in [h for h in logging.root.handlers if getattr(h, "_shiptivity", False)]:
        logging.root.removeHandler(old)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    handler._shiptivity = True
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
