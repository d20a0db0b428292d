"""Input Parsing: turns raw path/query/body values into domain types.

Invariants:
    - Each parser either returns a domain value or raises its own error kind
    - Path ids are an optional sign plus ASCII digits, nothing else
    - parse_priority is loose: any finite number or numeric string passes;
      fractions are truncated toward zero and range is left to the planner
    - None means "not provided" for status and priority

Design Decisions:
    - Pure functions in core/ so the router stays a thin sequence of calls
    - Booleans are rejected as priorities even though bool subclasses int
    - Ids outside the clients.id INTEGER range are well-formed but can never
      match a row; client_id_in_range lets callers skip the lookup
"""

import math
import re

from shiptivity.core.domain_types import ClientId, ClientStatus
from shiptivity.core.errors import (
    InvalidIdError, InvalidPriorityError, InvalidStatusError,
)

# 32-bit signed INTEGER, the narrowest id column among supported backends
MIN_CLIENT_ID = -(2 ** 31)
MAX_CLIENT_ID = 2 ** 31 - 1

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_client_id(raw: str | int) -> ClientId:
    """Parse a path id. Raises InvalidIdError when it is not an integer."""
    if isinstance(raw, bool):
        raise InvalidIdError()
    if isinstance(raw, int):
        return ClientId(raw)
    text = str(raw).strip()
    if not _ID_PATTERN.fullmatch(text):
        raise InvalidIdError()
    return ClientId(int(text))


def client_id_in_range(client_id: ClientId) -> bool:
    return MIN_CLIENT_ID <= client_id <= MAX_CLIENT_ID


def parse_status(raw: object) -> ClientStatus | None:
    """Parse a lane token. Raises InvalidStatusError for unknown tokens."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise InvalidStatusError(raw)
    try:
        return ClientStatus(raw)
    except ValueError:
        raise InvalidStatusError(raw)


def parse_priority(raw: object) -> int | None:
    """Parse a requested priority. Raises InvalidPriorityError when not numeric."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise InvalidPriorityError(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            raw = float(raw.strip())
        except ValueError:
            raise InvalidPriorityError(raw)
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise InvalidPriorityError(raw)
        return int(raw)
    raise InvalidPriorityError(raw)
