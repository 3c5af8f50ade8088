"""Unique, sortable item identifiers built from a configurable pattern.

Tokens: ``%y`` ``%m`` ``%d`` (two-digit date parts), ``%j`` (day of year),
``%T`` (seconds since midnight UTC as four Base32 chars), ``%R...`` (one random
Base32 char per ``R``) and ``%%`` (a literal percent sign).
"""

from __future__ import annotations

import re
import secrets
from datetime import datetime, timezone

from . import base32

DEFAULT_PATTERN = "%y%m%d-%T%RRR"

_TOKEN_RE = re.compile(r"%(R+|.)?|[^%]+", re.DOTALL)


def extract_from_filename(filename: str) -> str | None:
    """Return the ``YYMMDD-XXXX`` id at the start of an item filename, if any."""
    stem = filename.removesuffix(".md")
    parts = stem.split("-", 2)
    if len(parts) < 2:
        return None
    date_part, time_part = parts[0], parts[1]
    if len(date_part) != 6 or not all(c in "0123456789" for c in date_part):
        return None
    return stem[: len(date_part) + 1 + len(time_part)]


def _expand(token: str, now: datetime) -> str:
    if token == "y":
        return f"{now.year % 100:02d}"
    if token == "m":
        return f"{now.month:02d}"
    if token == "d":
        return f"{now.day:02d}"
    if token == "j":
        return f"{now.timetuple().tm_yday:03d}"
    if token == "T":
        seconds = now.hour * 3600 + now.minute * 60 + now.second
        return base32.encode(seconds, 4)
    if token.startswith("R"):
        count = len(token)
        return base32.encode_bytes(secrets.token_bytes(count), count)
    if token == "%":
        return "%"
    return "%" + token


def generate(pattern: str, now: datetime | None = None) -> str:
    """Expand ``pattern`` into an id, using ``now`` (default: current UTC time)."""
    if now is None:
        now = datetime.now(timezone.utc)
    pieces = []
    for match in _TOKEN_RE.finditer(pattern):
        text = match.group(0)
        if not text.startswith("%"):
            pieces.append(text)
        elif match.group(1) is None:
            pieces.append("%")
        else:
            pieces.append(_expand(match.group(1), now))
    return "".join(pieces)