"""Random tokens and timestamps minted per request.

Nothing generated here is stored; callers only rely on the literal formats:
  - session id: sess_<8 lowercase hex>
  - proof token: proof_<12 lowercase hex>
  - key token: KEY-<6 uppercase hex>
"""

from __future__ import annotations

import secrets
from datetime import datetime, timezone


def now_utc_iso() -> str:
    """UTC timestamp with millisecond precision and a Z suffix."""

    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def new_token(prefix: str, nbytes: int, *, upper: bool = False) -> str:
    value = secrets.token_hex(nbytes)
    if upper:
        value = value.upper()
    return f"{prefix}{value}"


def session_id() -> str:
    return new_token("sess_", 4)


def proof_token() -> str:
    return new_token("proof_", 6)


def key_token() -> str:
    return new_token("KEY-", 3, upper=True)
