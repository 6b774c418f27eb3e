from __future__ import annotations

import secrets

from .date.clock import now_ms

# 8-8-8-8-8-9 characters cut from "<epoch ms><36 hex chars>".
_GROUPS = (8, 8, 8, 8, 8, 9)


def generate_uid() -> str:
    """Timestamp-prefixed random id, e.g. "16478271-33403a97-d811b91d-345c8543-334d9a74-5044d5a47"."""
    raw = f"{now_ms()}{secrets.token_hex(18)}"
    out: list[str] = []
    pos = 0
    for n in _GROUPS:
        out.append(raw[pos : pos + n])
        pos += n
    return "-".join(out)
