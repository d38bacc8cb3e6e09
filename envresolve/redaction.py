from __future__ import annotations

from typing import Any

REDACTED = "<redacted>"

_SECRET_MARKERS = ("api_key", "apikey", "token", "secret", "password")


def is_secret_name(name: str) -> bool:
    lowered = name.lower()
    return any(p in lowered for p in _SECRET_MARKERS)


def redact_secrets(obj: Any) -> Any:
    """Best-effort redaction for human-facing config dumps.

    Config loading stays strict; this only keeps secrets out of stdout and logs.
    """

    if isinstance(obj, dict):
        out = {}
        for k, v in obj.items():
            if isinstance(k, str) and is_secret_name(k) and v is not None:
                out[k] = REDACTED
            else:
                out[k] = redact_secrets(v)
        return out
    if isinstance(obj, list):
        return [redact_secrets(x) for x in obj]
    return obj
