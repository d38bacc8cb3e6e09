from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from dotenv import dotenv_values

from envresolve.errors import DotenvNotFound


def snapshot_environment(
    environ: Mapping[str, str | None] | None = None,
    *,
    dotenv_path: str | Path | None = None,
    load_dotenv_file: bool = True,
) -> Mapping[str, str | None]:
    """Capture a read-only copy of the environment.

    Args:
        environ: Source mapping; defaults to `os.environ`.
        dotenv_path: Optional `.env` file; defaults to `./.env`.
        load_dotenv_file: Whether to merge `.env` values underneath `environ`.

    Values already present in `environ` always win over `.env`, and `os.environ`
    is never modified. A missing default `./.env` is skipped; a missing explicit
    `dotenv_path` raises DotenvNotFound.
    """

    merged: dict[str, str | None] = {}

    if load_dotenv_file:
        if dotenv_path is not None:
            path = Path(dotenv_path)
            if not path.is_file():
                raise DotenvNotFound(str(path))
            merged.update(dotenv_values(path))
        else:
            path = Path.cwd() / ".env"
            if path.is_file():
                merged.update(dotenv_values(path))

    source = os.environ if environ is None else environ
    for key, value in source.items():
        if value is None and key in merged:
            continue
        merged[key] = value

    return MappingProxyType(merged)
