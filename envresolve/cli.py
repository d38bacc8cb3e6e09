from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import Any, Sequence

from envresolve.base_env import BaseEnv, EnvDefaults
from envresolve.environment import snapshot_environment
from envresolve.errors import ConfigError, DotenvNotFound, SchemaError
from envresolve.observability.logging import configure_logging, get_logger
from envresolve.redaction import redact_secrets
from envresolve.resolver import ConfigResolver
from envresolve.schema import load_schema, load_settings


log = get_logger("envresolve.cli")

DEFAULT_PORT = 8080
DEFAULT_HOST = "localhost"
DEFAULT_FROM_EMAIL = "noreply@localhost"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envresolve",
        description="Resolve and validate environment variables against a field schema",
    )
    parser.add_argument(
        "--schema",
        type=Path,
        help="YAML field schema; output is keyed by variable name (without it, the base service variables are keyed by attribute name)",
    )

    dotenv = parser.add_mutually_exclusive_group()
    dotenv.add_argument("--dotenv", type=Path, help="Path to a .env file (default: ./.env)")
    dotenv.add_argument("--no-dotenv", action="store_true", help="Do not read any .env file")

    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print secret-looking values instead of <redacted>",
    )
    return parser


def _resolve(ns: argparse.Namespace) -> dict[str, Any]:
    environ = snapshot_environment(dotenv_path=ns.dotenv, load_dotenv_file=not ns.no_dotenv)
    resolver = ConfigResolver(environ)

    if ns.schema is not None:
        fields = load_schema(ns.schema)
        return dict(load_settings(fields, resolver))

    env = BaseEnv.load(
        resolver,
        EnvDefaults(port=DEFAULT_PORT, host=DEFAULT_HOST, from_email=DEFAULT_FROM_EMAIL),
    )
    return dataclasses.asdict(env)


def main(argv: Sequence[str] | None = None) -> int:
    """Console entrypoint. Exit codes: 0 ok, 2 configuration error, 1 anything else."""

    parser = _build_parser()
    try:
        ns = parser.parse_args(list(argv) if argv is not None else None)
    except SystemExit as e:
        code = e.code
        return int(code) if isinstance(code, int) else 1

    configure_logging(level=ns.log_level)

    try:
        resolved = _resolve(ns)
    except (ConfigError, DotenvNotFound, SchemaError) as e:
        log.error("config_error", error=str(e), error_type=type(e).__name__)
        sys.stderr.write(f"{type(e).__name__}: {e}\n")
        return 2
    except Exception as e:  # noqa: BLE001
        log.exception("fatal_error")
        sys.stderr.write(f"Fatal error: {e}\n")
        return 1

    out = resolved if ns.show_secrets else redact_secrets(resolved)
    log.info("config_resolved", fields=sorted(resolved))
    sys.stdout.write(json.dumps(out, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
