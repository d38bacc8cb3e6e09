"""Declarative field schemas.

A schema file is YAML with a single `fields` mapping, in declaration order:

    fields:
      SESSION_SECRET: {type: string}
      NODE_ENV: {type: string, allowed: [development, production, test]}
      PORT: {type: integer, default: 8080, min: 1, max: 65535}
      LOG_DIR: {type: string, required: false, default: null}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from envresolve.errors import SchemaError
from envresolve.fields import MISSING, FieldKind, FieldSpec
from envresolve.resolver import ConfigResolver


_KNOWN_KEYS = frozenset({"type", "default", "allowed", "min", "max", "required"})


def _int_or_none(raw: Mapping[str, Any], key: str, *, path: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError("must be an integer", path=f"{path}.{key}")
    return value


def _field_from_mapping(name: str, raw: Any, *, path: str) -> FieldSpec:
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise SchemaError("field declaration must be a mapping", path=path)

    unknown = sorted(str(k) for k in raw if k not in _KNOWN_KEYS)
    if unknown:
        raise SchemaError(f"unknown keys: {', '.join(unknown)}", path=path)

    type_name = raw.get("type", FieldKind.STRING.value)
    try:
        kind = FieldKind(type_name)
    except ValueError:
        raise SchemaError(f"unsupported type {type_name!r}", path=f"{path}.type") from None

    required = raw.get("required", True)
    if not isinstance(required, bool):
        raise SchemaError("must be a boolean", path=f"{path}.required")

    default = raw["default"] if "default" in raw else MISSING
    if default is not MISSING and default is not None:
        if kind is FieldKind.STRING and not isinstance(default, str):
            raise SchemaError("must be a string", path=f"{path}.default")
        if kind is FieldKind.INTEGER and (isinstance(default, bool) or not isinstance(default, int)):
            raise SchemaError("must be an integer", path=f"{path}.default")

    allowed = raw.get("allowed")
    if allowed is not None:
        if not isinstance(allowed, list) or not all(isinstance(x, str) for x in allowed):
            raise SchemaError("must be a list of strings", path=f"{path}.allowed")
        allowed = frozenset(allowed)

    try:
        return FieldSpec(
            name=name,
            kind=kind,
            default=default,
            allowed=allowed,
            minimum=_int_or_none(raw, "min", path=path),
            maximum=_int_or_none(raw, "max", path=path),
            required=required,
        )
    except ValueError as e:
        raise SchemaError(str(e), path=path) from e


def parse_schema(data: Any) -> tuple[FieldSpec, ...]:
    """Build field specs from already-parsed YAML data."""

    if not isinstance(data, Mapping):
        raise SchemaError("top-level YAML must be a mapping")

    fields_raw = data.get("fields")
    if not isinstance(fields_raw, Mapping) or not fields_raw:
        raise SchemaError("must be a non-empty mapping", path="fields")

    out: list[FieldSpec] = []
    for name, raw in fields_raw.items():
        if not isinstance(name, str) or not name:
            raise SchemaError("field name must be a non-empty string", path="fields")
        out.append(_field_from_mapping(name, raw, path=f"fields.{name}"))
    return tuple(out)


def load_schema(path: str | Path) -> tuple[FieldSpec, ...]:
    """Load field specs from a YAML schema file.

    Raises:
        SchemaError: If the file is missing, not valid YAML, or malformed.
    """

    schema_path = Path(path)
    if not schema_path.exists():
        raise SchemaError("schema file not found", path=str(schema_path))

    try:
        data = yaml.safe_load(schema_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SchemaError(f"failed to parse YAML: {e}", path=str(schema_path)) from e

    return parse_schema(data)


def load_settings(fields: Iterable[FieldSpec], resolver: ConfigResolver) -> Mapping[str, Any]:
    """Resolve every field in order into a read-only mapping.

    The first ConfigError propagates; no partial configuration is returned.
    """

    resolved: dict[str, Any] = {}
    for field in fields:
        resolved[field.name] = resolver.resolve(field)
    return MappingProxyType(resolved)
