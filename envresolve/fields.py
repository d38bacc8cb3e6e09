from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class _Missing:
    """Marker for "no default configured" (distinct from a default of None)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def freeze_allowed(allowed: Iterable[str] | None) -> frozenset[str] | None:
    """Snapshot an allowed-value collection; a bare string is rejected."""

    if allowed is None:
        return None
    if isinstance(allowed, (str, bytes)):
        raise ValueError("allowed values must be a collection of strings, not a single string")
    return frozenset(allowed)


class FieldKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """How to resolve one environment variable.

    `default` is MISSING when the variable has no fallback. A default of None
    is only meaningful for optional fields (`required=False`).
    """

    name: str
    kind: FieldKind = FieldKind.STRING
    default: Any = MISSING
    allowed: frozenset[str] | None = None
    minimum: int | None = None
    maximum: int | None = None
    required: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("field name must be a non-empty string")
        if not isinstance(self.kind, FieldKind):
            object.__setattr__(self, "kind", FieldKind(self.kind))

        if self.kind is FieldKind.STRING:
            if self.minimum is not None or self.maximum is not None:
                raise ValueError(f"{self.name}: bounds only apply to integer fields")
            object.__setattr__(self, "allowed", freeze_allowed(self.allowed))
        else:
            if self.allowed is not None:
                raise ValueError(f"{self.name}: allowed values only apply to string fields")
            if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
                raise ValueError(f"{self.name}: minimum {self.minimum} exceeds maximum {self.maximum}")

        if self.default is None and self.required:
            raise ValueError(f"{self.name}: a None default requires required=False")

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


def string_field(
    name: str,
    *,
    default: Any = MISSING,
    allowed: Iterable[str] | None = None,
    required: bool = True,
) -> FieldSpec:
    return FieldSpec(
        name=name,
        kind=FieldKind.STRING,
        default=default,
        allowed=freeze_allowed(allowed),
        required=required,
    )


def number_field(
    name: str,
    *,
    default: Any = MISSING,
    minimum: int | None = None,
    maximum: int | None = None,
    required: bool = True,
) -> FieldSpec:
    return FieldSpec(
        name=name,
        kind=FieldKind.INTEGER,
        default=default,
        minimum=minimum,
        maximum=maximum,
        required=required,
    )
