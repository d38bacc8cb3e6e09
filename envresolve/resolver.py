"""Typed resolution of environment variables.

Each operation turns one raw string (or its absence) into one validated value.
Absence and content validation are handled separately:

- absent + default configured -> default is returned as-is (bounds and allowed
  sets are not applied; defaults come from code, not from the environment)
- absent + no default -> MissingRequiredVariable
- present -> validated against the allowed set or parsed and bound-checked

Integer parsing is deliberately loose: the longest leading base-10 integer is
taken and the remainder ignored, so "8080abc" resolves to 8080.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from envresolve.errors import (
    AboveMaximum,
    BelowMinimum,
    InvalidValue,
    MissingRequiredVariable,
    NotANumber,
)
from envresolve.fields import MISSING, FieldKind, FieldSpec, freeze_allowed
from envresolve.notifications import LoggingSink, Notification, NotificationKind, NotificationSink


_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(raw: str) -> int | None:
    """Parse the leading base-10 integer of `raw`, or return None if there is none.

    Leading whitespace and a single sign are accepted; anything after the
    digits is ignored.
    """

    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _check_name(name: str) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("environment variable name must be a non-empty string")


class ConfigResolver:
    """Resolve typed fields from a read-only environment snapshot.

    The resolver holds no state besides its inputs; every call is independent
    and fields may be resolved in any order.
    """

    def __init__(self, environ: Mapping[str, str | None], sink: NotificationSink | None = None):
        self._environ = environ
        self._sink: NotificationSink = sink if sink is not None else LoggingSink()

    @property
    def environ(self) -> Mapping[str, str | None]:
        return self._environ

    def _lookup(self, name: str) -> str | None:
        _check_name(name)
        return self._environ.get(name)

    def _use_default(self, name: str, default: Any) -> Any:
        self._sink.notify(Notification(NotificationKind.DEFAULT_USED, name, default))
        return default

    # strings

    def resolve_optional_string(
        self,
        name: str,
        *,
        default: Any = MISSING,
        allowed: Iterable[str] | None = None,
    ) -> str | None:
        allowed_set = freeze_allowed(allowed)
        raw = self._lookup(name)
        if raw is None:
            if default is MISSING:
                raise MissingRequiredVariable(name)
            return self._use_default(name, default)

        if allowed_set is not None and raw not in allowed_set:
            self._sink.notify(Notification(NotificationKind.UNSUPPORTED_VALUE, name, raw))
            raise InvalidValue(name, raw, reason="not in allowed set")

        return raw

    def resolve_string(
        self,
        name: str,
        *,
        default: Any = MISSING,
        allowed: Iterable[str] | None = None,
    ) -> str:
        # A None default cannot satisfy a required field.
        value = self.resolve_optional_string(
            name,
            default=MISSING if default is None else default,
            allowed=allowed,
        )
        if value is None:
            raise MissingRequiredVariable(name)
        return value

    # integers

    def resolve_optional_number(
        self,
        name: str,
        *,
        default: Any = MISSING,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int | None:
        raw = self._lookup(name)
        if raw is None:
            if default is MISSING:
                raise MissingRequiredVariable(name)
            return self._use_default(name, default)

        value = parse_leading_int(raw)
        if value is None:
            raise NotANumber(name, raw)
        if minimum is not None and value < minimum:
            raise BelowMinimum(name, raw, minimum)
        if maximum is not None and value > maximum:
            raise AboveMaximum(name, raw, maximum)

        return value

    def resolve_number(
        self,
        name: str,
        *,
        default: Any = MISSING,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        value = self.resolve_optional_number(
            name,
            default=MISSING if default is None else default,
            minimum=minimum,
            maximum=maximum,
        )
        if value is None:
            raise MissingRequiredVariable(name)
        return value

    def resolve(self, field: FieldSpec) -> str | int | None:
        """Resolve a declared field, dispatching on its kind and `required` flag."""

        if field.kind is FieldKind.STRING:
            op = self.resolve_string if field.required else self.resolve_optional_string
            return op(field.name, default=field.default, allowed=field.allowed)

        op_num = self.resolve_number if field.required else self.resolve_optional_number
        return op_num(
            field.name,
            default=field.default,
            minimum=field.minimum,
            maximum=field.maximum,
        )
