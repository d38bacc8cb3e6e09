from __future__ import annotations

import pytest

from envresolve.fields import MISSING, FieldKind, FieldSpec, number_field, string_field


def test_string_field_freezes_allowed_set() -> None:
    f = string_field("NODE_ENV", allowed=["development", "test"])
    assert f.kind is FieldKind.STRING
    assert f.allowed == frozenset({"development", "test"})
    assert f.has_default is False
    assert f.default is MISSING


def test_kind_accepts_plain_string() -> None:
    f = FieldSpec(name="PORT", kind="integer", default=8080)  # type: ignore[arg-type]
    assert f.kind is FieldKind.INTEGER
    assert f.has_default


def test_field_spec_is_immutable() -> None:
    f = number_field("PORT", default=8080)
    with pytest.raises(AttributeError):
        f.default = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "build",
    [
        lambda: FieldSpec(name=""),
        lambda: FieldSpec(name="HOST", minimum=1),
        lambda: FieldSpec(name="PORT", kind=FieldKind.INTEGER, allowed=frozenset({"1"})),
        lambda: number_field("PORT", minimum=10, maximum=1),
        lambda: string_field("LOG_DIR", default=None),
    ],
)
def test_inconsistent_declarations_are_rejected(build) -> None:
    with pytest.raises(ValueError):
        build()


def test_none_default_allowed_when_optional() -> None:
    f = string_field("LOG_DIR", default=None, required=False)
    assert f.has_default
    assert f.default is None


def test_missing_is_falsy_singleton() -> None:
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING


def test_single_string_allowed_is_rejected() -> None:
    with pytest.raises(ValueError):
        string_field("NODE_ENV", allowed="production")
    with pytest.raises(ValueError):
        FieldSpec(name="NODE_ENV", allowed="production")  # type: ignore[arg-type]


def test_allowed_from_generator_is_frozen() -> None:
    f = FieldSpec(name="NODE_ENV", allowed=(v for v in ["development", "test"]))  # type: ignore[arg-type]
    assert f.allowed == frozenset({"development", "test"})
