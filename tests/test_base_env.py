from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass

import pytest

from envresolve.base_env import BaseEnv, EnvDefaults
from envresolve.errors import InvalidValue, MissingRequiredVariable
from envresolve.notifications import CapturingSink, NotificationKind
from envresolve.resolver import ConfigResolver


DEFAULTS = EnvDefaults(port=8080, host="localhost", from_email="noreply@example.com")


def test_base_env_with_defaults() -> None:
    sink = CapturingSink()
    env = BaseEnv.load(ConfigResolver({"SESSION_SECRET": "abc123", "NODE_ENV": "test"}, sink), DEFAULTS)

    assert env == BaseEnv(
        session_secret="abc123",
        node_env="test",
        port=8080,
        server_host="localhost",
        from_email="noreply@example.com",
    )
    assert [n.name for n in sink.of_kind(NotificationKind.DEFAULT_USED)] == ["PORT", "SERVER_HOST", "FROM_EMAIL"]
    assert env.is_production is False


def test_base_env_from_environment() -> None:
    environ = {
        "SESSION_SECRET": "s",
        "NODE_ENV": "production",
        "PORT": "3000",
        "SERVER_HOST": "api.example.com",
        "FROM_EMAIL": "ops@example.com",
    }
    sink = CapturingSink()
    env = BaseEnv.load(ConfigResolver(environ, sink), DEFAULTS)

    assert env.port == 3000
    assert env.server_host == "api.example.com"
    assert env.is_production
    assert sink.notifications == []
    with pytest.raises(FrozenInstanceError):
        env.port = 1  # type: ignore[misc]


def test_base_env_requires_session_secret_first() -> None:
    with pytest.raises(MissingRequiredVariable) as ei:
        BaseEnv.load(ConfigResolver({"NODE_ENV": "bogus"}, CapturingSink()), DEFAULTS)
    assert ei.value.name == "SESSION_SECRET"


def test_base_env_rejects_unknown_node_env() -> None:
    sink = CapturingSink()
    with pytest.raises(InvalidValue):
        BaseEnv.load(ConfigResolver({"SESSION_SECRET": "s", "NODE_ENV": "staging"}, sink), DEFAULTS)
    assert [n.kind for n in sink.notifications] == [NotificationKind.UNSUPPORTED_VALUE]


@dataclass(frozen=True)
class _MailerEnv(BaseEnv):
    smtp_port: int = 25

    @classmethod
    def resolve_fields(cls, resolver: ConfigResolver, defaults: EnvDefaults) -> dict[str, object]:
        fields = super().resolve_fields(resolver, defaults)
        fields["smtp_port"] = resolver.resolve_number("SMTP_PORT", default=25, minimum=1, maximum=65535)
        return fields


def test_subclass_extends_fields() -> None:
    env = _MailerEnv.load(
        ConfigResolver({"SESSION_SECRET": "s", "NODE_ENV": "development", "SMTP_PORT": "587"}, CapturingSink()),
        DEFAULTS,
    )
    assert isinstance(env, _MailerEnv)
    assert env.smtp_port == 587
    assert env.node_env == "development"
