from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from envresolve.resolver import ConfigResolver


NodeEnv = Literal["development", "production", "test"]

VALID_NODE_ENV: frozenset[str] = frozenset({"development", "production", "test"})


@dataclass(frozen=True, slots=True)
class EnvDefaults:
    port: int
    host: str
    from_email: str


@dataclass(frozen=True)
class BaseEnv:
    """Variables every service shares.

    Subclasses add their own fields and extend `resolve_fields`, calling the parent
    first so the shared fields keep their resolution order.
    """

    session_secret: str
    node_env: NodeEnv
    port: int
    server_host: str
    from_email: str

    @classmethod
    def resolve_fields(cls, resolver: ConfigResolver, defaults: EnvDefaults) -> dict[str, object]:
        return {
            "session_secret": resolver.resolve_string("SESSION_SECRET"),
            "node_env": resolver.resolve_string("NODE_ENV", allowed=VALID_NODE_ENV),
            "port": resolver.resolve_number("PORT", default=defaults.port),
            "server_host": resolver.resolve_string("SERVER_HOST", default=defaults.host),
            "from_email": resolver.resolve_string("FROM_EMAIL", default=defaults.from_email),
        }

    @classmethod
    def load(cls, resolver: ConfigResolver, defaults: EnvDefaults) -> BaseEnv:
        return cls(**cls.resolve_fields(resolver, defaults))

    @property
    def is_production(self) -> bool:
        return self.node_env == "production"
