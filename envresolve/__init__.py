"""Typed environment-variable resolution.

Read the environment once at startup, resolve each field through a
`ConfigResolver`, and fail fast with a `ConfigError` subclass on anything
missing or invalid.
"""

from __future__ import annotations

from envresolve.base_env import BaseEnv, EnvDefaults
from envresolve.environment import snapshot_environment
from envresolve.errors import (
    AboveMaximum,
    BelowMinimum,
    ConfigError,
    DotenvNotFound,
    EnvResolveError,
    InvalidValue,
    MissingRequiredVariable,
    NotANumber,
    SchemaError,
)
from envresolve.fields import MISSING, FieldKind, FieldSpec, number_field, string_field
from envresolve.notifications import (
    CapturingSink,
    LoggingSink,
    Notification,
    NotificationKind,
    NotificationSink,
)
from envresolve.resolver import ConfigResolver, parse_leading_int
from envresolve.schema import load_schema, load_settings, parse_schema

__all__ = [
    "AboveMaximum",
    "BaseEnv",
    "BelowMinimum",
    "CapturingSink",
    "ConfigError",
    "ConfigResolver",
    "DotenvNotFound",
    "EnvDefaults",
    "EnvResolveError",
    "FieldKind",
    "FieldSpec",
    "InvalidValue",
    "LoggingSink",
    "MISSING",
    "MissingRequiredVariable",
    "NotANumber",
    "Notification",
    "NotificationKind",
    "NotificationSink",
    "SchemaError",
    "__version__",
    "load_schema",
    "load_settings",
    "number_field",
    "parse_leading_int",
    "parse_schema",
    "snapshot_environment",
    "string_field",
]

__version__ = "0.1.0"
