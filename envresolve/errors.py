from __future__ import annotations


class EnvResolveError(Exception):
    """Base exception for this project."""


class ConfigError(EnvResolveError):
    """Raised when an environment variable is missing or invalid.

    Every subclass identifies the offending variable via `name`; value-level
    failures also carry the raw `value` as read from the environment.
    """

    def __init__(self, message: str, *, name: str):
        super().__init__(message)
        self.name = name


class MissingRequiredVariable(ConfigError):
    def __init__(self, name: str):
        super().__init__(f"{name} must be defined", name=name)


class InvalidValue(ConfigError):
    def __init__(self, name: str, value: str, *, reason: str = "not in allowed set"):
        super().__init__(f"unsupported {name} value {value} ({reason})", name=name)
        self.value = value
        self.reason = reason


class NotANumber(ConfigError):
    def __init__(self, name: str, value: str):
        super().__init__(f"{name} value {value} is not a number", name=name)
        self.value = value


class BelowMinimum(ConfigError):
    def __init__(self, name: str, value: str, minimum: int):
        super().__init__(f"{name} value {value} must be at least {minimum}", name=name)
        self.value = value
        self.minimum = minimum


class AboveMaximum(ConfigError):
    def __init__(self, name: str, value: str, maximum: int):
        super().__init__(f"{name} value {value} must be no greater than {maximum}", name=name)
        self.value = value
        self.maximum = maximum


class SchemaError(EnvResolveError):
    """Raised when a field schema file is malformed."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class DotenvNotFound(EnvResolveError):
    """Raised when an explicitly requested `.env` file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"{path}: .env file not found")
        self.path = path
