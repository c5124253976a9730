"""Configuration properties resolved through value parsers.

Responsibilities:
- Declare typed configuration properties with defaults and parsers.
- Resolve raw mappings and environment variables into typed snapshots.
- Render resolved values back into canonical text for display.

Key types:
- `ConfigProperty`: one key, its parser and its fallback policy.
- `ConfigSnapshot`: resolved values for a set of properties.
- `ConfigLoader`: static construction helpers for `ConfigSnapshot`.
- `RuntimeSettings`: settings for the package's own tooling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import os
import re
from typing import Any, Generic, Iterable, Mapping, NoReturn, TypeVar

from .errors import InvalidValueError
from .kinds import kind_label
from .parsers import EnumParser, Parser
from .parsing import normalize_optional_string
from .telemetry.logger import ConfigEventLogger

T = TypeVar("T")

_ENV_KEY_SEPARATOR_PATTERN = re.compile(r"[-.\s]+")
DEFAULT_ENV_PREFIX = "WAYSTONES_"


@dataclass(frozen=True, slots=True)
class ConfigProperty(Generic[T]):
    """A configuration key bound to the parser that reads its value.

    Attributes:
        key: Property key in the source mapping.
        parser: Parser converting the raw value.
        default: Value used when the raw value is absent or invalid.
        required: Whether an absent or invalid value is an error.
        secret: Whether raw values must be kept out of logs.
        description: Human-readable summary for listings.
    """

    key: str
    parser: Parser[T]
    default: T | None = None
    required: bool = False
    secret: bool = False
    description: str = ""

    @property
    def kind(self) -> str:
        """Return the diagnostic label of the property parser."""

        return kind_label(self.parser)

    def resolve(
        self,
        payload: Mapping[str, Any],
        logger: ConfigEventLogger | None = None,
    ) -> T | None:
        """Resolve this property from a raw payload.

        Raises:
            InvalidValueError: If the property is required and has no valid value.
        """

        raw = payload.get(self.key)
        if raw is None:
            if self.required:
                self._reject(None, logger)
            if logger is not None and self.default is not None:
                logger.log_missing(self.key, self.render(self.default))
            return self.default

        parsed = self.parser.parse(raw)
        if parsed is not None:
            return parsed

        if self.required:
            self._reject(raw, logger)
        if logger is not None:
            default_text = "none" if self.default is None else self.render(self.default)
            logger.log_fallback(self.key, self.kind, raw, default_text, secret=self.secret)
        return self.default

    def render(self, value: T) -> str:
        """Render a value of this property in canonical text."""

        return self.parser.render(value)

    def _reject(self, raw: object, logger: ConfigEventLogger | None) -> NoReturn:
        """Log and raise the error for a required property without a valid value."""

        if logger is not None:
            logger.log_invalid(self.key, self.kind, raw, secret=self.secret)
        shown = None if raw is None else ("<redacted>" if self.secret else str(raw))
        raise InvalidValueError(
            key=self.key,
            kind=self.kind,
            raw=shown,
            hint=self.description or None,
        )


@dataclass(frozen=True, slots=True)
class ConfigSnapshot:
    """Resolved configuration values keyed by property key.

    Attributes:
        properties: Properties in declaration order.
        values: Resolved typed values.
    """

    properties: tuple[ConfigProperty[Any], ...]
    values: Mapping[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Any:
        """Return the resolved value for a declared key."""

        if key not in self.values:
            raise KeyError(f"Unknown configuration key `{key}`.")
        return self.values[key]

    def render(self) -> dict[str, str | None]:
        """Return canonical text for every property, `None` when unset."""

        rendered: dict[str, str | None] = {}
        for prop in self.properties:
            value = self.values.get(prop.key)
            rendered[prop.key] = None if value is None else prop.render(value)
        return rendered


class ConfigLoader:
    """Factory methods for creating `ConfigSnapshot` from raw sources."""

    @staticmethod
    def from_mapping(
        properties: Iterable[ConfigProperty[Any]],
        payload: Mapping[str, Any],
        logger: ConfigEventLogger | None = None,
        allow_unknown: bool = False,
    ) -> ConfigSnapshot:
        """Resolve properties from an already-loaded mapping.

        Raises:
            ValueError: On duplicate property keys or unsupported payload keys.
            InvalidValueError: If a required property has no valid value.
        """

        declared = ConfigLoader._validate_properties(properties)
        if not allow_unknown:
            ConfigLoader._validate_keys(declared, payload)

        values = {prop.key: prop.resolve(payload, logger) for prop in declared}
        return ConfigSnapshot(properties=declared, values=values)

    @staticmethod
    def from_env(
        properties: Iterable[ConfigProperty[Any]],
        env: Mapping[str, str] | None = None,
        prefix: str = DEFAULT_ENV_PREFIX,
        logger: ConfigEventLogger | None = None,
    ) -> ConfigSnapshot:
        """Resolve properties from prefixed environment variables.

        A property `wait-time` is read from `WAYSTONES_WAIT_TIME` with the
        default prefix. Blank variables count as absent.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env
        declared = ConfigLoader._validate_properties(properties)

        payload: dict[str, str] = {}
        for prop in declared:
            value = normalize_optional_string(env_map.get(env_key(prop.key, prefix)))
            if value is not None:
                payload[prop.key] = value

        return ConfigLoader.from_mapping(declared, payload, logger=logger, allow_unknown=True)

    @staticmethod
    def _validate_properties(
        properties: Iterable[ConfigProperty[Any]],
    ) -> tuple[ConfigProperty[Any], ...]:
        """Reject duplicate property keys."""

        declared = tuple(properties)
        seen: set[str] = set()
        for prop in declared:
            if prop.key in seen:
                raise ValueError(f"Configuration key `{prop.key}` is declared more than once.")
            seen.add(prop.key)
        return declared

    @staticmethod
    def _validate_keys(
        declared: tuple[ConfigProperty[Any], ...], payload: Mapping[str, Any]
    ) -> None:
        """Reject payload keys with no declared property."""

        known = {prop.key for prop in declared}
        unknown = sorted(str(key) for key in payload if key not in known)
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"Configuration includes unsupported key(s): {key_list}.")


def env_key(key: str, prefix: str = DEFAULT_ENV_PREFIX) -> str:
    """Return the environment variable name for a property key."""

    return prefix + _ENV_KEY_SEPARATOR_PATTERN.sub("_", key.strip()).upper()


class LogLevel(Enum):
    """Log levels accepted by `WAYSTONES_LOG_LEVEL`."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


LOG_LEVEL = ConfigProperty(
    key="log-level",
    parser=EnumParser(LogLevel),
    default=LogLevel.INFO,
    description="Minimum level of configuration log events.",
)


@dataclass(frozen=True, slots=True)
class RuntimeSettings:
    """Settings for the package's own CLI and logging.

    Attributes:
        log_level: Minimum level of emitted configuration log events.
    """

    log_level: LogLevel = LogLevel.INFO

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> RuntimeSettings:
        """Read runtime settings from `WAYSTONES_*` environment variables."""

        snapshot = ConfigLoader.from_env([LOG_LEVEL], env=env)
        return RuntimeSettings(log_level=snapshot.get(LOG_LEVEL.key))

    def create_logger(self, sink: Any = None) -> ConfigEventLogger:
        """Create a configuration event logger honoring the configured level."""

        return ConfigEventLogger(sink=sink, level=self.log_level.value)
