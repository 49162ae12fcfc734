"""Configuration dataclass for mockfunc.

Provides MockFuncConfig for defaults shared by every mock container. Test
suites can construct configuration programmatically or load it from
environment variables via from_env().

Environment Variables:
    MOCKFUNC_CALLS_COMPLETION_IMMEDIATELY: Default for the immediate-dispatch
        flag of new mocks (default: true)
    MOCKFUNC_VERBOSE: Log full input/output values instead of truncating them
        (default: false)
    MOCKFUNC_MAX_REPR_LENGTH: Max characters of a value rendered in log
        messages when not verbose (default: 200)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

__all__ = [
    "ConfigurationError",
    "MockFuncConfig",
    "get_default_config",
    "set_default_config",
]

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        message = "Configuration validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        super().__init__(message)


def _parse_bool(raw: str | None, default: bool, *, source: str) -> bool | str:
    """Parse a boolean env value, returning an error string when invalid."""
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return f"{source}: expected a boolean, got '{raw}'"


def _parse_int(raw: str | None, default: int, *, source: str) -> int | str:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return f"{source}: expected an integer, got '{raw}'"


@dataclass(frozen=True)
class MockFuncConfig:
    """Defaults applied to newly constructed mocks.

    Attributes:
        calls_completion_immediately: Initial value of a mock's
            immediate-dispatch flag.
            Env: MOCKFUNC_CALLS_COMPLETION_IMMEDIATELY (default: true)
        verbose: Render full values in log messages.
            Env: MOCKFUNC_VERBOSE (default: false)
        max_repr_length: Truncation limit for values in log messages.
            Env: MOCKFUNC_MAX_REPR_LENGTH (default: 200)

    Example:
        # Programmatic construction:
        config = MockFuncConfig(calls_completion_immediately=False)
        mock = MockFunc[str, int](config=config)

        # Load from environment:
        config = MockFuncConfig.from_env()
    """

    calls_completion_immediately: bool = True
    verbose: bool = False
    max_repr_length: int = 200

    @classmethod
    def from_env(cls, *, validate: bool = True) -> MockFuncConfig:
        """Create MockFuncConfig from environment variables.

        Args:
            validate: If True (default), run validation and raise
                ConfigurationError on any errors. Unparseable values always
                raise.

        Returns:
            MockFuncConfig instance with values from environment or defaults.

        Raises:
            ConfigurationError: If a value cannot be parsed, or validate=True
                and the configuration is invalid.
        """
        immediate = _parse_bool(
            os.environ.get("MOCKFUNC_CALLS_COMPLETION_IMMEDIATELY"),
            True,
            source="MOCKFUNC_CALLS_COMPLETION_IMMEDIATELY",
        )
        verbose = _parse_bool(
            os.environ.get("MOCKFUNC_VERBOSE"), False, source="MOCKFUNC_VERBOSE"
        )
        max_repr_length = _parse_int(
            os.environ.get("MOCKFUNC_MAX_REPR_LENGTH"),
            200,
            source="MOCKFUNC_MAX_REPR_LENGTH",
        )

        parse_errors = [
            value
            for value in (immediate, verbose, max_repr_length)
            if isinstance(value, str)
        ]
        if parse_errors:
            raise ConfigurationError(parse_errors)

        config = cls(
            calls_completion_immediately=bool(immediate),
            verbose=bool(verbose),
            max_repr_length=int(max_repr_length),
        )

        if validate:
            errors = config.validate()
            if errors:
                raise ConfigurationError(errors)

        return config

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages. Empty list if configuration is valid.
        """
        errors: list[str] = []
        if self.max_repr_length <= 0:
            errors.append(
                f"max_repr_length must be positive, got: {self.max_repr_length}"
            )
        return errors


_default_config: MockFuncConfig | None = None


def get_default_config() -> MockFuncConfig:
    """Return the process-wide default config, loading it from env on first use.

    Invalid MOCKFUNC_* values are logged and replaced by the defaults so that
    a malformed environment never prevents a mock from being constructed.
    """
    global _default_config
    if _default_config is None:
        try:
            _default_config = MockFuncConfig.from_env()
        except ConfigurationError as exc:
            logger.warning("Ignoring invalid mockfunc environment: %s", exc.errors)
            _default_config = MockFuncConfig()
    return _default_config


def set_default_config(config: MockFuncConfig | None) -> None:
    """Replace the default config. Pass None to reload from env on next use."""
    global _default_config
    _default_config = config
