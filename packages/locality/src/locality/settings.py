"""Settings readers for locality configuration."""

import math
import os
from typing import Any, Mapping

from locality.domain.exceptions import LocalityConfigError
from locality.domain.settings import LocalitySettings

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})

# Recognised settings keys
_KEYS = ("COMPARE_NODE_IP", "RESOLUTION_TIMEOUT_SECONDS")

ENV_PREFIX = "LOCALITY_"


def parse_bool(name: str, value: Any) -> bool:
    """Interpret a configuration value as a bool.

    Accepts real bools and the strings true/false, 1/0, yes/no, on/off
    (case-insensitive, surrounding whitespace ignored).

    Raises:
        LocalityConfigError: If the value is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False

    raise LocalityConfigError(f"{name} must be a boolean, got: {value!r}")


def parse_timeout(name: str, value: Any) -> float:
    """Interpret a configuration value as a number of seconds.

    Raises:
        LocalityConfigError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise LocalityConfigError(f"{name} must be a number, got: {value!r}")

    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise LocalityConfigError(f"{name} must be a number, got: {value!r}") from e

    if not math.isfinite(seconds):
        raise LocalityConfigError(f"{name} must be a finite number, got: {value!r}")
    return seconds


def get_locality_settings(settings: Mapping[str, Any]) -> LocalitySettings:
    """Convert a LOCALITY settings dict to a LocalitySettings domain object.

    Maps UPPER_CASE keys to snake_case domain fields. Every key is optional
    and unknown keys are ignored.

    Args:
        settings: Settings dict with UPPER_CASE keys

    Returns:
        LocalitySettings domain object

    Raises:
        LocalityConfigError: If a value is malformed or invalid
    """
    kwargs: dict[str, Any] = {}

    if "COMPARE_NODE_IP" in settings:
        kwargs["compare_node_ip"] = parse_bool(
            "COMPARE_NODE_IP", settings["COMPARE_NODE_IP"]
        )

    if "RESOLUTION_TIMEOUT_SECONDS" in settings:
        kwargs["resolution_timeout_seconds"] = parse_timeout(
            "RESOLUTION_TIMEOUT_SECONDS", settings["RESOLUTION_TIMEOUT_SECONDS"]
        )

    # Validation happens in __post_init__
    return LocalitySettings(**kwargs)


def get_locality_settings_from_env(
    environ: Mapping[str, str] | None = None,
) -> LocalitySettings:
    """Read locality settings from LOCALITY_* environment variables.

    Recognised variables are LOCALITY_COMPARE_NODE_IP and
    LOCALITY_RESOLUTION_TIMEOUT_SECONDS.

    Args:
        environ: Environment mapping. Defaults to os.environ.

    Raises:
        LocalityConfigError: If a variable holds a malformed value
    """
    env = os.environ if environ is None else environ
    settings = {
        key: env[f"{ENV_PREFIX}{key}"]
        for key in _KEYS
        if f"{ENV_PREFIX}{key}" in env
    }
    return get_locality_settings(settings)
