"""Project configuration loaded from ``vouch.yaml``."""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from vouch.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_CHECK_CODE,
    DEFAULT_CHECK_MESSAGE,
    DEFAULT_OR_POLICY,
    VALID_OR_POLICIES,
)
from vouch.exceptions import ConfigError
from vouch.types.common import OrPolicy


@dataclass(frozen=True)
class VouchConfig:
    """Defaults applied when compiling specification documents."""

    or_policy: OrPolicy = DEFAULT_OR_POLICY  # type: ignore[assignment]
    check_code: str = DEFAULT_CHECK_CODE
    check_message: str = DEFAULT_CHECK_MESSAGE
    strict_keys: bool = True


def load_config(root: Path, config_path: Path | None = None) -> VouchConfig:
    """Load and validate config from ``vouch.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return VouchConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in raw:
        if key not in ALLOWED_CONFIG_KEYS:
            raise ConfigError(f"Unknown config key '{key}' in {path}{_suggest_key(str(key))}")

    or_policy = raw.get("or_policy", DEFAULT_OR_POLICY)
    if not isinstance(or_policy, str) or or_policy not in VALID_OR_POLICIES:
        raise ConfigError(f"or_policy must be one of {sorted(VALID_OR_POLICIES)}, got {or_policy!r}")

    check_code = _non_empty_string(raw.get("check_code", DEFAULT_CHECK_CODE), "check_code")
    check_message = _non_empty_string(raw.get("check_message", DEFAULT_CHECK_MESSAGE), "check_message")

    strict_keys = raw.get("strict_keys", True)
    if not isinstance(strict_keys, bool):
        raise ConfigError("strict_keys must be a boolean")

    return VouchConfig(
        or_policy=or_policy,  # type: ignore[arg-type]
        check_code=check_code,
        check_message=check_message,
        strict_keys=strict_keys,
    )


def _non_empty_string(value: Any, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return value


def _suggest_key(key: str) -> str:
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    return f" (did you mean '{matches[0]}'?)" if matches else ""
