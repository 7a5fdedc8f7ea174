"""Configuration defaults."""

from __future__ import annotations

from vouch.constants.codes import CROSS_FIELD_FAILED, DEFAULT_CROSS_FIELD_MESSAGE

CONFIG_FILENAME: str = "vouch.yaml"

VALID_OR_POLICIES: frozenset[str] = frozenset({"last", "all"})
DEFAULT_OR_POLICY: str = "last"

DEFAULT_CHECK_CODE: str = CROSS_FIELD_FAILED
DEFAULT_CHECK_MESSAGE: str = DEFAULT_CROSS_FIELD_MESSAGE

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "or_policy",
        "check_code",
        "check_message",
        "strict_keys",
    }
)
