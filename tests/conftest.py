"""Shared pytest fixtures for specification documents and config files."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from vouch.spec.registry import SpecRegistry


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper that dumps ``data`` as YAML under ``tmp_path``."""

    def write(name: str, data: Any) -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else yaml.safe_dump(data, sort_keys=False)
        path.write_text(text, encoding="utf-8")
        return path

    return write


@pytest.fixture
def registry() -> SpecRegistry:
    """Return an empty registry isolated from the process-wide default."""
    return SpecRegistry()


@pytest.fixture
def booking_document() -> dict[str, Any]:
    """Return a spec document with a record, a nested collection and a check."""
    return {
        "version": 1,
        "types": {
            "Guest": {
                "fields": [
                    {"name": "email", "rules": ["email", {"max_len": {"max": 255}}]},
                    {"name": "age", "rules": [{"range": {"min": 18, "max": 120}}]},
                ],
            },
            "Room": {
                "fields": [
                    {"name": "adults", "rules": [{"range": {"min": 1, "max": 4}}]},
                ],
            },
            "Booking": {
                "fields": [
                    {"name": "guest", "type": "Guest"},
                    {
                        "name": "rooms",
                        "rules": [{"min_items": {"min": 1}}],
                        "each": {"type": "Room"},
                    },
                    {"name": "note", "inner": {"rules": [{"max_len": {"max": 20}}]}},
                    {"name": "check_in"},
                    {"name": "check_out"},
                ],
                "checks": [
                    {
                        "check": {"field": "check_out", "op": "gt", "other": "check_in"},
                        "code": "invalid_dates",
                        "message": "Check-out must be after check-in",
                        "path": "check_out",
                    },
                ],
            },
        },
    }
