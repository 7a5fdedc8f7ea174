"""Tests for JSON Schema validation of violation output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from vouch import rules
from vouch.exceptions import ValidationError
from vouch.model.path import Path as FieldPath

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[1] / "schemas"
VIOLATIONS_SCHEMA_PATH: Path = SCHEMAS_DIR / "violations.schema.json"


@pytest.fixture()
def violations_schema() -> dict[str, Any]:
    """Load the violations JSON Schema."""
    return json.loads(VIOLATIONS_SCHEMA_PATH.read_text(encoding="utf-8"))


def _result(err: ValidationError) -> dict[str, Any]:
    return {"valid": not err, "violations": err.to_list()}


def _sample() -> ValidationError:
    err = ValidationError()
    err.extend(rules.email().apply("nope").prefixed("guest.email"))
    err.extend(rules.range(1, 4).apply(5).prefixed(FieldPath.parse("rooms[0].adults")))
    err.extend(rules.len_chars(1, 3).apply("abcdef").prefixed(FieldPath.from_key(0)))
    err.extend(rules.max_items(1).apply([1, 2]).prefixed(FieldPath.parse("cells[1][0]")))
    err.push(None, "cross_field_validation_failed", "Cross-field validation failed")
    return err


def test_violations_schema_is_valid_json_schema(violations_schema: dict[str, Any]) -> None:
    """Violations schema itself must be a valid JSON Schema document."""
    jsonschema.Draft202012Validator.check_schema(violations_schema)


def test_invalid_result_matches_schema(violations_schema: dict[str, Any]) -> None:
    jsonschema.validate(instance=_result(_sample()), schema=violations_schema)


def test_valid_result_matches_schema(violations_schema: dict[str, Any]) -> None:
    jsonschema.validate(instance=_result(ValidationError()), schema=violations_schema)


def test_meta_values_serialize_as_strings(violations_schema: dict[str, Any]) -> None:
    payload = _result(_sample())

    assert payload["violations"][1]["meta"] == {"min": "1", "max": "4"}
    jsonschema.validate(instance=json.loads(json.dumps(payload)), schema=violations_schema)


def test_schema_rejects_non_string_meta(violations_schema: dict[str, Any]) -> None:
    payload = _result(_sample())
    payload["violations"][0]["meta"] = {"max": 255}

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=violations_schema)


def test_schema_rejects_malformed_path(violations_schema: dict[str, Any]) -> None:
    payload = _result(_sample())
    payload["violations"][0]["path"] = "guest..email"

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=violations_schema)
