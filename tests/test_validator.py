"""Tests for JsonValidator.

Covers:
- Schemas given as text (single quotes allowed) or as decoded maps
- Invalid schemas raise ConfigurationError at creation
- validate / validate_all raise ValidationError listing every violation
- is_valid and violations report without raising
- Violation paths for nested and array instances
- Engine failures and input immutability
"""

from __future__ import annotations

from typing import Any

import pytest

from json_document import (
    ConfigurationError,
    JsonBean,
    JsonDocumentError,
    JsonValidator,
    ValidationError,
    Violation,
)
from json_document.parser import string_to_entity

FOO_SCHEMA = '{"properties":{"foo":{"enum":["FOO"]}},"required":["foo"]}'


def _bean(text: str) -> JsonBean:
    return string_to_entity(text, JsonBean)


class _FailingProvider:
    def violations(self, tree: Any) -> list[Violation]:
        raise RuntimeError("engine down")


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


class TestCreate:
    def test_empty_schema_text(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            JsonValidator.create("")
        assert exc_info.value.__cause__ is not None

    def test_schema_not_valid_against_metaschema(self) -> None:
        with pytest.raises(ConfigurationError):
            JsonValidator.create('{"type": 12}')

    def test_schema_with_single_quotes(self) -> None:
        validator = JsonValidator.create("{'required': ['foo']}")
        assert validator.is_valid(_bean("{'foo':1}"))

    def test_schema_as_map(self) -> None:
        validator = JsonValidator.create({"required": ["foo"]})
        assert not validator.is_valid(JsonBean.create())


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_conforming_document(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        assert validator.validate(_bean("{'foo':'FOO'}")) is None

    def test_enum_violation(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_bean("{'foo':'BAR'}"))
        violations = exc_info.value.violations
        assert len(violations) == 1
        assert violations[0].path == "$.foo"
        assert violations[0].validator == "enum"

    def test_missing_required_property(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(JsonBean.create())
        assert exc_info.value.violations[0].path == "$"
        assert exc_info.value.violations[0].validator == "required"

    def test_all_violations_reported(self) -> None:
        validator = JsonValidator.create(
            {
                "properties": {
                    "a": {"type": "string"},
                    "b": {"type": "integer"},
                }
            }
        )
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_bean("{'a':1,'b':'x'}"))
        assert [v.path for v in exc_info.value.violations] == ["$.a", "$.b"]

    def test_message_lists_violations(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(_bean("{'foo':'BAR'}"))
        assert "$.foo" in str(exc_info.value)

    def test_document_not_modified(self) -> None:
        validator = JsonValidator.create(
            {"properties": {"foo": {"default": "FOO"}}}
        )
        bean = JsonBean.create()
        validator.validate(bean)
        assert bean == JsonBean.create()

    def test_validation_error_is_document_error(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        with pytest.raises(JsonDocumentError):
            validator.validate(JsonBean.create())


class TestValidateAll:
    SCHEMA = '{"type":"array","items":{"required":["foo"]}}'

    def test_conforming_list(self) -> None:
        validator = JsonValidator.create(self.SCHEMA)
        validator.validate_all([_bean("{'foo':1}"), _bean("{'foo':2}")])

    def test_violation_path_has_index(self) -> None:
        validator = JsonValidator.create(self.SCHEMA)
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_all([_bean("{'foo':1}"), JsonBean.create()])
        assert exc_info.value.violations[0].path == "$[1]"

    def test_none_entries_validated_as_null(self) -> None:
        validator = JsonValidator.create('{"type":"array","items":{"type":"object"}}')
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_all([JsonBean.create(), None])
        assert exc_info.value.violations[0].validator == "type"


# ---------------------------------------------------------------------------
# Non-raising checks and engine failures
# ---------------------------------------------------------------------------


class TestReporting:
    def test_is_valid(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        assert validator.is_valid(_bean("{'foo':'FOO'}"))
        assert not validator.is_valid(_bean("{'foo':'BAR'}"))

    def test_violations_empty_when_valid(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        assert validator.violations(_bean("{'foo':'FOO'}")) == []

    def test_violations_nested_path(self) -> None:
        validator = JsonValidator.create(
            {"properties": {"a": {"properties": {"b": {"type": "string"}}}}}
        )
        found = validator.violations(_bean("{'a':{'b':1}}"))
        assert [str(v).split(":")[0] for v in found] == ["$.a.b"]

    def test_undefined_input(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        with pytest.raises(ValidationError, match="undefined") as exc_info:
            validator.validate(None)  # type: ignore[arg-type]
        assert exc_info.value.violations == []

    def test_undefined_list_input(self) -> None:
        validator = JsonValidator.create(FOO_SCHEMA)
        with pytest.raises(ValidationError, match="undefined"):
            validator.validate_all(None)  # type: ignore[arg-type]

    def test_engine_error_wrapped(self) -> None:
        validator = JsonValidator(_FailingProvider())
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(JsonBean.create())
        assert exc_info.value.violations == []
        assert isinstance(exc_info.value.__cause__, RuntimeError)
