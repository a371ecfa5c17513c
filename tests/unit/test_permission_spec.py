"""Unit tests for permission specs and normalization."""

import pytest

from crowdhub.domain.exceptions import ValidationError
from crowdhub.domain.value_objects import (
    LegacyPermission,
    StructuredPermission,
    normalize_permission,
    parse_permission,
    to_legacy_key,
)


def test_structured_passes_through() -> None:
    spec = StructuredPermission("articles", "edit")
    assert normalize_permission(spec) is spec


def test_legacy_key_uses_alias_first() -> None:
    aliases = {"create_hardware_request": StructuredPermission("hardware", "create")}
    result = normalize_permission(LegacyPermission("create_hardware_request"), aliases)
    assert result == StructuredPermission("hardware", "create")


def test_legacy_key_with_colon_splits() -> None:
    result = normalize_permission(LegacyPermission("tickets:assign"))
    assert result == StructuredPermission("tickets", "assign")


def test_legacy_key_splits_on_first_underscore() -> None:
    result = normalize_permission(LegacyPermission("view_audit_logs"))
    assert result == StructuredPermission("audit_logs", "view")


@pytest.mark.parametrize("key", ["dashboard", "_dashboard", "view_", ":read", "read:"])
def test_uninterpretable_legacy_key_raises(key: str) -> None:
    with pytest.raises(ValidationError):
        normalize_permission(LegacyPermission(key))


def test_to_legacy_key() -> None:
    assert to_legacy_key(StructuredPermission("articles", "edit")) == "edit_articles"


def test_key_property() -> None:
    assert StructuredPermission("articles", "*").key == "articles:*"


class TestParsePermission:
    """parse_permission accepts strings, mappings and specs."""

    def test_string_becomes_legacy(self) -> None:
        assert parse_permission(" view_dashboard ") == LegacyPermission("view_dashboard")

    def test_mapping_becomes_structured(self) -> None:
        result = parse_permission({"resource": "news", "action": "update"})
        assert result == StructuredPermission("news", "update")

    def test_existing_spec_returned(self) -> None:
        spec = LegacyPermission("edit_news")
        assert parse_permission(spec) is spec

    def test_empty_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_permission("  ")

    def test_mapping_without_action_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Missing required field: action"):
            parse_permission({"resource": "news"})

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_permission(42)
