import pytest

from schema_introspect.asset_filter import AssetFilter
from schema_introspect.errors import ConfigError


def test_no_policy_includes_everything() -> None:
    asset_filter = AssetFilter(None)
    assert asset_filter.is_visible("schema.foo")
    assert asset_filter.is_visible("baz")
    assert asset_filter.is_visible("")


def test_matches_against_qualified_name() -> None:
    asset_filter = AssetFilter("^schema")
    assert asset_filter.is_visible("schema.foo")
    assert asset_filter.is_visible("schema.bar")
    assert not asset_filter.is_visible("baz")
    assert not asset_filter.is_visible("bloo_schema.bloo")


def test_can_select_by_object_name() -> None:
    asset_filter = AssetFilter(r"\.orders$")
    assert asset_filter.is_visible("sales.orders")
    assert asset_filter.is_visible("archive.orders")
    assert not asset_filter.is_visible("sales.orders_audit")


def test_unanchored_pattern_matches_anywhere() -> None:
    asset_filter = AssetFilter("audit")
    assert asset_filter.is_visible("sales.orders_audit")
    assert not asset_filter.is_visible("sales.orders")


def test_visibility_is_stable_across_calls() -> None:
    asset_filter = AssetFilter("^schema")
    for name in ("schema.foo", "bloo_schema.bloo", "baz"):
        assert asset_filter.is_visible(name) == asset_filter.is_visible(name)


def test_filter_names_preserves_order() -> None:
    asset_filter = AssetFilter("^schema")
    names = ["schema.b", "other.a", "schema.a", "baz"]
    assert asset_filter.filter_names(names) == ["schema.b", "schema.a"]


def test_invalid_pattern_fails_at_construction() -> None:
    with pytest.raises(ConfigError):
        AssetFilter("[unclosed")


def test_expression_is_exposed() -> None:
    assert AssetFilter("^app_").expression == "^app_"
    assert AssetFilter().expression is None
