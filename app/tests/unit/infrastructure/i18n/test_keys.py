"""Tests for infrastructure.i18n.keys module."""

import pytest

from infrastructure.i18n.diagnostics import DiagnosticKind
from infrastructure.i18n.keys import (
    find_node,
    resolve_candidates,
    resolve_node,
    split_key,
)
from infrastructure.i18n.models import Language, TranslationNode
from infrastructure.i18n.plugins import ActivePlugin


@pytest.fixture
def tree():
    return TranslationNode.from_value(
        {
            "title": "Title",
            "cart": {
                "price_singular": "{{count}} item",
                "price_plural": "{{count}} items",
                "price_per_unit": "per unit",
                "prices": "not a variant",
                "total": "Total",
                "only_plural": "only",
                "lonely_variant": "lonely",
            },
            "tone": {
                "msg": "plain",
                "msg_formal": "formal",
            },
            "variants": {
                "msg_formal": "formal",
                "msg_casual": "casual",
            },
        }
    )


@pytest.mark.unit
class TestSplitKey:
    def test_nested_key(self):
        assert split_key("cart.items.price") == (["cart", "items"], "price")

    def test_top_level_key(self):
        assert split_key("title") == ([], "title")


@pytest.mark.unit
class TestFindNode:
    def test_empty_path_returns_root(self, tree):
        assert find_node(tree, []) is tree

    def test_missing_segment(self, tree):
        assert find_node(tree, ["cart", "missing"]) is None

    def test_path_through_leaf(self, tree):
        assert find_node(tree, ["title", "deeper", "still"]) is None


@pytest.mark.unit
class TestResolveCandidates:
    """Tests for resolve_candidates()."""

    def test_collects_modifier_variants_in_branch_order(self, tree):
        found = resolve_candidates(tree, "cart.price")

        assert found.base_key == "price"
        assert [c.key for c in found.candidates] == [
            "price_singular",
            "price_plural",
            "price_per_unit",
        ]
        assert found.candidates[2].modifiers == ("per", "unit")

    def test_prefix_without_separator_is_not_a_variant(self, tree):
        """"prices" shares a prefix with "price" but is a different key."""
        found = resolve_candidates(tree, "cart.price")
        assert "prices" not in [c.key for c in found.candidates]

    def test_missing_parent_is_miss(self, tree):
        assert resolve_candidates(tree, "nowhere.price") is None

    def test_parent_leaf_is_miss(self, tree):
        assert resolve_candidates(tree, "title.price") is None

    def test_no_matching_key_is_miss(self, tree):
        assert resolve_candidates(tree, "cart.discount") is None

    def test_exact(self, tree):
        assert resolve_candidates(tree, "tone.msg").exact().key == "msg"
        assert resolve_candidates(tree, "variants.msg").exact() is None


@pytest.mark.unit
class TestResolveNode:
    """Tests for resolve_node()."""

    def test_single_candidate_ignores_plugins(self, tree, diagnostics):
        def explode(params):
            raise AssertionError("plugin must not be called")

        node = resolve_node(
            tree,
            "cart.total",
            {},
            [ActivePlugin(name="explode", compute=explode)],
            sink=diagnostics,
        )
        assert node.value == "Total"

    def test_single_variant_returned_without_plugins(self, tree, diagnostics):
        """A lone modifier variant is used even when no plugin is active."""
        node = resolve_node(tree, "cart.lonely", {}, [], sink=diagnostics)
        assert node.value == "lonely"
        assert diagnostics.events == []

    def test_dispatches_between_variants(self, tree, diagnostics):
        plural = ActivePlugin(
            name="plural",
            compute=lambda params: ["singular" if params["count"] == 1 else "plural"],
        )
        assert resolve_node(tree, "cart.price", {"count": 1}, [plural], diagnostics).value == (
            "{{count}} item"
        )
        assert resolve_node(tree, "cart.price", {"count": 2}, [plural], diagnostics).value == (
            "{{count}} items"
        )

    def test_no_plugins_uses_exact_key(self, tree, diagnostics):
        node = resolve_node(tree, "tone.msg", {}, [], sink=diagnostics)
        assert node.value == "plain"
        assert diagnostics.events == []

    def test_no_plugins_without_exact_key_picks_first_variant(self, tree, diagnostics):
        node = resolve_node(
            tree, "variants.msg", {}, [], sink=diagnostics, language=Language.RU
        )

        assert node.value == "formal"
        kinds = [event.kind for event in diagnostics.events]
        assert kinds == [DiagnosticKind.UNPLUGGED_VARIANT, DiagnosticKind.INEXACT_MATCH]
        assert diagnostics.events[0].key == "variants.msg"
        assert diagnostics.events[0].language == "ru"

    def test_miss_returns_none(self, tree, diagnostics):
        assert resolve_node(tree, "cart.discount", {}, [], sink=diagnostics) is None

    def test_branch_node_returned(self, tree, diagnostics):
        node = resolve_node(tree, "cart", {}, [], sink=diagnostics)
        assert node.is_branch

    def test_ignored_modifier_reports_looked_up_path(self, tree, diagnostics):
        polite = ActivePlugin(name="politeness", compute=lambda params: ["polite"])

        resolve_node(tree, "variants.msg", {}, [polite], sink=diagnostics)

        ignored = diagnostics.of_kind(DiagnosticKind.MODIFIER_IGNORED)
        assert [(event.key, event.plugin) for event in ignored] == [
            ("variants.msg", "politeness")
        ]
