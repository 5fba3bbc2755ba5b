"""Tests for infrastructure.i18n.dispatcher module."""

import pytest

from infrastructure.i18n.diagnostics import DiagnosticKind
from infrastructure.i18n.dispatcher import choose_variant
from infrastructure.i18n.models import Candidate
from infrastructure.i18n.plugins import ActivePlugin


def _candidates(base, *keys):
    return [Candidate.for_key(base, key) for key in keys]


def _plugin(name, compute):
    return ActivePlugin(name=name, compute=compute)


def _static(name, *modifiers):
    return _plugin(name, lambda params: list(modifiers))


@pytest.fixture
def plural():
    return _plugin(
        "plural",
        lambda params: ["plural"] if params.get("count") != 1 else ["singular"],
    )


@pytest.mark.unit
class TestChooseVariant:
    """Tests for choose_variant()."""

    def test_plural_plugin_selects_singular(self, plural, diagnostics):
        candidates = _candidates("price", "price_plural", "price_singular")
        result = choose_variant(candidates, {"count": 1}, [plural], sink=diagnostics)
        assert result == "price_singular"
        assert diagnostics.events == []

    def test_plural_plugin_selects_plural(self, plural, diagnostics):
        candidates = _candidates("price", "price_plural", "price_singular")
        result = choose_variant(candidates, {"count": 5}, [plural], sink=diagnostics)
        assert result == "price_plural"

    def test_single_candidate_short_circuits(self, diagnostics):
        """A lone candidate is returned without consulting any plugin."""

        def explode(params):
            raise AssertionError("plugin must not be called")

        result = choose_variant(
            _candidates("price", "price_plural"),
            {},
            [_plugin("explode", explode)],
            sink=diagnostics,
        )
        assert result == "price_plural"

    def test_empty_candidates_raises(self):
        with pytest.raises(ValueError):
            choose_variant([], {}, [])

    def test_unmatched_modifiers_fall_back_to_default_variant(self, diagnostics):
        """With no tag matching, the variant with no leftover tags wins."""
        candidates = _candidates("msg", "msg_formal", "msg_casual", "msg_default")

        result = choose_variant(
            candidates, {}, [_static("tone", "polite")], sink=diagnostics
        )

        assert result == "msg_default"
        ignored = diagnostics.of_kind(DiagnosticKind.MODIFIER_IGNORED)
        assert len(ignored) == 1
        assert ignored[0].plugin == "tone"
        assert ignored[0].modifier == "polite"
        fallback = diagnostics.of_kind(DiagnosticKind.UNMODIFIED_FALLBACK)
        assert [event.key for event in fallback] == ["msg_default"]

    def test_no_plugins_prefers_exact_key(self, diagnostics):
        candidates = _candidates("msg", "msg_formal", "msg")
        assert choose_variant(candidates, {}, [], sink=diagnostics) == "msg"
        assert diagnostics.of_kind(DiagnosticKind.UNMODIFIED_FALLBACK)

    def test_multiple_matches_narrow_then_next_modifier_decides(self, diagnostics):
        candidates = _candidates(
            "title",
            "title_plural_masculine",
            "title_plural_feminine",
            "title_singular_feminine",
        )

        result = choose_variant(
            candidates,
            {},
            [_static("number", "plural"), _static("gender", "feminine")],
            sink=diagnostics,
        )

        assert result == "title_plural_feminine"
        assert diagnostics.events == []

    def test_modifiers_of_one_plugin_applied_in_order(self, diagnostics):
        candidates = _candidates(
            "title", "title_plural_masculine", "title_plural_feminine", "title_singular"
        )
        result = choose_variant(
            candidates, {}, [_static("both", "plural", "masculine")], sink=diagnostics
        )
        assert result == "title_plural_masculine"

    def test_consumed_tag_no_longer_matches(self, diagnostics):
        """A tag consumed while narrowing cannot match the same candidates again."""
        candidates = _candidates("k", "k_a_b", "k_a_c")

        result = choose_variant(
            candidates, {}, [_static("twice", "a", "a")], sink=diagnostics
        )

        assert result == "k_a_b"
        assert len(diagnostics.of_kind(DiagnosticKind.MODIFIER_IGNORED)) == 1
        assert len(diagnostics.of_kind(DiagnosticKind.INEXACT_MATCH)) == 1

    def test_inexact_match_picks_fewest_leftover_tags(self, diagnostics):
        candidates = _candidates("k", "k_a_b", "k_c")

        result = choose_variant(candidates, {}, [], sink=diagnostics)

        assert result == "k_c"
        inexact = diagnostics.of_kind(DiagnosticKind.INEXACT_MATCH)
        assert [event.key for event in inexact] == ["k_c"]

    def test_inexact_tie_resolved_by_candidate_order(self, diagnostics):
        candidates = _candidates("k", "k_x", "k_y", "k_z")
        assert choose_variant(candidates, {}, [], sink=diagnostics) == "k_x"

    def test_plugin_order_is_significant(self, diagnostics):
        candidates = _candidates("msg", "msg_formal", "msg_casual")
        formal = _static("formal", "formal")
        casual = _static("casual", "casual")

        assert choose_variant(candidates, {}, [formal, casual], sink=diagnostics) == "msg_formal"
        assert choose_variant(candidates, {}, [casual, formal], sink=diagnostics) == "msg_casual"

    def test_deterministic_for_fixed_inputs(self, plural, diagnostics):
        candidates = _candidates("k", "k_plural_a", "k_plural_b", "k_singular")
        results = {
            choose_variant(candidates, {"count": 3}, [plural], sink=diagnostics)
            for _ in range(10)
        }
        assert results == {"k_plural_a"}

    def test_plugin_returning_single_string(self, diagnostics):
        candidates = _candidates("msg", "msg_formal", "msg_casual")
        plugin = _plugin("tone", lambda params: "casual")
        assert choose_variant(candidates, {}, [plugin], sink=diagnostics) == "msg_casual"

    def test_diagnostics_carry_language(self, diagnostics):
        candidates = _candidates("k", "k_x", "k_y")
        choose_variant(candidates, {}, [], sink=diagnostics, language="ru")
        assert diagnostics.events[0].language == "ru"

    def test_defaults_to_log_sink(self):
        """Without a sink, diagnostics go to the log and selection still works."""
        candidates = _candidates("k", "k_x", "k_y")
        assert choose_variant(candidates, {}, []) == "k_x"

    def test_ignored_modifier_reports_lookup_key(self, diagnostics):
        candidates = _candidates("price", "price_plural", "price_singular")

        choose_variant(
            candidates,
            {},
            [_static("gender", "feminine")],
            sink=diagnostics,
            key="cart.price",
        )

        ignored = diagnostics.of_kind(DiagnosticKind.MODIFIER_IGNORED)
        assert [event.key for event in ignored] == ["cart.price"]
