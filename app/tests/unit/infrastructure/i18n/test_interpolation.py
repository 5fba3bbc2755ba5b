"""Tests for infrastructure.i18n.interpolation module."""

import pytest

from infrastructure.i18n.interpolation import format_number, interpolate


@pytest.mark.unit
class TestInterpolate:
    """Tests for interpolate()."""

    def test_interpolate_single_variable(self):
        assert interpolate("Hello {{name}}", {"name": "Ana"}) == "Hello Ana"

    def test_interpolate_multiple_variables(self):
        result = interpolate(
            "User {{user}} updated role {{role}}", {"user": "alice", "role": "admin"}
        )
        assert result == "User alice updated role admin"

    def test_interpolate_repeated_placeholder(self):
        """Every occurrence of a placeholder is replaced."""
        assert interpolate("{{x}} and {{x}}", {"x": "1"}) == "1 and 1"

    def test_unknown_placeholder_left_literal(self):
        assert interpolate("Hi {{x}}", {}) == "Hi {{x}}"
        assert interpolate("Hi {{x}} {{y}}", {"y": "there"}) == "Hi {{x}} there"

    def test_empty_params_is_identity(self):
        template = "Nothing {{to}} replace"
        assert interpolate(template, {}) is template

    def test_single_braces_untouched(self):
        assert interpolate("{name} {{name}}", {"name": "Ana"}) == "{name} Ana"

    def test_converts_values_to_text(self):
        assert interpolate("Count: {{count}}", {"count": 42}) == "Count: 42"
        assert interpolate("Total: {{total}}", {"total": 3.0}) == "Total: 3"
        assert interpolate("Flag: {{flag}}", {"flag": True}) == "Flag: True"

    def test_later_parameter_fills_earlier_value(self):
        """A value introducing a placeholder is filled by a later parameter."""
        result = interpolate("{{a}}", {"a": "<{{b}}>", "b": "B"})
        assert result == "<B>"

    def test_earlier_parameter_does_not_fill_later_value(self):
        """Substitution is a single ordered pass over the parameters."""
        result = interpolate("{{b}}", {"a": "A", "b": "<{{a}}>"})
        assert result == "<{{a}}>"


@pytest.mark.unit
class TestFormatNumber:
    """Tests for format_number()."""

    @pytest.mark.parametrize(
        "value, expected",
        [(42, "42"), (-7, "-7"), (1.5, "1.5"), (2.0, "2"), (0.0, "0")],
    )
    def test_canonical_decimal(self, value, expected):
        assert format_number(value) == expected

    def test_non_finite_values(self):
        assert format_number(float("inf")) == "inf"
