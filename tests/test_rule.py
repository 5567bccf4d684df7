"""
Tests for the individual rule predicates and their messages.
"""

from dataclasses import FrozenInstanceError

import pytest

from passcheck.rule import (
    SPECIAL_CHARACTERS,
    MinLength,
    RequireDigit,
    RequireSpecialCharacter,
    RequireUpperLowerCase,
    default_message,
    is_violated,
    resolve_message,
)


class TestMinLength:
    @pytest.mark.parametrize(
        "password, violated",
        [("", True), ("1234567", True), ("12345678", False), ("123456789", False)],
    )
    def test_boundary(self, password, violated):
        assert is_violated(MinLength(8), password) is violated

    def test_zero_threshold_always_satisfied(self):
        assert not is_violated(MinLength(0), "")

    def test_length_counts_characters(self):
        assert not is_violated(MinLength(3), "äöü")

    def test_default_message_interpolates_threshold(self):
        assert (
            default_message(MinLength(12))
            == "Password must be at least 12 characters long."
        )


class TestRequireUpperLowerCase:
    @pytest.mark.parametrize(
        "password, violated",
        [
            ("alllowercase", True),
            ("ALLUPPERCASE", True),
            ("", True),
            ("1234!", True),
            ("MixedCase", False),
            ("aB", False),
        ],
    )
    def test_predicate(self, password, violated):
        assert is_violated(RequireUpperLowerCase(), password) is violated

    def test_non_ascii_letters_do_not_count(self):
        assert is_violated(RequireUpperLowerCase(), "ÄÖÜäöü")


class TestRequireDigit:
    @pytest.mark.parametrize(
        "password, violated",
        [("NoNumbersHere", True), ("has1digit", False), ("0", False)],
    )
    def test_predicate(self, password, violated):
        assert is_violated(RequireDigit(), password) is violated

    def test_non_ascii_digits_do_not_count(self):
        assert is_violated(RequireDigit(), "٣")


class TestRequireSpecialCharacter:
    def test_character_set(self):
        assert len(SPECIAL_CHARACTERS) == 30
        assert len(set(SPECIAL_CHARACTERS)) == 30

    @pytest.mark.parametrize("char", list(SPECIAL_CHARACTERS))
    def test_each_special_character_satisfies(self, char):
        assert not is_violated(RequireSpecialCharacter(), "abc" + char)

    @pytest.mark.parametrize("password", ["abcdef", "", "a b", "tilde~", "back`tick"])
    def test_violated(self, password):
        assert is_violated(RequireSpecialCharacter(), password)


class TestMessages:
    @pytest.mark.parametrize(
        "rule",
        [
            MinLength(8, "custom"),
            RequireUpperLowerCase("custom"),
            RequireDigit("custom"),
            RequireSpecialCharacter("custom"),
        ],
    )
    def test_custom_message_wins(self, rule):
        assert resolve_message(rule) == "custom"

    def test_default_used_without_custom_message(self):
        assert (
            resolve_message(RequireDigit())
            == "Password must include at least one number."
        )

    def test_empty_custom_message_is_kept(self):
        assert resolve_message(RequireDigit("")) == ""


class TestImmutability:
    def test_rules_are_frozen(self):
        rule = MinLength(8)

        with pytest.raises(FrozenInstanceError):
            rule.threshold = 4  # type: ignore[misc]

    def test_unknown_rule_rejected(self):
        with pytest.raises(TypeError):
            is_violated(object(), "abc")  # type: ignore[arg-type]
