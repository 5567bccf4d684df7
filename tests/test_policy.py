"""
Tests for loading password policies from mappings and YAML files.
"""

import pathlib

import pytest

from passcheck import (
    Failure,
    MinLength,
    RequireDigit,
    RequireSpecialCharacter,
    RequireUpperLowerCase,
    Success,
)
from passcheck.exc import PolicySyntaxError, PolicyValidationError
from passcheck.policy import load_checker, load_policy, read_policy


class TestLoadPolicy:
    def test_rules_kept_in_document_order(self):
        checker = load_checker(
            {
                "rules": [
                    {"kind": "digit"},
                    {"kind": "minLength", "threshold": 12, "message": "Too short."},
                    {"kind": "specialCharacter"},
                    {"kind": "upperLowerCase", "message": "Mix cases."},
                ]
            }
        )

        assert checker.rules == (
            RequireDigit(),
            MinLength(12, "Too short."),
            RequireSpecialCharacter(),
            RequireUpperLowerCase("Mix cases."),
        )

    @pytest.mark.parametrize("data", [None, {}])
    def test_empty_document_yields_default_policy(self, data):
        checker = load_checker(data)

        assert checker.rules == (
            MinLength(8),
            RequireUpperLowerCase(),
            RequireDigit(),
            RequireSpecialCharacter(),
        )
        assert checker.validate("Passw0rd!") == Success()

    def test_explicitly_empty_rules(self):
        checker = load_checker({"rules": []})

        assert checker.validate("") == Success()

    def test_negative_threshold_rejected(self):
        with pytest.raises(PolicyValidationError) as exc_info:
            load_policy({"rules": [{"kind": "minLength", "threshold": -1}]})

        assert "rules -> 0 -> threshold" in str(exc_info.value)
        assert "greater than or equal to 0" in str(exc_info.value)

    def test_unknown_kind_rejected(self):
        with pytest.raises(PolicyValidationError) as exc_info:
            load_policy({"rules": [{"kind": "entropy"}]})

        assert "rules -> 0 -> kind" in str(exc_info.value)

    def test_missing_kind_rejected(self):
        with pytest.raises(PolicyValidationError) as exc_info:
            load_policy({"rules": [{"threshold": 3}]})

        assert "Field is required" in str(exc_info.value)

    def test_extra_field_rejected(self):
        with pytest.raises(PolicyValidationError) as exc_info:
            load_policy({"rules": [{"kind": "digit", "threshold": 3}]})

        assert "Extra fields not allowed" in str(exc_info.value)

    def test_non_mapping_rejected(self):
        with pytest.raises(PolicyValidationError):
            load_policy(["digit"])  # type: ignore[arg-type]


class TestReadPolicy:
    def test_read_yaml(self, tmp_path: pathlib.Path):
        fn = tmp_path / "policy.yaml"
        fn.write_text(
            "rules:\n"
            "  - kind: minLength\n"
            "    threshold: 4\n"
            "  - kind: digit\n"
            "    message: Add a number.\n"
        )

        checker = read_policy(fn).build_checker()

        assert checker.validate("abc") == Failure(
            ("Password must be at least 4 characters long.", "Add a number.")
        )

    def test_syntax_error(self, tmp_path: pathlib.Path):
        fn = tmp_path / "policy.yaml"
        fn.write_text("rules: [\n  - kind: digit\n")

        with pytest.raises(PolicySyntaxError) as exc_info:
            read_policy(fn)

        assert exc_info.value.ctx["loc"]["filename"] == fn
        assert "Decoding failed for policy file" in str(exc_info.value)
