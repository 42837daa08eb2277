"""Tests for diagnostic rule discovery."""

from __future__ import annotations

import pytest

from vuepact.analyzers import discover_rules


def test_discover_rules_returns_builtins() -> None:
    ids = [rule.rule_id for rule in discover_rules()]

    assert ids == ["img-alt", "button-type", "link-hash", "input-label"]


def test_discover_rules_honours_enabled_and_disabled() -> None:
    enabled = discover_rules(enabled=["IMG-ALT", "link-hash"])
    disabled = discover_rules(disabled=["input-label"])

    assert [rule.rule_id for rule in enabled] == ["img-alt", "link-hash"]
    assert "input-label" not in [rule.rule_id for rule in disabled]


def test_discover_rules_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="no-such-rule"):
        discover_rules(enabled=["img-alt", "no-such-rule"])
