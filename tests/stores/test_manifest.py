"""Tests for manifest serialization."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from vuepact.contract import analyze_component
from vuepact.stores.manifest import (
    MANIFEST_VERSION,
    ManifestError,
    build_manifest,
    contract_to_dict,
    load_manifest,
    manifest_from_dict,
    write_manifest,
)

SOURCE = """<template>
  <img src="a.png">
  <p>{{ title }}</p>
  <slot name="footer" />
</template>
<script setup lang="ts">
defineProps<{ title: string; count?: number }>()
const emit = defineEmits(['close'])
</script>
"""


@pytest.fixture
def contract():
    return analyze_component(SOURCE, "src/Card.vue")


def test_build_manifest_shape(contract) -> None:
    payload = build_manifest([contract], scanned_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC))

    assert payload["version"] == MANIFEST_VERSION
    assert payload["scannedAt"] == "2024-01-02T03:04:05.000Z"
    component = payload["components"][0]
    assert component["file"] == "src/Card.vue"
    assert component["props"][0] == {
        "name": "title",
        "type": "string",
        "required": True,
        "default": None,
        "from": "script-setup-generic",
    }
    assert component["emits"] == ["close"]
    assert component["slots"] == ["footer"]
    assert component["metrics"] == {
        "templateLines": 5,
        "scriptLines": 4,
        "branches": 0,
        "propsDeclared": 2,
        "propsUsed": 1,
        "cohesion": 0.5,
    }
    assert [w["rule"] for w in component["warnings"]] == ["img-alt", "prop-unused"]


def test_write_then_load_restores_contracts(tmp_path: Path, contract) -> None:
    target = write_manifest(tmp_path / "out" / "manifest.json", [contract])

    manifest = load_manifest(target)

    assert manifest.version == MANIFEST_VERSION
    assert manifest.scanned_at is not None and manifest.scanned_at.endswith("Z")
    assert manifest.components == [contract]


def test_malformed_components_are_skipped(contract) -> None:
    manifest = manifest_from_dict(
        {"components": [{"file": 1}, "junk", contract_to_dict(contract)]}
    )

    assert [c.file for c in manifest.components] == ["src/Card.vue"]
    assert manifest.scanned_at is None


def test_load_missing_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="not found"):
        load_manifest(tmp_path / "missing.json")


def test_load_invalid_json_raises(tmp_path: Path) -> None:
    target = tmp_path / "manifest.json"
    target.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError):
        load_manifest(target)


def test_non_object_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "manifest.json"
    target.write_text(json.dumps([1, 2]), encoding="utf-8")

    with pytest.raises(ManifestError):
        load_manifest(target)
