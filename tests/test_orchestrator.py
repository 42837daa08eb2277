"""Tests for batch orchestration."""

from __future__ import annotations

import logging

import pytest

from tests._fixtures.component_builder import ComponentBuilder
from vuepact.orchestrator import Orchestrator

CARD = """
<template>
  <article>
    <img src="cover.png">
    <h2>{{ title }}</h2>
  </article>
</template>

<script setup>
defineProps({ title: String, subtitle: String })
</script>
"""

BUTTON = """
<template>
  <button type="button" @click="$emit('press')"><slot /></button>
</template>

<script>
export default { emits: ['press'] }
</script>
"""


@pytest.fixture
def project(component_builder: ComponentBuilder, monkeypatch: pytest.MonkeyPatch) -> ComponentBuilder:
    component_builder.write({"src/Card.vue": CARD, "src/Button.vue": BUTTON})
    monkeypatch.chdir(component_builder.root)
    return component_builder


def test_run_scan_analyzes_each_component(project: ComponentBuilder) -> None:
    result = Orchestrator().run_scan(project.root)

    assert [c.file for c in result.components] == ["src/Button.vue", "src/Card.vue"]
    assert result.skipped == []
    card = result.components[1]
    assert card.name == "Card"
    assert [w.rule for w in card.warnings] == ["img-alt", "prop-unused"]
    button = result.components[0]
    assert button.emits == ("press",)
    assert button.slots == ("default",)


def test_unreadable_file_is_skipped_and_batch_continues(
    project: ComponentBuilder,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    project.write_bytes("src/Broken.vue", b"\xff\xfe<template>\x00</template>")
    monkeypatch.setattr(logging.getLogger("vuepact"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="vuepact"):
        result = Orchestrator().run_scan(project.root)

    assert [c.name for c in result.components] == ["Button", "Card"]
    assert [s.file for s in result.skipped] == ["src/Broken.vue"]
    assert "Failed to read src/Broken.vue" in caplog.text


def test_parallel_scan_matches_sequential_order(project: ComponentBuilder) -> None:
    project.write({f"src/widgets/W{index}.vue": BUTTON for index in range(6)})

    sequential = Orchestrator().run_scan(project.root, jobs=1)
    parallel = Orchestrator().run_scan(project.root, jobs=4)

    assert parallel.components == sequential.components


def test_config_disables_rules(project: ComponentBuilder) -> None:
    project.write({".vuepact.yml": "rules:\n  disabled: [img-alt]\nexcerpt_length: 10\n"})

    result = Orchestrator().run_scan(project.root)

    card = next(c for c in result.components if c.name == "Card")
    assert [w.rule for w in card.warnings] == ["prop-unused"]


def test_invalid_config_falls_back_to_defaults(project: ComponentBuilder) -> None:
    project.write({".vuepact.yml": "rules: [unterminated\n"})

    result = Orchestrator().run_scan(project.root)

    assert len(result.components) == 2
