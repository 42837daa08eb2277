"""Tests for prop usage cross-referencing and metrics."""

from __future__ import annotations

import pytest

from vuepact.analyzers.usage import (
    PROP_UNUSED_RULE,
    cohesion,
    compute_metrics,
    partition_usage,
    unused_prop_warnings,
)
from vuepact.models import PropDeclaration, Regions


def _props(*names: str):
    return [PropDeclaration(name=name) for name in names]


def test_partition_uses_whole_tokens() -> None:
    usage = partition_usage("<span>{{ counter }}</span>", _props("count", "counter"))

    assert usage.used == ("counter",)
    assert usage.unused == ("count",)


def test_partition_matches_at_region_boundaries() -> None:
    usage = partition_usage("title", _props("title"))

    assert usage.used == ("title",)


def test_partition_ignores_dollar_prefixed_identifiers() -> None:
    usage = partition_usage("{{ $title }}", _props("title"))

    assert usage.unused == ("title",)


@pytest.mark.parametrize(
    ("declared", "used", "expected"),
    [(0, 0, 1.0), (4, 1, 0.25), (2, 2, 1.0), (3, 0, 0.0)],
)
def test_cohesion(declared: int, used: int, expected: float) -> None:
    assert cohesion(declared, used) == expected


def test_compute_metrics_counts_lines_and_branches() -> None:
    template = '<p v-if="a">x</p>\n<p v-else-if="b">y</p>\n<li v-for="i in items">{{ title }}</li>'
    regions = Regions(template=template, script_setup="const a = 1\nconst b = 2", script="")
    props = _props("title", "unused")
    usage = partition_usage(template, props)

    metrics = compute_metrics(regions, props, usage)

    assert metrics.template_lines == 3
    assert metrics.script_lines == 2
    assert metrics.branches == 3
    assert metrics.props_declared == 2
    assert metrics.props_used == 1
    assert metrics.cohesion == 0.5


def test_compute_metrics_for_empty_regions() -> None:
    metrics = compute_metrics(Regions(), [], partition_usage("", []))

    assert metrics.template_lines == 0
    assert metrics.script_lines == 0
    assert metrics.cohesion == 1.0


def test_unused_prop_warnings() -> None:
    usage = partition_usage("", _props("a", "b"))

    warnings = unused_prop_warnings(usage)

    assert [w.rule for w in warnings] == [PROP_UNUSED_RULE, PROP_UNUSED_RULE]
    assert warnings[0].message == "Prop declared but not referenced in template: a"
    assert warnings[0].sample is None
