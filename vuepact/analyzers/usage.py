"""Prop usage cross-referencing and component metrics."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..models import Diagnostic, PropDeclaration, Regions, UsageMetrics
from .utils import count_lines

PROP_UNUSED_RULE = "prop-unused"

_BRANCH = re.compile(r"v-if|v-else-if|v-for")


@dataclass(frozen=True)
class PropUsage:
    """Declared prop names split by whether the template references them."""

    used: Tuple[str, ...]
    unused: Tuple[str, ...]


def _references(template: str, name: str) -> bool:
    pattern = rf"(?<![A-Za-z0-9_$]){re.escape(name)}(?![A-Za-z0-9_$])"
    return re.search(pattern, template) is not None


def partition_usage(template: str, props: Sequence[PropDeclaration]) -> PropUsage:
    used = []
    unused = []
    for prop in props:
        (used if _references(template, prop.name) else unused).append(prop.name)
    return PropUsage(used=tuple(used), unused=tuple(unused))


def cohesion(declared: int, used: int) -> float:
    """Share of declared props the template references; 1.0 when nothing is declared."""
    if declared <= 0:
        return 1.0
    return min(max(used / declared, 0.0), 1.0)


def compute_metrics(
    regions: Regions, props: Sequence[PropDeclaration], usage: PropUsage
) -> UsageMetrics:
    declared = len(props)
    used = len(usage.used)
    return UsageMetrics(
        template_lines=count_lines(regions.template),
        script_lines=count_lines(regions.script_setup) + count_lines(regions.script),
        branches=len(_BRANCH.findall(regions.template)),
        props_declared=declared,
        props_used=used,
        cohesion=cohesion(declared, used),
    )


def unused_prop_warnings(usage: PropUsage) -> Tuple[Diagnostic, ...]:
    return tuple(
        Diagnostic(
            rule=PROP_UNUSED_RULE,
            message=f"Prop declared but not referenced in template: {name}",
        )
        for name in usage.unused
    )


__all__ = [
    "PROP_UNUSED_RULE",
    "PropUsage",
    "cohesion",
    "compute_metrics",
    "partition_usage",
    "unused_prop_warnings",
]
