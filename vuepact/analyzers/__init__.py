"""Extractors, diagnostic rules, and rule discovery."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from .a11y import ButtonTypeRule, DiagnosticEngine, ImgAltRule, InputLabelRule, LinkHashRule
from .base import DiagnosticRule, TagRule, has_attribute
from .blocks import segment
from .emits import extract_emits
from .props import extract_props
from .slots import extract_slots
from .usage import compute_metrics, partition_usage, unused_prop_warnings

_ENTRY_POINT_GROUP = "vuepact.rules"

_BUILTIN_RULES: dict[str, Callable[[], DiagnosticRule]] = {
    "img-alt": ImgAltRule,
    "button-type": ButtonTypeRule,
    "link-hash": LinkHashRule,
    "input-label": InputLabelRule,
}


def discover_rules(
    enabled: Sequence[str] | None = None,
    disabled: Sequence[str] = (),
) -> List[DiagnosticRule]:
    """Return instantiated rules, honoring optional enabled/disabled rule ids."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
    disabled_set = {name.lower() for name in disabled}

    rules: List[DiagnosticRule] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], DiagnosticRule]) -> None:
        key = name.lower()
        if key in seen:
            return
        seen.add(key)
        if enabled_set is not None:
            if key not in enabled_set:
                return
            enabled_set.discard(key)
        if key in disabled_set:
            return
        instance = factory()
        if not isinstance(instance, DiagnosticRule):
            raise TypeError(f"Rule factory for '{name}' did not return a DiagnosticRule instance")
        rules.append(instance)

    for name, factory in _BUILTIN_RULES.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - plugin import failure
            raise RuntimeError(f"Failed to load rule entry point '{entry.name}': {exc}") from exc

        def _factory(obj: object = loaded) -> DiagnosticRule:
            return _coerce_rule(obj)

        _add(entry.name, _factory)

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown rules requested: {missing}")

    return rules


def _coerce_rule(obj: object) -> DiagnosticRule:
    if isinstance(obj, DiagnosticRule):
        return obj
    if isinstance(obj, type) and issubclass(obj, DiagnosticRule):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, DiagnosticRule):
            return instance
    raise TypeError("Rule entry point must be a DiagnosticRule subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = [
    "DiagnosticEngine",
    "DiagnosticRule",
    "TagRule",
    "compute_metrics",
    "discover_rules",
    "extract_emits",
    "extract_props",
    "extract_slots",
    "has_attribute",
    "partition_usage",
    "segment",
    "unused_prop_warnings",
]
