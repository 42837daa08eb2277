"""Slot declaration and consumption scanning."""

from __future__ import annotations

import re
from typing import List, Tuple

from ..models import DEFAULT_SLOT
from .base import tag_pattern

_SLOT_TAG = tag_pattern("slot")
_NAME_ATTR = re.compile(r"(?<![\w:-])name\s*=\s*(?:\"([^\"]+)\"|'([^']+)')")
# <slot :name="expr"> has no static name to report
_BOUND_NAME = re.compile(r"(?:(?<=\s):|\bv-bind:)name\s*=")
# v-slot:header / v-slot:[dynamic] is skipped
_NAMED_CONSUMER = re.compile(r"\bv-slot:([A-Za-z0-9_-]+)")
_SHORTHAND_CONSUMER = re.compile(r"(?<=\s)#([A-Za-z0-9_-]+)(?=[\s=/>])")
_BARE_CONSUMER = re.compile(r"\bv-slot(?=[\s=/>])")


def extract_slots(template: str) -> Tuple[str, ...]:
    """Slots declared with ``<slot>`` or consumed via ``v-slot``/``#`` bindings."""
    names: List[str] = []
    for tag in _SLOT_TAG.findall(template):
        if _BOUND_NAME.search(tag):
            continue
        match = _NAME_ATTR.search(tag)
        names.append((match.group(1) or match.group(2)) if match else DEFAULT_SLOT)
    names.extend(_consumer_matches(template))
    return tuple(dict.fromkeys(names))


def _consumer_matches(template: str) -> List[str]:
    found: List[tuple[int, str]] = []
    found.extend((m.start(), m.group(1)) for m in _NAMED_CONSUMER.finditer(template))
    found.extend((m.start(), m.group(1)) for m in _SHORTHAND_CONSUMER.finditer(template))
    found.extend((m.start(), DEFAULT_SLOT) for m in _BARE_CONSUMER.finditer(template))
    found.sort()
    return [name for _, name in found]


__all__ = ["extract_slots"]
