"""Heuristic prop declaration parsers (no AST).

Three idioms are recognized:

* ``defineProps<{ title: string; count?: number }>()`` or
  ``defineProps<Props>()`` with a local ``interface``/``type`` definition
  (script setup).
* ``defineProps({ title: String, count: { type: Number, default: 0 } })``
  (script setup).
* ``export default { props: { ... } }`` (plain script).

Literal idioms win over the options idiom when the same name is declared
twice; within one precedence level the later declaration wins.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import (
    ORIGIN_GENERIC,
    ORIGIN_OBJECT,
    ORIGIN_OPTIONS,
    UNKNOWN_TYPE,
    PropDeclaration,
)
from .utils import (
    collapse_whitespace,
    find_matching,
    object_body,
    split_top_level,
    strip_comments,
)

_GENERIC_CALL = re.compile(r"\bdefineProps\s*<([\s\S]*?)>\s*\(\s*\)")
_OBJECT_CALL = re.compile(r"\bdefineProps\s*\(\s*([\{\[])")
_OPTIONS_FIELD = re.compile(r"\bprops\s*:\s*([\{\[])")

_TYPE_ENTRY = re.compile(
    r"^(?:readonly\s+)?(['\"]?)([A-Za-z_$][\w$-]*)\1\s*(\?)?\s*:\s*([\s\S]+)$"
)
_OBJECT_ENTRY = re.compile(r"^(?:['\"]([^'\"]+)['\"]|([A-Za-z_$][\w$]*))\s*:\s*([\s\S]*)$")
_METHOD_ENTRY = re.compile(r"^(?:async\s+)?([A-Za-z_$][\w$]*)\s*\(")
_QUOTED = re.compile(r"^['\"`]([^'\"`]+)['\"`]$")

_PRECEDENCE = {ORIGIN_GENERIC: 2, ORIGIN_OBJECT: 2, ORIGIN_OPTIONS: 1}


def extract_props(script_setup: str, script: str) -> Tuple[PropDeclaration, ...]:
    """Return the deduplicated props declared across both script regions."""
    setup_source = strip_comments(script_setup)
    candidates: List[PropDeclaration] = []
    candidates.extend(parse_generic_props(setup_source))
    candidates.extend(parse_object_props(setup_source))
    candidates.extend(parse_options_props(strip_comments(script)))
    return merge_props(candidates)


def merge_props(candidates: Iterable[PropDeclaration]) -> Tuple[PropDeclaration, ...]:
    """Deduplicate by name, keeping first-seen order.

    A candidate replaces an earlier one when its origin ranks at least as high.
    """
    merged: Dict[str, PropDeclaration] = {}
    for prop in candidates:
        existing = merged.get(prop.name)
        if existing is None or _PRECEDENCE.get(prop.origin, 0) >= _PRECEDENCE.get(existing.origin, 0):
            merged[prop.name] = prop
    return tuple(merged.values())


# ---------------------------------------------------------------------------
# defineProps<T>()
# ---------------------------------------------------------------------------


def parse_generic_props(source: str) -> List[PropDeclaration]:
    match = _GENERIC_CALL.search(source)
    if not match:
        return []
    parameter = match.group(1).strip()
    brace = parameter.find("{")
    if brace != -1:
        body = object_body(parameter, brace)
    else:
        body = _find_named_type(source, parameter)
    if body is None:
        return []
    return _parse_type_entries(body)


def _find_named_type(source: str, name: str) -> Optional[str]:
    if not re.fullmatch(r"[A-Za-z_$][\w$]*", name):
        return None
    escaped = re.escape(name)
    pattern = re.compile(
        rf"\binterface\s+{escaped}\b[^{{]*\{{|\btype\s+{escaped}\s*=\s*\{{"
    )
    match = pattern.search(source)
    if not match:
        return None
    return object_body(source, match.end() - 1)


def _parse_type_entries(body: str) -> List[PropDeclaration]:
    props: List[PropDeclaration] = []
    for entry in split_top_level(body, ",;\n", angle=True):
        match = _TYPE_ENTRY.match(entry)
        if not match:
            continue
        _, name, optional, type_text = match.groups()
        props.append(
            PropDeclaration(
                name=name,
                type=collapse_whitespace(type_text) or UNKNOWN_TYPE,
                required=optional is None,
                origin=ORIGIN_GENERIC,
            )
        )
    return props


# ---------------------------------------------------------------------------
# defineProps({...}) and options-style props: {...}
# ---------------------------------------------------------------------------


def parse_object_props(source: str) -> List[PropDeclaration]:
    return _parse_declaration_at(source, _OBJECT_CALL, ORIGIN_OBJECT)


def parse_options_props(source: str) -> List[PropDeclaration]:
    return _parse_declaration_at(source, _OPTIONS_FIELD, ORIGIN_OPTIONS)


def _parse_declaration_at(source: str, pattern: re.Pattern[str], origin: str) -> List[PropDeclaration]:
    match = pattern.search(source)
    if not match:
        return []
    open_index = match.start(1)
    if match.group(1) == "[":
        close = find_matching(source, open_index, "[", "]")
        if close == -1:
            return []
        return _parse_name_list(source[open_index + 1 : close], origin)
    body = object_body(source, open_index)
    if body is None:
        return []
    return _parse_object_entries(body, origin)


def _parse_name_list(body: str, origin: str) -> List[PropDeclaration]:
    props: List[PropDeclaration] = []
    for item in split_top_level(body):
        quoted = _QUOTED.match(item)
        if quoted:
            props.append(PropDeclaration(name=quoted.group(1), origin=origin))
    return props


def _parse_object_entries(body: str, origin: str) -> List[PropDeclaration]:
    props: List[PropDeclaration] = []
    for entry in split_top_level(body, angle=True):
        match = _OBJECT_ENTRY.match(entry)
        if not match:
            continue
        name = match.group(1) or match.group(2)
        value = match.group(3).strip()
        if value.startswith("{"):
            close = find_matching(value, 0)
            if close == -1:
                continue
            props.append(_from_options_object(name, value[1:close], origin))
        elif value:
            props.append(
                PropDeclaration(
                    name=name,
                    type=collapse_whitespace(value),
                    required=False,
                    origin=origin,
                )
            )
    return props


def _from_options_object(name: str, body: str, origin: str) -> PropDeclaration:
    fields = _object_fields(body)
    prop_type = fields.get("type")
    required = fields.get("required")
    return PropDeclaration(
        name=name,
        type=collapse_whitespace(prop_type) if prop_type else UNKNOWN_TYPE,
        required=required is not None and required.strip() == "true",
        default=fields.get("default"),
        origin=origin,
    )


def _object_fields(body: str) -> Dict[str, str]:
    fields: Dict[str, str] = {}
    for entry in split_top_level(body, angle=True):
        match = _OBJECT_ENTRY.match(entry)
        if match:
            key = match.group(1) or match.group(2)
            fields[key] = match.group(3).strip()
            continue
        # default() { return {...} }
        method = _METHOD_ENTRY.match(entry)
        if method:
            fields[method.group(1)] = entry
    return fields


__all__ = [
    "extract_props",
    "merge_props",
    "parse_generic_props",
    "parse_object_props",
    "parse_options_props",
]
