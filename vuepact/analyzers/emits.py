"""Event declaration and emission scanning."""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .utils import find_matching, strip_comments

_DECLARE_LIST = re.compile(r"\bdefineEmits\s*\(\s*\[")
_DECLARE_TYPED = re.compile(r"\bdefineEmits\s*<([\s\S]*?)>\s*\(\s*\)")
_OPTIONS_LIST = re.compile(r"\bemits\s*:\s*\[")
_QUOTED_NAME = re.compile(r"['\"`]([^'\"`]+)['\"`]")
# (e: 'change', value: string): void
_CALL_SIGNATURE = re.compile(r"\(\s*[A-Za-z_$][\w$]*\s*:\s*['\"]([^'\"]+)['\"]")
# change: [value: string]
_NAMED_TUPLE = re.compile(r"(?:^|[{;,\n])\s*['\"]?([A-Za-z_$][\w$:-]*)['\"]?\s*:\s*\[")
_EMIT_ARGUMENT = r"\s*\(\s*['\"`]([^'\"`]+)['\"`]"
# const notify = defineEmits(...)
_EMITTER_BINDING = re.compile(r"\b(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*=\s*defineEmits\b")
# setup(props, ctx)
_SETUP_CONTEXT = re.compile(r"\bsetup\s*(?::\s*(?:function\s*)?)?\(\s*[A-Za-z_$][\w$]*\s*,\s*([A-Za-z_$][\w$]*)\s*\)")


def extract_emits(script_setup: str, script: str) -> Tuple[str, ...]:
    """Union of declared and emitted event names, in first-seen order."""
    setup_source = strip_comments(script_setup)
    plain_source = strip_comments(script)
    names: List[str] = []
    names.extend(_declared_list(setup_source, _DECLARE_LIST))
    names.extend(_declared_typed(setup_source))
    names.extend(_declared_list(plain_source, _OPTIONS_LIST))
    names.extend(_emitted(setup_source + "\n" + plain_source))
    return _unique(names)


def _declared_list(source: str, pattern: re.Pattern[str]) -> List[str]:
    match = pattern.search(source)
    if not match:
        return []
    open_index = match.end() - 1
    close = find_matching(source, open_index, "[", "]")
    if close == -1:
        return []
    return _QUOTED_NAME.findall(source[open_index + 1 : close])


def _declared_typed(source: str) -> List[str]:
    match = _DECLARE_TYPED.search(source)
    if not match:
        return []
    body = match.group(1)
    names = _CALL_SIGNATURE.findall(body)
    if not names:
        names = _NAMED_TUPLE.findall(body)
    return names


def _emitted(source: str) -> List[str]:
    """Names passed to the component's own emitter.

    Recognized callees are ``$emit``, a bare ``emit``, the name bound from
    ``defineEmits`` and ``<ctx>.emit`` for the setup context parameter. Other
    receivers such as ``socket.emit`` are event buses, not component events.
    """
    callees = [r"\$emit", r"(?<![\w$.])emit"]
    callees.extend(rf"(?<![\w$.]){re.escape(name)}" for name in _EMITTER_BINDING.findall(source))
    callees.extend(
        rf"(?<![\w$.]){re.escape(name)}\s*\.\s*emit" for name in _SETUP_CONTEXT.findall(source)
    )
    pattern = re.compile(rf"(?:{'|'.join(dict.fromkeys(callees))}){_EMIT_ARGUMENT}")
    return pattern.findall(source)


def _unique(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(name for name in names if name))


__all__ = ["extract_emits"]
