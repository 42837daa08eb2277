"""Accessibility checks over template markup.

Checks are lexical: each rule scans opening tags with a regular expression
and inspects their attributes. No DOM is built, so associations such as
``<label for="...">`` are out of reach.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from ..logging import get_logger
from ..models import Diagnostic
from .base import DiagnosticRule, TagRule, has_attribute
from .utils import excerpt

DEFAULT_EXCERPT_LENGTH = 80

_HASH_HREF = re.compile(r"(?<=\s)href\s*=\s*([\"'])#\1", re.IGNORECASE)

logger = get_logger("a11y")


class ImgAltRule(TagRule):
    rule_id = "img-alt"
    message = "<img> missing alt attribute"
    tag = "img"

    def violates(self, tag: str) -> bool:
        return not has_attribute(tag, "alt")


class ButtonTypeRule(TagRule):
    rule_id = "button-type"
    message = "<button> missing type attribute"
    tag = "button"

    def violates(self, tag: str) -> bool:
        return not has_attribute(tag, "type")


class LinkHashRule(TagRule):
    rule_id = "link-hash"
    message = '<a href="#"> without role is an anti-pattern'
    tag = "a"

    def violates(self, tag: str) -> bool:
        return _HASH_HREF.search(tag) is not None and not has_attribute(tag, "role")


class InputLabelRule(TagRule):
    rule_id = "input-label"
    message = "<input> missing aria-label/label association (heuristic)"
    tag = "input"

    def violates(self, tag: str) -> bool:
        return not (has_attribute(tag, "aria-label") or has_attribute(tag, "aria-labelledby"))


class DiagnosticEngine:
    """Runs independent rules over a template and collects their findings."""

    def __init__(
        self,
        rules: Sequence[DiagnosticRule],
        *,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    ) -> None:
        self._rules = tuple(rules)
        # non-positive lengths fall back to the default, as in .vuepact.yml
        self._excerpt_length = excerpt_length if excerpt_length > 0 else DEFAULT_EXCERPT_LENGTH

    @property
    def rules(self) -> Tuple[DiagnosticRule, ...]:
        return self._rules

    def run(self, template: str) -> Tuple[Diagnostic, ...]:
        findings: List[Diagnostic] = []
        if not template:
            return ()
        for rule in self._rules:
            for fragment in rule.find(template):
                findings.append(
                    Diagnostic(
                        rule=rule.rule_id,
                        message=rule.message,
                        sample=excerpt(fragment, self._excerpt_length),
                    )
                )
        logger.debug("Accessibility rules produced %d findings", len(findings))
        return tuple(findings)


__all__ = [
    "ButtonTypeRule",
    "DiagnosticEngine",
    "ImgAltRule",
    "InputLabelRule",
    "LinkHashRule",
]
