"""Base classes for diagnostic rule plugins."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterable, Iterator

# attribute values are skipped whole so a quoted "=>" or ">" never ends the tag
_TAG_BODY = r"(?:[^>\"']|\"[^\"]*\"|'[^']*')*>"
_QUOTED_VALUE = re.compile(r"\"[^\"]*\"|'[^']*'")


def tag_pattern(tag: str) -> re.Pattern[str]:
    """Compile a case-insensitive pattern matching whole opening ``<tag ...>`` elements."""
    return re.compile(rf"<{re.escape(tag)}(?=[\s/>]){_TAG_BODY}", re.IGNORECASE)


class DiagnosticRule(ABC):
    """Contract for rules that flag offending fragments of a template."""

    rule_id: str = ""
    message: str = ""

    @abstractmethod
    def find(self, template: str) -> Iterable[str]:
        """Yield the source text of every offending fragment in ``template``."""


class TagRule(DiagnosticRule):
    """Rule evaluated independently against each opening tag of one element."""

    tag: str = ""

    def __init__(self) -> None:
        self._pattern = tag_pattern(self.tag)

    def find(self, template: str) -> Iterator[str]:
        for match in self._pattern.finditer(template):
            if self.violates(match.group(0)):
                yield match.group(0)

    @abstractmethod
    def violates(self, tag: str) -> bool:
        """Return True when the opening tag breaks this rule."""


def has_attribute(tag: str, name: str) -> bool:
    """True when ``tag`` carries ``name`` as a plain or bound (``:name``) attribute.

    Words inside other attributes' quoted values do not count.
    """
    names_only = _QUOTED_VALUE.sub('""', tag)
    pattern = rf"(?<=[\s:]){re.escape(name)}(?=[\s=/>])"
    return re.search(pattern, names_only, re.IGNORECASE) is not None


__all__ = ["DiagnosticRule", "TagRule", "has_attribute", "tag_pattern"]
