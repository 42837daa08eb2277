"""Core data models shared across vuepact components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

ORIGIN_GENERIC = "script-setup-generic"
ORIGIN_OBJECT = "script-setup-object"
ORIGIN_OPTIONS = "options"

UNKNOWN_TYPE = "unknown"
DEFAULT_SLOT = "default"


@dataclass(frozen=True)
class SourceDocument:
    """Raw text of one component file, identified by a display path."""

    path: str
    text: str


@dataclass(frozen=True)
class Regions:
    """The markup and script regions isolated from a component file."""

    template: str = ""
    script_setup: str = ""
    script: str = ""


@dataclass(frozen=True)
class PropDeclaration:
    """A single declared prop and the idiom it was extracted from."""

    name: str
    type: str = UNKNOWN_TYPE
    required: bool = False
    default: Optional[str] = None
    origin: str = ORIGIN_OPTIONS


@dataclass(frozen=True)
class Diagnostic:
    """Advisory finding attached to a contract."""

    rule: str
    message: str
    sample: Optional[str] = None


@dataclass(frozen=True)
class UsageMetrics:
    """Size, branching, and prop cohesion figures for one component."""

    template_lines: int
    script_lines: int
    branches: int
    props_declared: int
    props_used: int
    cohesion: float


@dataclass(frozen=True)
class ComponentContract:
    """Structured summary extracted from one component file."""

    file: str
    name: str
    props: Tuple[PropDeclaration, ...]
    emits: Tuple[str, ...]
    slots: Tuple[str, ...]
    metrics: UsageMetrics
    warnings: Tuple[Diagnostic, ...]
