"""Assemble a component contract from one source file."""

from __future__ import annotations

from pathlib import PurePath
from typing import Sequence

from .analyzers import (
    DiagnosticEngine,
    DiagnosticRule,
    compute_metrics,
    discover_rules,
    extract_emits,
    extract_props,
    extract_slots,
    partition_usage,
    segment,
    unused_prop_warnings,
)
from .analyzers.a11y import DEFAULT_EXCERPT_LENGTH
from .logging import get_logger
from .models import ComponentContract, SourceDocument

_SUFFIX = ".vue"


def component_name(path: str) -> str:
    """Base name of ``path`` without its ``.vue`` suffix."""
    name = PurePath(path.replace("\\", "/")).name
    if name.lower().endswith(_SUFFIX):
        return name[: -len(_SUFFIX)]
    return name


class ContractAssembler:
    """Runs the extraction pipeline for one document at a time.

    The assembler holds only configuration (rules, excerpt length); every
    call to :meth:`assemble` is independent, so one instance can be shared
    across worker threads.
    """

    def __init__(
        self,
        rules: Sequence[DiagnosticRule] | None = None,
        *,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    ) -> None:
        if rules is None:
            rules = discover_rules()
        self._engine = DiagnosticEngine(rules, excerpt_length=excerpt_length)
        self.logger = get_logger("contract")

    def assemble(self, document: SourceDocument) -> ComponentContract:
        regions = segment(document.text)
        props = extract_props(regions.script_setup, regions.script)
        emits = extract_emits(regions.script_setup, regions.script)
        slots = extract_slots(regions.template)
        usage = partition_usage(regions.template, props)
        metrics = compute_metrics(regions, props, usage)
        warnings = self._engine.run(regions.template) + unused_prop_warnings(usage)

        self.logger.debug(
            "%s: %d props, %d emits, %d slots, %d warnings",
            document.path,
            len(props),
            len(emits),
            len(slots),
            len(warnings),
        )
        return ComponentContract(
            file=document.path,
            name=component_name(document.path),
            props=props,
            emits=emits,
            slots=slots,
            metrics=metrics,
            warnings=warnings,
        )


def analyze_component(
    text: str,
    path: str,
    *,
    rules: Sequence[DiagnosticRule] | None = None,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
) -> ComponentContract:
    """Extract the contract of a single component source."""
    assembler = ContractAssembler(rules, excerpt_length=excerpt_length)
    return assembler.assemble(SourceDocument(path=path, text=text))


__all__ = ["ContractAssembler", "analyze_component", "component_name"]
