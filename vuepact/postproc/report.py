"""Markdown report rendering for scanned components."""

from __future__ import annotations

from typing import Iterable, List

from ..models import ComponentContract, PropDeclaration

REPORT_TITLE = "# Vue Pact — Report"


def _cell(value: str | None) -> str:
    if not value:
        return ""
    return " ".join(value.split()).replace("|", "\\|")


def _props_table(props: Iterable[PropDeclaration]) -> List[str]:
    lines = ["| name | type | required | default |", "|---|---|---|---|"]
    for prop in props:
        lines.append(
            f"| {_cell(prop.name)} | {_cell(prop.type)} | "
            f"{'yes' if prop.required else 'no'} | {_cell(prop.default)} |"
        )
    return lines


def render_component(contract: ComponentContract) -> str:
    lines = [f"## {contract.name} (`{contract.file}`)"]
    lines.append(
        f"**Props ({len(contract.props)})** | **Emits ({len(contract.emits)})** | "
        f"**Slots ({len(contract.slots)})** | **Cohesion {contract.metrics.cohesion:.2f}**"
    )
    lines.append("")
    if contract.props:
        lines.extend(_props_table(contract.props))
        lines.append("")
    if contract.emits:
        lines.append(f"**Emits:** {', '.join(contract.emits)}")
        lines.append("")
    if contract.slots:
        lines.append(f"**Slots:** {', '.join(contract.slots)}")
        lines.append("")
    if contract.warnings:
        lines.append(f"**Warnings ({len(contract.warnings)})**")
        lines.extend(f"- [{warning.rule}] {warning.message}" for warning in contract.warnings)
        lines.append("")
    return "\n".join(lines)


def render_report(contracts: Iterable[ComponentContract]) -> str:
    """Render every contract under a single Markdown document."""
    sections = [REPORT_TITLE, ""]
    sections.extend(render_component(contract) for contract in contracts)
    return "\n".join(sections).rstrip() + "\n"


__all__ = ["REPORT_TITLE", "render_component", "render_report"]
