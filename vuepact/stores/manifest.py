"""JSON manifest persistence for component contracts."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..models import (
    ORIGIN_OPTIONS,
    UNKNOWN_TYPE,
    ComponentContract,
    Diagnostic,
    PropDeclaration,
    UsageMetrics,
)

MANIFEST_VERSION = "0.1.0"


class ManifestError(RuntimeError):
    """Raised when a manifest file cannot be read."""


@dataclass(frozen=True)
class Manifest:
    """A loaded manifest: format version, scan time, and contracts."""

    version: str
    scanned_at: Optional[str]
    components: List[ComponentContract]


def _timestamp(moment: datetime | None = None) -> str:
    moment = moment or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_manifest(
    contracts: Iterable[ComponentContract], *, scanned_at: datetime | None = None
) -> Dict[str, Any]:
    return {
        "version": MANIFEST_VERSION,
        "scannedAt": _timestamp(scanned_at),
        "components": [contract_to_dict(contract) for contract in contracts],
    }


def write_manifest(
    path: Path,
    contracts: Iterable[ComponentContract],
    *,
    scanned_at: datetime | None = None,
) -> Path:
    payload = build_manifest(contracts, scanned_at=scanned_at)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def load_manifest(path: Path) -> Manifest:
    """Read a manifest, skipping component entries that are malformed."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found: {path}") from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestError(f"Failed to read manifest {path}: {exc}") from exc
    return manifest_from_dict(data)


def manifest_from_dict(data: Any) -> Manifest:
    if not isinstance(data, dict):
        raise ManifestError("Manifest must contain a JSON object at the root")
    raw_components = data.get("components")
    components: List[ComponentContract] = []
    if isinstance(raw_components, list):
        for payload in raw_components:
            contract = contract_from_dict(payload)
            if contract is not None:
                components.append(contract)
    version = data.get("version")
    scanned_at = data.get("scannedAt")
    return Manifest(
        version=version if isinstance(version, str) else MANIFEST_VERSION,
        scanned_at=scanned_at if isinstance(scanned_at, str) else None,
        components=components,
    )


# ------------------------------------------------------------------
# Contract <-> dict


def contract_to_dict(contract: ComponentContract) -> Dict[str, Any]:
    metrics = contract.metrics
    return {
        "file": contract.file,
        "name": contract.name,
        "props": [
            {
                "name": prop.name,
                "type": prop.type,
                "required": prop.required,
                "default": prop.default,
                "from": prop.origin,
            }
            for prop in contract.props
        ],
        "emits": list(contract.emits),
        "slots": list(contract.slots),
        "metrics": {
            "templateLines": metrics.template_lines,
            "scriptLines": metrics.script_lines,
            "branches": metrics.branches,
            "propsDeclared": metrics.props_declared,
            "propsUsed": metrics.props_used,
            "cohesion": metrics.cohesion,
        },
        "warnings": [
            {"rule": warning.rule, "message": warning.message, "sample": warning.sample}
            for warning in contract.warnings
        ],
    }


def contract_from_dict(payload: object) -> Optional[ComponentContract]:
    if not isinstance(payload, dict):
        return None
    file = payload.get("file")
    name = payload.get("name")
    if not isinstance(file, str) or not isinstance(name, str):
        return None
    return ComponentContract(
        file=file,
        name=name,
        props=tuple(
            prop for prop in (_prop_from_dict(item) for item in _as_list(payload.get("props")))
            if prop is not None
        ),
        emits=tuple(item for item in _as_list(payload.get("emits")) if isinstance(item, str)),
        slots=tuple(item for item in _as_list(payload.get("slots")) if isinstance(item, str)),
        metrics=_metrics_from_dict(payload.get("metrics")),
        warnings=tuple(
            warning
            for warning in (_warning_from_dict(item) for item in _as_list(payload.get("warnings")))
            if warning is not None
        ),
    )


def _prop_from_dict(payload: object) -> Optional[PropDeclaration]:
    if not isinstance(payload, dict) or not isinstance(payload.get("name"), str):
        return None
    prop_type = payload.get("type")
    default = payload.get("default")
    origin = payload.get("from")
    return PropDeclaration(
        name=payload["name"],
        type=prop_type if isinstance(prop_type, str) else UNKNOWN_TYPE,
        required=payload.get("required") is True,
        default=default if isinstance(default, str) else None,
        origin=origin if isinstance(origin, str) else ORIGIN_OPTIONS,
    )


def _warning_from_dict(payload: object) -> Optional[Diagnostic]:
    if not isinstance(payload, dict):
        return None
    rule = payload.get("rule")
    message = payload.get("message")
    sample = payload.get("sample")
    if not isinstance(rule, str) or not isinstance(message, str):
        return None
    return Diagnostic(rule=rule, message=message, sample=sample if isinstance(sample, str) else None)


def _metrics_from_dict(payload: object) -> UsageMetrics:
    data = payload if isinstance(payload, dict) else {}
    cohesion = data.get("cohesion")
    return UsageMetrics(
        template_lines=_as_int(data.get("templateLines")),
        script_lines=_as_int(data.get("scriptLines")),
        branches=_as_int(data.get("branches")),
        props_declared=_as_int(data.get("propsDeclared")),
        props_used=_as_int(data.get("propsUsed")),
        cohesion=float(cohesion) if isinstance(cohesion, (int, float)) and not isinstance(cohesion, bool) else 1.0,
    )


def _as_list(value: object) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_int(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


__all__ = [
    "MANIFEST_VERSION",
    "Manifest",
    "ManifestError",
    "build_manifest",
    "contract_from_dict",
    "contract_to_dict",
    "load_manifest",
    "manifest_from_dict",
    "write_manifest",
]
