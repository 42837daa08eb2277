"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests._fixtures.component_builder import ComponentBuilder
from vuepact.cli import _build_parser, main


def test_cli_accepts_verbose_before_command() -> None:
    args = _build_parser().parse_args(["--verbose", "scan", "src"])

    assert args.verbose is True
    assert args.command == "scan"


def test_cli_accepts_verbose_after_command() -> None:
    args = _build_parser().parse_args(["scan", "src", "--verbose"])

    assert args.verbose is True
    assert args.path == "src"


def test_cli_scan_options() -> None:
    args = _build_parser().parse_args(
        ["scan", "src", "--out", "m.json", "--report", "r.md", "--jobs", "3"]
    )

    assert (args.out, args.report, args.jobs) == ("m.json", "r.md", 3)


def test_cli_serve_defaults() -> None:
    args = _build_parser().parse_args(["serve"])

    assert args.manifest == "vuepact.manifest.json"
    assert args.port == 8000


def test_cli_scan_writes_manifest_and_report(
    component_builder: ComponentBuilder,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    component_builder.write(
        {
            "Card.vue": """
            <template><h1>{{ title }}</h1></template>
            <script setup>
            defineProps({ title: String })
            </script>
            """,
        }
    )
    component_builder.write_bytes("Broken.vue", b"\xff\xfe")
    monkeypatch.chdir(tmp_path)

    main(["scan", str(component_builder.root), "--out", "out/manifest.json", "--report", "out/report.md"])

    output = capsys.readouterr()
    assert "Wrote manifest: out/manifest.json" in output.out
    assert "Wrote report: out/report.md" in output.out
    assert "Skipped project/Broken.vue" in output.err
    manifest = json.loads((tmp_path / "out" / "manifest.json").read_text(encoding="utf-8"))
    assert [c["name"] for c in manifest["components"]] == ["Card"]
    report = (tmp_path / "out" / "report.md").read_text(encoding="utf-8")
    assert "## Card (`project/Card.vue`)" in report


def test_cli_scan_missing_directory_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["scan", str(tmp_path / "missing")])

    assert excinfo.value.code == 1
