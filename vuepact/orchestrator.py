"""Batch orchestration: scan a tree and analyze each component in isolation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .analyzers import DiagnosticRule, discover_rules
from .config import ConfigError, VuePactConfig, load_config
from .contract import ContractAssembler
from .logging import get_logger
from .models import ComponentContract, SourceDocument
from .scanner import ComponentScanner


@dataclass(frozen=True)
class SkippedFile:
    """A file that could not be analyzed, with the reason."""

    file: str
    reason: str


@dataclass
class ScanResult:
    """Outcome of a batch scan; partial success is the normal case."""

    root: Path
    components: List[ComponentContract] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)


_Outcome = Union[ComponentContract, SkippedFile]


def display_path(path: Path) -> str:
    """Path relative to the working directory when possible, POSIX-style."""
    try:
        return path.relative_to(Path.cwd().resolve()).as_posix()
    except ValueError:
        return path.as_posix()


class Orchestrator:
    """Coordinates scanning and per-file contract extraction."""

    def __init__(
        self,
        scanner: ComponentScanner | None = None,
        rules: Optional[Sequence[DiagnosticRule]] = None,
    ) -> None:
        self.scanner = scanner or ComponentScanner()
        self._rule_overrides = list(rules) if rules is not None else None
        self.logger = get_logger("orchestrator")

    def run_scan(
        self,
        path: str | Path,
        *,
        jobs: int | None = None,
        config: VuePactConfig | None = None,
    ) -> ScanResult:
        """Analyze every component under ``path``.

        A file that cannot be read or analyzed is recorded in
        ``ScanResult.skipped`` and the batch continues.
        """
        root = Path(path).expanduser().resolve()
        if config is None:
            config = self._load_config(root)
        files = self.scanner.scan(root, exclude_paths=config.exclude_paths)
        self.logger.info("Scanning %d components under %s", len(files), root)

        assembler = ContractAssembler(
            self._select_rules(config), excerpt_length=config.excerpt_length
        )
        workers = max(1, jobs if jobs is not None else config.jobs)

        if workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="vuepact") as pool:
                outcomes = list(pool.map(lambda file: self._analyze_file(assembler, file), files))
        else:
            outcomes = [self._analyze_file(assembler, file) for file in files]

        result = ScanResult(root=root)
        for outcome in outcomes:
            if isinstance(outcome, SkippedFile):
                result.skipped.append(outcome)
            else:
                result.components.append(outcome)
        self.logger.info(
            "Analyzed %d components (%d skipped)", len(result.components), len(result.skipped)
        )
        return result

    def _analyze_file(self, assembler: ContractAssembler, file: Path) -> _Outcome:
        shown = display_path(file)
        try:
            text = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.warning("Failed to read %s: %s", shown, exc)
            return SkippedFile(file=shown, reason=str(exc))
        try:
            return assembler.assemble(SourceDocument(path=shown, text=text))
        except Exception as exc:  # pragma: no cover - engine degrades rather than raising
            self.logger.warning("Failed to analyze %s: %s", shown, exc)
            self.logger.debug("Analysis traceback for %s", shown, exc_info=True)
            return SkippedFile(file=shown, reason=str(exc))

    def _load_config(self, root: Path) -> VuePactConfig:
        try:
            return load_config(root)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return VuePactConfig(root=root)

    def _select_rules(self, config: VuePactConfig) -> List[DiagnosticRule]:
        if self._rule_overrides is not None:
            return list(self._rule_overrides)
        return discover_rules(config.rules.enabled, config.rules.disabled)


__all__ = ["Orchestrator", "ScanResult", "SkippedFile", "display_path"]
