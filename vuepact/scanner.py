"""Discovery of component files beneath a directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import get_logger

COMPONENT_SUFFIX = ".vue"

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    ".nuxt",
    ".output",
    "node_modules",
    "dist",
    "coverage",
    "__pycache__",
}


@dataclass(frozen=True)
class IgnoreRule:
    """A single gitignore-style pattern from .gitignore or .vuepact.yml."""

    pattern: str
    directory_only: bool = False
    anchored: bool = False
    negate: bool = False

    @classmethod
    def parse(cls, raw: str) -> "IgnoreRule | None":
        pattern = raw.strip()
        if not pattern or pattern.startswith("#"):
            return None
        negate = pattern.startswith("!")
        if negate:
            pattern = pattern[1:]
        directory_only = pattern.endswith("/")
        pattern = pattern.rstrip("/")
        anchored = pattern.startswith("/") or "/" in pattern
        pattern = pattern.lstrip("/")
        if not pattern:
            return None
        return cls(pattern=pattern, directory_only=directory_only, anchored=anchored, negate=negate)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.anchored:
            return fnmatchcase(rel_path, self.pattern)
        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def _read_gitignore(path: Path) -> List[IgnoreRule]:
    if not path.is_file():
        return []
    rules: List[IgnoreRule] = []
    for line in path.read_text(encoding="utf-8", errors="ignore").splitlines():
        rule = IgnoreRule.parse(line)
        if rule is not None:
            rules.append(rule)
    return rules


def _config_rules(root: Path, exclude_paths: Sequence[str] | None) -> List[IgnoreRule]:
    if exclude_paths is None:
        try:
            exclude_paths = load_config(root / CONFIG_FILENAME).exclude_paths
        except ConfigError:
            return []
    rules = [IgnoreRule.parse(pattern) for pattern in exclude_paths]
    return [rule for rule in rules if rule is not None]


def _is_ignored(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


class ComponentScanner:
    """Walks a directory tree and lists the component files to analyze."""

    def __init__(self, suffix: str = COMPONENT_SUFFIX) -> None:
        self.suffix = suffix.lower()
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path, *, exclude_paths: Sequence[str] | None = None) -> List[Path]:
        """Return sorted component paths under ``root``.

        ``exclude_paths`` overrides the patterns from ``.vuepact.yml``;
        ``.gitignore`` patterns always apply.
        """
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Component directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Component path is not a directory: {root}")

        rules = _read_gitignore(root_path / ".gitignore")
        rules.extend(_config_rules(root_path, exclude_paths))

        files = sorted(self._iter_files(root_path, rules))
        self.logger.debug("Found %d component files under %s", len(files), root_path)
        return files

    def _iter_files(self, root: Path, rules: Sequence[IgnoreRule]) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            rel_dir = current.relative_to(root).as_posix() if current != root else ""

            kept = []
            for name in dirnames:
                if name in _EXCLUDED_DIRS:
                    continue
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if not _is_ignored(rel_path, True, rules):
                    kept.append(name)
            dirnames[:] = kept

            for filename in filenames:
                if not filename.lower().endswith(self.suffix):
                    continue
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if _is_ignored(rel_path, False, rules):
                    continue
                yield current / filename


__all__ = ["COMPONENT_SUFFIX", "ComponentScanner", "IgnoreRule"]
