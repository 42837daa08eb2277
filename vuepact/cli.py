"""CLI entrypoints for vuepact commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator
from .postproc.report import render_report
from .stores.manifest import write_manifest


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
        "default": argparse.SUPPRESS if suppress_default else False,
    }
    parser.add_argument("-v", "--verbose", **kwargs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vuepact",
        description="Extract prop/emit/slot contracts from Vue single-file components.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Analyze every .vue file under a directory.",
    )
    _add_verbose_option(scan_parser, suppress_default=True)
    scan_parser.add_argument("path", help="Directory to scan for components.")
    scan_parser.add_argument(
        "--out",
        default=None,
        help="Manifest output path (defaults to vuepact.manifest.json).",
    )
    scan_parser.add_argument(
        "--report",
        default=None,
        help="Optional Markdown report output path.",
    )
    scan_parser.add_argument(
        "--jobs",
        type=int,
        default=None,
        help="Number of worker threads used to analyze files.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve a read-only viewer API over a manifest.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument(
        "--manifest",
        default="vuepact.manifest.json",
        help="Manifest produced by `vuepact scan`.",
    )
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for vuepact commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    if args.command == "scan":
        _run_scan(parser, args)
    elif args.command == "serve":
        from .service import run_service

        run_service(Path(args.manifest), host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_scan(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    root = Path(args.path)
    try:
        config = load_config(root)
        result = Orchestrator().run_scan(root, jobs=args.jobs, config=config)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except (ConfigError, ValueError, TypeError) as exc:
        parser.exit(1, f"vuepact scan failed: {exc}\n")

    manifest_path = Path(args.out or config.output.manifest)
    write_manifest(manifest_path, result.components)
    print(f"Wrote manifest: {_relativize(manifest_path)}")

    report_target = args.report or config.output.report
    if report_target:
        report_path = Path(report_target)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(render_report(result.components), encoding="utf-8")
        print(f"Wrote report: {_relativize(report_path)}")

    for skipped in result.skipped:
        print(f"Skipped {skipped.file}: {skipped.reason}", file=sys.stderr)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
