"""exportcheck command line interface.

Commands:
    check    Classify package entry points of one or more projects
    targets  Print synthesized build-deps/watch-deps targets as JSON

Exit codes (check):
    0  all projects export build output
    1  at least one project exports source files
    2  configuration error (malformed JSON, bad tsconfig, bad arguments)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from exportcheck import __version__
from exportcheck.application.classifier import EntryPointClassifier
from exportcheck.application.reporters import ConsoleConfig, ConsoleReporter, JsonReporter
from exportcheck.application.targets import add_build_and_watch_deps_targets
from exportcheck.domain.exceptions import ExportCheckError
from exportcheck.domain.model.enums import PackageManager
from exportcheck.domain.model.target import BuildDepsOptions, TargetConfiguration
from exportcheck.domain.model.tsconfig import ParsedTsconfigData
from exportcheck.infrastructure.package_manager import get_package_manager_command
from exportcheck.infrastructure.tsconfig_loader import load_tsconfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from exportcheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

DEFAULT_TSCONFIG = "tsconfig.json"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="exportcheck",
        description="Check that workspace packages export build output, not source files.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--workspace-root",
        type=Path,
        default=Path.cwd(),
        help="Workspace root directory (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Classify package entry points")
    check.add_argument("projects", nargs="+", help="Project roots, absolute or workspace-relative")
    check.add_argument(
        "--tsconfig",
        default=DEFAULT_TSCONFIG,
        help=f"Project tsconfig file name providing include patterns (default: {DEFAULT_TSCONFIG})",
    )
    check.add_argument("--format", choices=("console", "json"), default="console")
    check.add_argument("--show-artifacts", action="store_true", help="List build-output entries too")
    check.set_defaults(handler=_run_check)

    targets = sub.add_parser("targets", help="Print build-deps/watch-deps targets")
    targets.add_argument("project", help="Workspace-relative project root")
    targets.add_argument("--build-deps-target-name", type=_target_name, default=None)
    targets.add_argument("--watch-deps-target-name", type=_target_name, default=None)
    targets.add_argument(
        "--package-manager",
        choices=[m.value for m in PackageManager],
        default=None,
        help="Package manager (default: detected from lock files)",
    )
    targets.set_defaults(handler=_run_targets)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "targets":
        _check_target_names(parser, args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args)
    except ExportCheckError as e:
        print(f"exportcheck: error: {e}", file=sys.stderr)
        return EXIT_ERROR


def _target_name(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("target name must not be empty")
    return value


def _check_target_names(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject a watch target that would overwrite the build target."""
    options = BuildDepsOptions(
        build_deps_target_name=args.build_deps_target_name,
        watch_deps_target_name=args.watch_deps_target_name,
    )
    if options.build_target == options.watch_target:
        parser.error(
            f"build-deps and watch-deps target names must differ, both are {options.build_target!r}"
        )


def _run_check(args: argparse.Namespace) -> int:
    workspace_root: Path = args.workspace_root
    results = []

    for project in args.projects:
        ts_config = _load_project_tsconfig(workspace_root, project, args.tsconfig)
        results.append(EntryPointClassifier(ts_config, workspace_root, project).classify())

    reporter: ReporterProtocol
    if args.format == "json":
        reporter = JsonReporter()
    else:
        reporter = ConsoleReporter(
            ConsoleConfig(show_artifacts=args.show_artifacts, color=sys.stdout.isatty())
        )

    sys.stdout.write(reporter.report(results))
    if args.format == "json":
        sys.stdout.write("\n")

    return EXIT_OK if all(r.valid for r in results) else EXIT_INVALID


def _run_targets(args: argparse.Namespace) -> int:
    workspace_root: Path = args.workspace_root
    options = BuildDepsOptions(
        build_deps_target_name=args.build_deps_target_name,
        watch_deps_target_name=args.watch_deps_target_name,
    )
    pmc = get_package_manager_command(args.package_manager, workspace_root)

    targets: dict[str, TargetConfiguration] = {}
    add_build_and_watch_deps_targets(workspace_root, args.project, targets, options, pmc)
    if not targets:
        logger.warning("no project name found for %s", args.project)

    json.dump({name: t.to_dict() for name, t in targets.items()}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return EXIT_OK


def _load_project_tsconfig(workspace_root: Path, project: str, file_name: str) -> ParsedTsconfigData:
    """Project tsconfig, or an empty config when the project has none."""
    project_dir = Path(project) if Path(project).is_absolute() else workspace_root / project
    path = project_dir / file_name
    if not path.is_file():
        logger.info("no %s in %s, falling back to extension checks", file_name, project)
        return ParsedTsconfigData.empty()
    return load_tsconfig(path)
