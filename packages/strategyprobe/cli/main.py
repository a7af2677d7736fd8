"""Command-line interface for the strategy probe.

Exit codes:
    0: every applicable check passed (skips are not failures)
    1: at least one check failed
    2: the registry listing was malformed or the input could not be loaded
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from strategyprobe.core.config.loader import load_probe_config
from strategyprobe.core.config.models import ProbeConfig
from strategyprobe.core.errors import MalformedRegistryError, ParseError
from strategyprobe.core.probe.diagnostics import format_diagnostic
from strategyprobe.core.probe.models import ProbeOutcome, ProbeReport
from strategyprobe.core.probe.runner import ProbeRunner
from strategyprobe.core.registry.impl_snapshot import SnapshotRegistry
from strategyprobe.core.utils.logging import configure_logging
from strategyprobe.core.version import parse_version

console = Console()
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ERROR = 2

_OUTCOME_STYLE = {
    ProbeOutcome.PASS: "[green]PASS[/green]",
    ProbeOutcome.FAIL: "[red]FAIL[/red]",
    ProbeOutcome.SKIP: "[yellow]SKIP[/yellow]",
}


def _load_config(args: argparse.Namespace) -> ProbeConfig:
    """Load config and apply command-line overrides."""
    config = load_probe_config(Path(args.config) if args.config else None)

    if getattr(args, "capability", None):
        config.capability = args.capability
    if getattr(args, "host_version", None):
        config.host_version = args.host_version
    if getattr(args, "min_extensions", None) is not None:
        config.min_extensions = args.min_extensions
    return config


def _print_report(report: ProbeReport) -> None:
    table = Table(title=f"Probe: {report.capability}")
    table.add_column("Check", no_wrap=True)
    table.add_column("Outcome")
    table.add_column("Detail")

    for result in report.results:
        if result.outcome is ProbeOutcome.PASS and result.matched:
            detail = result.matched.simple_name
        elif result.outcome is ProbeOutcome.SKIP:
            detail = result.reason or ""
        else:
            detail = f"missing: {result.expected}"
        table.add_row(result.label, _OUTCOME_STYLE[result.outcome], detail)

    console.print(f"Host version: {report.host_version or 'unknown'}")
    console.print(f"Registered extensions: {len(report.observed)}")
    console.print(table)

    for result in report.failed:
        console.print(format_diagnostic(result), markup=False, highlight=False)

    if report.success:
        console.print(
            f"[green]✅ {len(report.passed)} passed, {len(report.skipped)} skipped[/green]"
        )
    else:
        console.print(f"[red]❌ {len(report.failed)} of {len(report.results)} checks failed[/red]")


def run_probe(args: argparse.Namespace) -> int:
    """Run the probe against a recorded registry listing."""
    try:
        config = _load_config(args)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return EXIT_ERROR

    configure_logging(
        level="DEBUG" if args.debug else config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
        stream=sys.stderr,
    )

    try:
        registry = SnapshotRegistry.from_file(args.registry)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load registry listing: {escape(str(e))}[/red]")
        return EXIT_ERROR

    runner = ProbeRunner(min_extensions=config.min_extensions)
    try:
        report = runner.probe(
            client=registry,
            checks=config.checks,
            capability=config.capability,
            raw_version=config.host_version,
        )
    except MalformedRegistryError as e:
        console.print(f"[red]ERROR: Malformed registry: {escape(str(e))}[/red]")
        return EXIT_ERROR

    if args.json:
        payload = {"success": report.success, **report.model_dump(mode="json")}
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    else:
        _print_report(report)

    return report.exit_code


def show_version(args: argparse.Namespace) -> int:
    """Parse a version string and print its components."""
    try:
        version = parse_version(args.version)
    except ParseError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return EXIT_ERROR

    console.print(
        f"major={version.major} minor={version.minor} qualifier={version.qualifier or '-'}",
        highlight=False,
    )
    return EXIT_OK


def list_checks(args: argparse.Namespace) -> int:
    """List configured checks."""
    try:
        config = _load_config(args)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return EXIT_ERROR

    table = Table(title="Checks")
    table.add_column("Check", no_wrap=True)
    table.add_column("Match")
    table.add_column("Gate")
    for check in config.checks:
        table.add_row(check.label, check.policy.describe(), str(check.gate) if check.gate else "-")
    console.print(table)
    return EXIT_OK


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="strategyprobe",
        description="Check which provisioning strategies a host has registered",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    run = sub.add_parser("run", help="Run checks against a registry listing")
    run.add_argument(
        "--registry", required=True, help="Path to registry listing (JSON or YAML)"
    )
    run.add_argument("--config", help="Path to probe config (default: strategyprobe.yaml)")
    run.add_argument("--capability", help="Capability tag to query")
    run.add_argument("--host-version", help="Host version (e.g. 2.530-SNAPSHOT)")
    run.add_argument("--min-extensions", type=int, help="Minimum registered extensions")
    run.add_argument("--json", action="store_true", help="Print the report as JSON")
    run.add_argument("--debug", action="store_true", help="Enable debug logging")

    version = sub.add_parser("parse-version", help="Parse a host version string")
    version.add_argument("version", help="Version string")

    checks = sub.add_parser("checks", help="List configured checks")
    checks.add_argument("--config", help="Path to probe config (default: strategyprobe.yaml)")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "run":
        return run_probe(args)
    if args.cmd == "parse-version":
        return show_version(args)
    if args.cmd == "checks":
        return list_checks(args)
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
