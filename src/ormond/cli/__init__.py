"""CLI module for the ormond test runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from ormond.cli.watch import watch
from ormond.config import OrmondConfig, load_config
from ormond.orchestrator import orchestrate
from ormond.reports import ConsoleReporter, LogReporter, Reporter
from ormond.testing.discovery import discover
from ormond.version import __version__


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the ormond CLI."""
    config = load_config()
    parser = _build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args([*config.addopts, *raw])

    verbosity = _resolve_verbosity(args, config)
    _configure_logging(verbosity)
    console = Console()

    if args.watch:
        try:
            asyncio.run(_watch_tests(args, config, console, verbosity))
        except KeyboardInterrupt:
            console.print("\nStopped watching.")
        raise SystemExit(0)

    exit_code = asyncio.run(_run_tests(args, config, console, verbosity))
    raise SystemExit(exit_code)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ormond", description="Ormond test runner")
    parser.add_argument("paths", nargs="*", help="Test files or directories")
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Run tests, then re-run them whenever a watched file changes",
    )
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Reduce CLI output")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase CLI output"
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Do not write the JSON run log",
    )
    parser.add_argument("--log-dir", type=str, help="Directory for JSON run logs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.DEBUG if verbosity >= 2 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _resolve_paths(args: argparse.Namespace, config: OrmondConfig) -> list[str]:
    if args.paths:
        return args.paths
    return config.search_dirs


def _resolve_verbosity(args: argparse.Namespace, config: OrmondConfig) -> int:
    return config.verbosity + args.verbose - args.quiet


def _resolve_log_dir(args: argparse.Namespace, config: OrmondConfig) -> str | None:
    if args.no_log or not config.save_logs:
        return None
    return args.log_dir or config.log_dir


def _collect_files(args: argparse.Namespace, config: OrmondConfig) -> list[Path]:
    return discover(
        _resolve_paths(args, config),
        ends_with=config.ends_with,
        exclude_dirs=config.exclude_dirs,
        only_files=config.only_files,
    )


def _build_reporters(
    args: argparse.Namespace,
    config: OrmondConfig,
    console: Console,
    verbosity: int,
) -> list[Reporter]:
    reporters: list[Reporter] = [ConsoleReporter(console=console, verbosity=verbosity)]
    log_dir = _resolve_log_dir(args, config)
    if log_dir is not None:
        reporters.append(LogReporter(log_dir=log_dir))
    return reporters


async def _run_once(
    files: list[Path],
    args: argparse.Namespace,
    config: OrmondConfig,
    console: Console,
    verbosity: int,
) -> int:
    stats = await orchestrate(files, _build_reporters(args, config, console, verbosity))
    return 0 if stats.ok else 1


async def _run_tests(
    args: argparse.Namespace,
    config: OrmondConfig,
    console: Console,
    verbosity: int,
) -> int:
    files = _collect_files(args, config)
    if not files:
        console.print("[yellow]No test files found.[/yellow]")
        return 0
    return await _run_once(files, args, config, console, verbosity)


async def _watch_tests(
    args: argparse.Namespace,
    config: OrmondConfig,
    console: Console,
    verbosity: int,
) -> None:
    files = _collect_files(args, config)
    if not files:
        console.print("[yellow]No test files found.[/yellow]")
        return

    console.print("Entering watch mode...")
    await _run_once(files, args, config, console, verbosity)

    async def on_change(changed: Path) -> None:
        console.print(f"\nFile changed: {changed}")
        updated = _collect_files(args, config)
        if not updated:
            console.print("[yellow]No test files found after change.[/yellow]")
            return
        await _run_once(updated, args, config, console, verbosity)

    console.print("Watching for file changes...")
    ignored = [*config.exclude_dirs, Path(config.log_dir).name]
    if args.log_dir:
        ignored.append(Path(args.log_dir).name)
    await watch(
        _resolve_paths(args, config),
        on_change,
        exclude_dirs=ignored,
        interval=config.watch_interval,
    )


__all__ = ["main"]
