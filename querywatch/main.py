"""Command line entry point for querywatch."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx
from rich.console import Console
from rich.table import Table
from textual.logging import TextualHandler

from querywatch.constants import APP_TITLE
from querywatch.constants.defaults import LOG_LEVEL_DEFAULT
from querywatch.constants.enums import StreamName, TimeWindow
from querywatch.controllers import MonitoringController
from querywatch.models.state import AppSettings, ConfigLoadError, ConfigManager
from querywatch.screens.monitoring.config import HISTORY_TABLE_COLUMNS
from querywatch.screens.monitoring.presenter import (
    history_rows,
    kpi_values,
    to_chart_points,
)
from querywatch.utils.formatting import fmt_duration

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _window_arg(value: str) -> TimeWindow:
    try:
        return TimeWindow.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_TITLE,
        description="Terminal dashboard for a query cluster's monitoring API.",
    )
    parser.add_argument("--base-url", help="Backend root URL (default from settings)")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Settings YAML (default {ConfigManager.DEFAULT_PATH})",
    )
    parser.add_argument(
        "--window",
        type=_window_arg,
        default=None,
        help="Initial time window: " + ", ".join(w.value for w in TimeWindow),
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL_DEFAULT,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default %(default)s)",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Fetch every endpoint once, print a snapshot and exit",
    )
    return parser


def configure_logging(level: str, log_file: Path | None = None) -> None:
    """Route logs to the Textual devtools console and optionally a file."""
    handlers: list[logging.Handler] = [TextualHandler()]
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handlers.append(file_handler)
    logging.basicConfig(level=level, handlers=handlers, force=True)
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(max(logging.getLevelName(level), logging.WARNING))


def load_settings(args: argparse.Namespace) -> AppSettings:
    """Settings file plus CLI overrides.

    Raises:
        ConfigLoadError: If the file or an override is invalid.
    """
    overrides = {"base_url": args.base_url, "default_window": args.window}
    return ConfigManager.load(args.config, overrides=overrides)


async def print_snapshot(
    settings: AppSettings,
    console: Console,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Fetch all three endpoints once and print them.

    The live endpoint is checked first; an unreachable backend is reported
    once instead of as three separate failures.

    Returns:
        Process exit code: 0 when every endpoint answered, 1 otherwise.
    """
    async with MonitoringController(
        settings.base_url,
        timeout=settings.request_timeout_seconds,
        history_limit=settings.history_limit,
        transport=transport,
    ) as controller:
        if not await controller.check_connection():
            console.print(f"[red]Backend {settings.base_url} is not answering[/]")
            return 1
        results = await controller.fetch_all(settings.default_window)

    live = results[StreamName.LIVE.value]
    if live.success:
        values = kpi_values(live.data)
        console.print(
            f"[bold]Running uncached[/] {values.running_uncached}   "
            f"[bold]Running cached[/] {values.running_cached}   "
            f"[bold]Nodes[/] {values.cluster_nodes}   [dim]{values.updated_label}[/]"
        )

    series = results[StreamName.SERIES.value]
    if series.success:
        series_table = Table(title=f"Durations ({settings.default_window.label})")
        series_table.add_column("Time")
        series_table.add_column("Cached", justify="right")
        series_table.add_column("Non-cached", justify="right")
        for point in to_chart_points(series.data):
            series_table.add_row(
                point.label, fmt_duration(point.cached_ms), fmt_duration(point.uncached_ms)
            )
        console.print(series_table)

    history = results[StreamName.HISTORY.value]
    if history.success:
        history_table = Table(title="Query history")
        for label, _ in HISTORY_TABLE_COLUMNS:
            history_table.add_column(label)
        for row in history_rows(history.data):
            history_table.add_row(*row)
        console.print(history_table)

    failed = {name: result for name, result in results.items() if not result.success}
    for name, result in failed.items():
        console.print(f"[red]{name}[/]: {result.error}")
    return 1 if failed else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    console = Console(stderr=True)
    try:
        settings = load_settings(args)
    except ConfigLoadError as exc:
        console.print(f"[red]Invalid configuration:[/] {exc}")
        return 2

    if args.once:
        return asyncio.run(print_snapshot(settings, Console()))

    from querywatch.app import QueryWatchApp

    QueryWatchApp(settings, config_path=args.config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
