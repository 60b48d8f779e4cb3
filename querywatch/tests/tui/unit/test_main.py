"""Tests for the command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from rich.console import Console

from querywatch.constants.enums import TimeWindow
from querywatch.main import (
    build_parser,
    configure_logging,
    load_settings,
    main,
    print_snapshot,
)
from querywatch.models.state import AppSettings, ConfigLoadError


@pytest.mark.unit
@pytest.mark.fast
class TestParser:
    """Tests for build_parser."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.base_url is None
        assert args.config is None
        assert args.window is None
        assert args.log_file is None
        assert args.log_level == "WARNING"
        assert args.once is False

    def test_window_is_parsed(self) -> None:
        args = build_parser().parse_args(["--window", "24h"])
        assert args.window is TimeWindow.H24

    def test_invalid_window_exits(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--window", "3h"])

    def test_log_level_case_insensitive(self) -> None:
        assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"


@pytest.mark.unit
@pytest.mark.fast
class TestLoadSettings:
    """Tests for load_settings."""

    def test_cli_overrides_file(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("base_url: http://file:1\ndefault_window: 6h\n", encoding="utf-8")
        args = build_parser().parse_args(
            ["--config", str(config), "--base-url", "http://cli:2/", "--window", "15m"]
        )
        settings = load_settings(args)
        assert settings.base_url == "http://cli:2"
        assert settings.default_window is TimeWindow.M15

    def test_bad_base_url_raises(self, tmp_path: Path) -> None:
        args = build_parser().parse_args(
            ["--config", str(tmp_path / "none.yaml"), "--base-url", "ftp://x"]
        )
        with pytest.raises(ConfigLoadError):
            load_settings(args)

    def test_main_reports_bad_config(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("history_limit: -1\n", encoding="utf-8")
        with patch("querywatch.main.configure_logging"):
            assert main(["--config", str(config)]) == 2


@pytest.mark.unit
@pytest.mark.fast
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_handler_added(self, tmp_path: Path) -> None:
        log_file = tmp_path / "querywatch.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("INFO", log_file)
            assert root.level == logging.INFO
            assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            for handler in root.handlers:
                if isinstance(handler, logging.FileHandler):
                    handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


def _healthy_backend(paths: list[str]):
    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        if request.url.path == "/api/metrics/live":
            return httpx.Response(
                200,
                json={
                    "runningUncached": 2,
                    "runningCached": 5,
                    "clusterNodes": 3,
                    "updatedAtIso": "2024-05-01T12:00:00Z",
                },
            )
        if request.url.path == "/api/metrics/timeseries":
            return httpx.Response(
                200, json=[{"tsIso": "2024-05-01T12:00:00Z", "cachedMs": 10, "uncachedMs": 900}]
            )
        return httpx.Response(200, json=[])

    return handler


@pytest.mark.unit
class TestPrintSnapshot:
    """Tests for the --once snapshot printer."""

    @pytest.mark.asyncio
    async def test_prints_all_sources(self) -> None:
        paths: list[str] = []
        console = Console(record=True, width=160)
        code = await print_snapshot(
            AppSettings(base_url="http://backend.test"),
            console,
            transport=httpx.MockTransport(_healthy_backend(paths)),
        )

        assert code == 0
        output = console.export_text()
        assert "Running uncached" in output
        assert "Query history" in output
        assert "No history yet." in output
        assert paths[0] == "/api/metrics/live"

    @pytest.mark.asyncio
    async def test_unreachable_backend_stops_after_connection_check(self) -> None:
        paths: list[str] = []

        def refuse(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            raise httpx.ConnectError("connection refused", request=request)

        console = Console(record=True, width=160)
        code = await print_snapshot(
            AppSettings(base_url="http://backend.test"),
            console,
            transport=httpx.MockTransport(refuse),
        )

        assert code == 1
        assert paths == ["/api/metrics/live"]
        assert "not answering" in console.export_text()
