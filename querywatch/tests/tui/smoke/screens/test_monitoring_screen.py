"""Smoke tests for MonitoringScreen and QueryWatchApp.

This module tests:
- Screen class attributes and bindings
- Composition and rendering against a mocked backend via app.run_test()
"""

from __future__ import annotations

import httpx
import pytest

from querywatch.app import QueryWatchApp
from querywatch.constants.enums import TimeWindow
from querywatch.controllers.monitoring import MonitoringController
from querywatch.models.state import AppSettings
from querywatch.screens import MonitoringScreen
from querywatch.screens.monitoring.config import (
    HISTORY_TABLE_ID,
    KPI_CACHED_ID,
    KPI_NODES_ID,
    KPI_UNCACHED_ID,
)
from querywatch.streams.engine import MonitoringEngine
from querywatch.widgets import CustomDataTable, CustomKPI

BASE_URL = "http://backend.test"


def _backend(request: httpx.Request) -> httpx.Response:
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
            200,
            json=[
                {"tsIso": "2024-05-01T12:00:00Z", "cachedMs": 10, "uncachedMs": 900},
                {"tsIso": "2024-05-01T12:01:00Z", "cachedMs": None, "uncachedMs": 950},
            ],
        )
    if request.url.path == "/api/queries/history":
        return httpx.Response(200, json=[])
    return httpx.Response(404)


def _app() -> QueryWatchApp:
    settings = AppSettings(base_url=BASE_URL)
    controller = MonitoringController(BASE_URL, transport=httpx.MockTransport(_backend))
    engine = MonitoringEngine(settings, controller=controller)
    return QueryWatchApp(settings, engine=engine)


# =============================================================================
# Class attributes
# =============================================================================


class TestMonitoringScreenAttributes:
    """Test MonitoringScreen class attributes."""

    def test_screen_has_bindings(self) -> None:
        actions = {binding[1] for binding in MonitoringScreen.BINDINGS}
        assert "refresh" in actions
        assert "select_window('6h')" in actions

    def test_one_binding_per_window(self) -> None:
        keys = {binding[0] for binding in MonitoringScreen.BINDINGS}
        assert {"1", "2", "3", "4"} <= keys
        assert len(TimeWindow) == 4

    def test_screen_can_be_instantiated_without_engine(self) -> None:
        screen = MonitoringScreen()
        assert screen.engine is None


# =============================================================================
# Runtime
# =============================================================================


class TestMonitoringScreenRuntime:
    """Run the app headless against a mocked backend."""

    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_renders_first_snapshot(self) -> None:
        app = _app()
        async with app.run_test(size=(140, 45)) as pilot:
            await app.engine.scheduler.wait_idle()
            await pilot.pause()

            screen = app.screen
            assert isinstance(screen, MonitoringScreen)
            assert screen.query_one(f"#{KPI_UNCACHED_ID}", CustomKPI).value == "2"
            assert screen.query_one(f"#{KPI_CACHED_ID}", CustomKPI).value == "5"
            assert screen.query_one(f"#{KPI_NODES_ID}", CustomKPI).value == "3"

            table = screen.query_one(f"#{HISTORY_TABLE_ID}", CustomDataTable)
            assert table.row_count == 1
            assert table.get_row_data(0)[0] == "No history yet."

        assert app.engine.controller.is_closed

    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_window_key_switches_series_window(self) -> None:
        app = _app()
        async with app.run_test(size=(140, 45)) as pilot:
            await app.engine.scheduler.wait_idle()
            await pilot.press("3")
            await pilot.pause()

            assert app.engine.window is TimeWindow.H6
            assert app.engine.state.window is TimeWindow.H6
