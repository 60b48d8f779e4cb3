"""Monitoring screen: live KPIs, duration chart and query history."""

from __future__ import annotations

import logging
from contextlib import suppress

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Footer, Header, Select, Static

from querywatch.constants.enums import StreamName, TimeWindow
from querywatch.keyboard import MONITORING_SCREEN_BINDINGS
from querywatch.models.metrics import History, Series
from querywatch.models.state import ViewState
from querywatch.screens.mixins.view_state_mixin import ViewStateChanged, ViewStateMixin
from querywatch.screens.monitoring.config import (
    CHART_ID,
    CHART_PANEL_ID,
    CHART_TITLE,
    HISTORY_PANEL_ID,
    HISTORY_TABLE_COLUMNS,
    HISTORY_TABLE_ID,
    HISTORY_TITLE,
    KPI_CACHED_ID,
    KPI_CACHED_TITLE,
    KPI_NODES_ID,
    KPI_NODES_TITLE,
    KPI_UNCACHED_ID,
    KPI_UNCACHED_TITLE,
    STALENESS_CHECK_INTERVAL,
    UPDATED_LABEL_ID,
    WINDOW_OPTIONS,
    WINDOW_SELECT_ID,
)
from querywatch.screens.monitoring.presenter import (
    build_chart_lines,
    history_rows,
    history_summary,
    kpi_values,
    panel_subtitle,
    stale_streams,
    to_chart_points,
)
from querywatch.streams.engine import MonitoringEngine
from querywatch.utils.formatting import fmt_duration
from querywatch.widgets import CustomDataTable, CustomKPI, DurationChart

logger = logging.getLogger(__name__)

_KPI_IDS = (KPI_UNCACHED_ID, KPI_CACHED_ID, KPI_NODES_ID)


class MonitoringScreen(ViewStateMixin, Screen):
    """Single dashboard page. Renders whatever snapshot the engine publishes."""

    BINDINGS = MONITORING_SCREEN_BINDINGS

    DEFAULT_CSS = """
    MonitoringScreen {
        layout: vertical;
    }
    #kpi-row {
        height: auto;
    }
    #updated-label {
        height: 1;
        color: $text-muted;
        text-align: right;
        padding: 0 1;
    }
    #duration-panel, #history-panel {
        border: round $surface-lighten-2;
        height: 1fr;
    }
    #duration-panel.stale, #history-panel.stale {
        border: round $warning;
    }
    #window-row {
        height: auto;
    }
    #window-select {
        width: 24;
    }
    """

    def __init__(self, engine: MonitoringEngine | None = None) -> None:
        super().__init__()
        self._engine_override = engine
        self._staleness_timer: Timer | None = None
        self._rendered_series: Series | None = None
        self._rendered_history: History | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="kpi-row"):
            yield CustomKPI(KPI_UNCACHED_TITLE, id=KPI_UNCACHED_ID, status="warning")
            yield CustomKPI(KPI_CACHED_TITLE, id=KPI_CACHED_ID, status="success")
            yield CustomKPI(KPI_NODES_TITLE, id=KPI_NODES_ID)
        yield Static("", id=UPDATED_LABEL_ID)
        with Vertical(id=CHART_PANEL_ID):
            with Horizontal(id="window-row"):
                yield Select(
                    WINDOW_OPTIONS,
                    value=TimeWindow.H1,
                    allow_blank=False,
                    id=WINDOW_SELECT_ID,
                )
            yield DurationChart(y_formatter=fmt_duration, id=CHART_ID)
        with Vertical(id=HISTORY_PANEL_ID):
            yield CustomDataTable(HISTORY_TABLE_COLUMNS, id=HISTORY_TABLE_ID)
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(f"#{CHART_PANEL_ID}").border_title = CHART_TITLE
        self.query_one(f"#{HISTORY_PANEL_ID}").border_title = HISTORY_TITLE

        engine = self._engine_override or getattr(self.app, "engine", None)
        if engine is None:
            logger.warning("Monitoring screen mounted without an engine")
            return
        self.bind_engine(engine)
        self._staleness_timer = self.set_interval(
            STALENESS_CHECK_INTERVAL, self._refresh_staleness
        )

    def on_unmount(self) -> None:
        if self._staleness_timer is not None:
            self._staleness_timer.stop()
            self._staleness_timer = None
        self.unbind_engine()

    # =========================================================================
    # Rendering
    # =========================================================================

    def on_view_state_changed(self, message: ViewStateChanged) -> None:
        if not self.accept_revision(message.state):
            return
        self.render_state(message.state)

    def render_state(self, state: ViewState) -> None:
        """Push one snapshot into the widgets."""
        with suppress(NoMatches):
            self._render_live(state)
            self._render_window(state.window)
            if state.series is not self._rendered_series:
                self._render_series(state.series)
            if state.history is not self._rendered_history:
                self._render_history(state.history)

    def _render_live(self, state: ViewState) -> None:
        values = kpi_values(state.live)
        self.query_one(f"#{KPI_UNCACHED_ID}", CustomKPI).set_value(values.running_uncached)
        self.query_one(f"#{KPI_CACHED_ID}", CustomKPI).set_value(values.running_cached)
        self.query_one(f"#{KPI_NODES_ID}", CustomKPI).set_value(values.cluster_nodes)
        self.query_one(f"#{UPDATED_LABEL_ID}", Static).update(values.updated_label)

    def _render_window(self, window: TimeWindow) -> None:
        select = self.query_one(f"#{WINDOW_SELECT_ID}", Select)
        if select.value != window:
            select.value = window

    def _render_series(self, series: Series) -> None:
        points = to_chart_points(series)
        chart = self.query_one(f"#{CHART_ID}", DurationChart)
        chart.plot_lines([point.label for point in points], build_chart_lines(points))
        self._rendered_series = series

    def _render_history(self, history: History) -> None:
        table = self.query_one(f"#{HISTORY_TABLE_ID}", CustomDataTable)
        table.replace_rows(history_rows(history))
        self.query_one(f"#{HISTORY_PANEL_ID}").border_subtitle = history_summary(history)
        self._rendered_history = history

    def _refresh_staleness(self) -> None:
        if self.engine is None:
            return
        staleness = self.engine.staleness()
        stale = stale_streams(staleness)
        self.sub_title = f"stale: {', '.join(stale)}" if stale else ""
        with suppress(NoMatches):
            for kpi_id in _KPI_IDS:
                self.query_one(f"#{kpi_id}", CustomKPI).stale = staleness[StreamName.LIVE]

            chart_panel = self.query_one(f"#{CHART_PANEL_ID}")
            chart_panel.set_class(staleness[StreamName.SERIES], "stale")
            chart_panel.border_subtitle = panel_subtitle(
                self.engine.window.label, staleness[StreamName.SERIES]
            )

            history_panel = self.query_one(f"#{HISTORY_PANEL_ID}")
            history_panel.set_class(staleness[StreamName.HISTORY], "stale")
            history_panel.border_subtitle = panel_subtitle(
                history_summary(self.engine.state.history), staleness[StreamName.HISTORY]
            )

    # =========================================================================
    # Window selection
    # =========================================================================

    @on(Select.Changed, f"#{WINDOW_SELECT_ID}")
    def _on_window_selected(self, event: Select.Changed) -> None:
        if self.engine is None or event.value is Select.BLANK:
            return
        self.engine.set_window(event.value)

    def action_select_window(self, token: str) -> None:
        window = TimeWindow.parse(token)
        if self.engine is not None:
            self.engine.set_window(window)
        with suppress(NoMatches):
            self._render_window(window)

    def action_cycle_window(self) -> None:
        if self.engine is None:
            return
        windows = list(TimeWindow)
        current = windows.index(self.engine.window)
        self.action_select_window(windows[(current + 1) % len(windows)].value)

    def action_focus_table(self) -> None:
        with suppress(NoMatches):
            table = self.query_one(f"#{HISTORY_TABLE_ID}", CustomDataTable).data_table
            if table is not None:
                table.focus()

    # =========================================================================
    # Refresh
    # =========================================================================

    def action_refresh(self) -> None:
        if self.engine is None:
            return
        self.run_worker(self.engine.refresh(), group="refresh", exclusive=True)
