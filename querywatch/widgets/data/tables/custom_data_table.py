"""CustomDataTable widget - standardized wrapper around Textual's DataTable."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from textual.containers import Container
from textual.coordinate import Coordinate
from textual.widgets import DataTable as TextualDataTable

from querywatch.constants.limits import MAX_ROWS_DISPLAY
from querywatch.keyboard import DATA_TABLE_BINDINGS

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CustomDataTable(Container):
    """Data table wrapper with fixed columns and bulk row replacement.

    CSS Classes: widget-custom-data-table

    Example:
        ```python
        table = CustomDataTable(
            columns=[("Time", "time"), ("Query ID", "query_id")],
            id="history-table",
        )
        ```
    """

    DEFAULT_CSS = """
    CustomDataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        min-height: 3;
        background: $surface;
    }
    CustomDataTable > DataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        border: none;
        background: transparent;
        overflow-x: auto;
        overflow-y: auto;
    }
    """

    BINDINGS = DATA_TABLE_BINDINGS

    def __init__(
        self,
        columns: list[tuple[str, str]] | None = None,
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = True,
    ) -> None:
        """Initialize the data table wrapper.

        Args:
            columns: List of (label, key) column definitions.
            id: Widget ID.
            classes: CSS classes (widget-custom-data-table is always added).
            zebra_stripes: Whether to display alternating row colors.
        """
        super().__init__(id=id, classes=f"widget-custom-data-table {classes}".strip())
        self._columns = list(columns or [])
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None

    def compose(self) -> ComposeResult:
        table = TextualDataTable(cursor_type="row")
        table.zebra_stripes = self._zebra_stripes
        self._inner_widget = table
        yield table

        for label, key in self._columns:
            table.add_column(label, key=key)

    @property
    def data_table(self) -> TextualDataTable | None:
        """The composed Textual DataTable, or None before compose."""
        return self._inner_widget

    @property
    def column_keys(self) -> list[str]:
        return [key for _, key in self._columns]

    @contextmanager
    def batch_update(self):
        """Hold screen updates until the block exits. No-op before mount."""
        if not self.is_mounted:
            yield
            return
        with self.app.batch_update():
            yield

    def add_rows(self, rows: Iterable[Iterable[Any]]) -> list[Any]:
        """Add rows, truncating to MAX_ROWS_DISPLAY."""
        if self._inner_widget is None:
            return []
        materialized = list(rows)
        if len(materialized) > MAX_ROWS_DISPLAY:
            logger.warning("Truncating %d rows to %d", len(materialized), MAX_ROWS_DISPLAY)
            materialized = materialized[:MAX_ROWS_DISPLAY]
        return self._inner_widget.add_rows(materialized)

    def replace_rows(self, rows: Iterable[Iterable[Any]]) -> None:
        """Swap the whole body for ``rows`` and keep the cursor row in range."""
        table = self._inner_widget
        if table is None:
            return
        cursor_row = table.cursor_coordinate.row
        with self.batch_update():
            table.clear()
            self.add_rows(rows)
        if table.row_count:
            table.move_cursor(row=min(cursor_row, table.row_count - 1), column=0)

    def clear(self) -> None:
        if self._inner_widget is not None:
            self._inner_widget.clear()

    @property
    def row_count(self) -> int:
        if self._inner_widget is not None:
            return self._inner_widget.row_count
        return 0

    def get_row_data(self, index: int) -> tuple[Any, ...] | None:
        """Return the cell values of row ``index``, or None if out of range."""
        table = self._inner_widget
        if table is None or not 0 <= index < table.row_count:
            return None
        return tuple(table.get_row_at(index))

    def action_scroll_top(self) -> None:
        if self._inner_widget is not None and self._inner_widget.row_count:
            self._inner_widget.cursor_coordinate = Coordinate(0, 0)

    def action_scroll_bottom(self) -> None:
        if self._inner_widget is not None and self._inner_widget.row_count:
            self._inner_widget.cursor_coordinate = Coordinate(self._inner_widget.row_count - 1, 0)
