"""CustomKPI widget for one live cluster counter.

CSS Classes: widget-custom-kpi
"""

import contextlib

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Static

from querywatch.constants.values import PLACEHOLDER_DASH
from querywatch.widgets._base import StatefulWidget

# Spinner frames for the inline loading animation
_SPINNER_FRAMES = ("   ", ".  ", ".. ", "...")
_SPINNER_INTERVAL = 0.3


class CustomKPI(StatefulWidget):
    """KPI card: a title, a big value and an optional dim subtitle.

    CSS Classes: widget-custom-kpi
    """

    DEFAULT_CSS = """
    CustomKPI {
        height: auto;
        width: 1fr;
        padding: 0 1;
        border: solid $surface-lighten-1;
        background: $surface;
        content-align: center middle;
    }
    CustomKPI > .kpi-title {
        text-style: bold;
        color: $secondary;
        text-align: center;
        width: 100%;
    }
    CustomKPI > .kpi-value {
        text-style: bold;
        color: $text;
        text-align: center;
        width: 100%;
    }
    CustomKPI.success > .kpi-value { color: $success; }
    CustomKPI.warning > .kpi-value { color: $warning; }
    CustomKPI.info > .kpi-value { color: $text; }
    CustomKPI.stale > .kpi-value { color: $text-muted; }
    CustomKPI > .kpi-spinner {
        text-style: bold;
        text-align: center;
        width: 100%;
        display: none;
    }
    """
    _id_pattern = "custom-kpi-{title}-{uuid}"
    _default_classes = "widget-custom-kpi"

    value = reactive(PLACEHOLDER_DASH, init=False)

    def __init__(
        self,
        title: str,
        value: str = PLACEHOLDER_DASH,
        status: str = "info",
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        """Initialize the KPI card.

        Args:
            title: The KPI title.
            value: Initial value to display.
            status: Status class (success, warning, info).
            id: Optional widget ID.
            classes: Optional CSS classes.
        """
        super().__init__(id=id, classes=classes, title=title)
        self._title = title
        self._subtitle = ""
        self._initial_value = value
        self._status = status
        self._spinner_timer = None
        self._spinner_frame = 0

    def compose(self) -> ComposeResult:
        yield Static(self._format_title(), classes="kpi-title")
        yield Static(self._initial_value, classes="kpi-value")
        yield Static(_SPINNER_FRAMES[-1], classes="kpi-spinner")

    def on_mount(self) -> None:
        if self._status:
            self.add_class(self._status)
        self.watch_is_loading(self.is_loading)

    def on_unmount(self) -> None:
        if self._spinner_timer is not None:
            self._spinner_timer.stop()
            self._spinner_timer = None

    def _format_title(self) -> str:
        if not self._subtitle:
            return self._title
        return f"{self._title}\n[dim]{self._subtitle}[/dim]"

    def watch_is_loading(self, loading: bool) -> None:
        try:
            value_widget = self.query_one(".kpi-value", Static)
            spinner_widget = self.query_one(".kpi-spinner", Static)
        except NoMatches:
            return

        value_widget.display = not loading
        spinner_widget.display = loading
        if loading and self._spinner_timer is None:
            self._spinner_frame = 0
            self._spinner_timer = self.set_interval(_SPINNER_INTERVAL, self._advance_spinner)
        elif not loading and self._spinner_timer is not None:
            self._spinner_timer.stop()
            self._spinner_timer = None

    def _advance_spinner(self) -> None:
        self._spinner_frame = (self._spinner_frame + 1) % len(_SPINNER_FRAMES)
        with contextlib.suppress(NoMatches):
            self.query_one(".kpi-spinner", Static).update(_SPINNER_FRAMES[self._spinner_frame])

    def watch_value(self, value: str) -> None:
        with contextlib.suppress(NoMatches):
            self.query_one(".kpi-value", Static).update(value)

    def set_value(self, value: str) -> None:
        """Show ``value`` and stop the loading spinner."""
        self.is_loading = False
        self.value = value

    def set_subtitle(self, subtitle: str) -> None:
        """Set the dim text rendered beneath the title."""
        if subtitle == self._subtitle:
            return
        self._subtitle = subtitle
        with contextlib.suppress(NoMatches):
            self.query_one(".kpi-title", Static).update(self._format_title())

    def set_status(self, status: str) -> None:
        if self._status == status:
            return
        if self._status:
            self.remove_class(self._status)
        self._status = status
        self.add_class(status)

    @property
    def title(self) -> str:
        return self._title

    @property
    def subtitle(self) -> str:
        return self._subtitle

    @property
    def status(self) -> str:
        return self._status
