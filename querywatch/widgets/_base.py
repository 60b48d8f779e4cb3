"""Base widget classes shared by the dashboard widgets.

Standard Reactive Pattern:
- Stateful widgets inherit from StatefulWidget
- Reactive attributes: is_loading, stale
- Watch methods: watch_is_loading, watch_stale
"""

from __future__ import annotations

import re
import uuid
from typing import ClassVar

from textual.reactive import reactive
from textual.widget import Widget


class BaseWidget(Widget):
    """Base widget with ID pattern and default CSS class support.

    Attributes:
        _id_pattern: Pattern string for auto-generating widget IDs.
        _default_classes: Default CSS classes for the widget.
    """

    _id_pattern: ClassVar[str | None] = None
    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *,
        id: str | None = None,
        id_pattern: str | None = None,
        classes: str = "",
        **kwargs,
    ) -> None:
        """Initialize the base widget.

        Args:
            id: Explicit widget ID. Takes precedence over id_pattern.
            id_pattern: Pattern for auto-generating ID, e.g. "kpi-{title}-{uuid}".
            classes: CSS classes to apply to the widget.
            **kwargs: Additional keyword arguments passed to Widget.
        """
        title = kwargs.pop("title", "")
        pattern = id_pattern or self._id_pattern
        if pattern and not id:
            id = self._generate_id(pattern, title=title)

        super().__init__(id=id, classes=classes, **kwargs)

        if self._default_classes:
            self.add_class(*self._default_classes.split())

    @staticmethod
    def _generate_id(pattern: str, title: str = "") -> str:
        slug = re.sub(r"[^a-z0-9]+", "-", (title or "widget").lower()).strip("-")
        return pattern.format(title=slug, uuid=uuid.uuid4().hex[:8])


class StatefulWidget(BaseWidget):
    """Widget that tracks loading and staleness of the data it shows.

    ``is_loading`` is True until the first value arrives. ``stale`` is set
    when the stream feeding the widget has missed several polls in a row.
    """

    is_loading = reactive(True)
    stale = reactive(False)

    def watch_is_loading(self, loading: bool) -> None:
        """Override to render a loading indicator."""

    def watch_stale(self, stale: bool) -> None:
        self.set_class(stale, "stale")
