"""ViewStateMixin - delivers engine snapshots to a screen as Textual messages.

The engine calls its subscribers synchronously on the event loop. Posting a
message instead of touching widgets from the callback keeps all rendering in
the screen's own message handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from textual.message import Message

from querywatch.models.state import ViewState
from querywatch.streams.engine import MonitoringEngine

logger = logging.getLogger(__name__)


# ============================================================================
# Messages
# ============================================================================


class ViewStateChanged(Message):
    """A new view state snapshot was published.

    Attributes:
        state: The snapshot
    """

    def __init__(self, state: ViewState) -> None:
        super().__init__()
        self.state = state


# ============================================================================
# ViewStateMixin
# ============================================================================


class ViewStateMixin:
    """Mixin for screens rendering a :class:`MonitoringEngine` snapshot.

    Usage:
        ```python
        class MyScreen(ViewStateMixin, Screen):
            def on_mount(self) -> None:
                self.bind_engine(self.app.engine)

            def on_view_state_changed(self, message: ViewStateChanged) -> None:
                self.render_state(message.state)
        ```
    """

    _engine: MonitoringEngine | None = None
    _unsubscribe: Callable[[], None] | None = None
    _last_revision: int = -1

    @property
    def engine(self) -> MonitoringEngine | None:
        return self._engine

    def bind_engine(self, engine: MonitoringEngine) -> None:
        """Subscribe to ``engine`` and post the current snapshot right away."""
        self.unbind_engine()
        self._engine = engine
        self._unsubscribe = engine.subscribe(self._on_engine_state)
        self._on_engine_state(engine.state)

    def unbind_engine(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._engine = None

    def _on_engine_state(self, state: ViewState) -> None:
        post_message = getattr(self, "post_message", None)
        if post_message is None:
            return
        post_message(ViewStateChanged(state))

    def accept_revision(self, state: ViewState) -> bool:
        """Return False for a snapshot older than the last one rendered."""
        if state.revision < self._last_revision:
            logger.debug("Skipping render of revision %d", state.revision)
            return False
        self._last_revision = state.revision
        return True
