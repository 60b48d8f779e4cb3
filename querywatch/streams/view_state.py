"""View state aggregator: the single writer-checked home of the snapshot."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from querywatch.constants.enums import TimeWindow, ViewSlice
from querywatch.models.state.view_state import ViewState

logger = logging.getLogger(__name__)

ViewStateListener = Callable[[ViewState], None]
SliceWriter = Callable[[Any], bool]


class ViewStateAggregator:
    """Owns the :class:`ViewState` and applies slice writes.

    Each slice has at most one owner. Only writers obtained from
    :meth:`claim` by the current owner change the snapshot; writers of a
    released or superseded owner are no-ops.
    """

    def __init__(
        self,
        initial: ViewState,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._state = initial
        self._clock = clock
        self._owners: dict[ViewSlice, object] = {}
        self._listeners: list[ViewStateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def owner_of(self, view_slice: ViewSlice) -> object | None:
        return self._owners.get(view_slice)

    def claim(self, view_slice: ViewSlice, owner: object) -> SliceWriter:
        """Make ``owner`` the only writer of ``view_slice``.

        Returns:
            A writer that replaces the slice and returns True, or returns False
            once ``owner`` no longer holds the slice.
        """
        previous = self._owners.get(view_slice)
        if previous is not None and previous is not owner:
            logger.debug("Slice %s handed from %r to %r", view_slice.value, previous, owner)
        self._owners[view_slice] = owner

        def write(value: Any) -> bool:
            return self._write(view_slice, owner, value)

        return write

    def release(self, view_slice: ViewSlice, owner: object) -> None:
        if self._owners.get(view_slice) is owner:
            del self._owners[view_slice]

    def switch_window(self, window: TimeWindow) -> None:
        """Store ``window`` and clear the series that belonged to the old one."""
        if window is self._state.window and not self._state.series:
            return
        self._publish(self._state.with_window(window))

    def subscribe(self, listener: ViewStateListener) -> Callable[[], None]:
        """Call ``listener`` with every new snapshot.

        Returns:
            A callable that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _write(self, view_slice: ViewSlice, owner: object, value: Any) -> bool:
        if self._owners.get(view_slice) is not owner:
            logger.debug("Ignoring %s write from non-owner %r", view_slice.value, owner)
            return False
        self._publish(self._state.with_slice(view_slice, value, at=self._clock()))
        return True

    def _publish(self, state: ViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("View state listener %r failed", listener)
