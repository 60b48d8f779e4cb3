"""App-level keyboard bindings.

Textual Binding objects for bindings that work from any screen.
"""

from textual.binding import Binding

APP_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("q", "app.quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
