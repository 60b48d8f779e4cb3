"""Screen mixins."""

from querywatch.screens.mixins.view_state_mixin import ViewStateChanged, ViewStateMixin

__all__ = [
    "ViewStateChanged",
    "ViewStateMixin",
]
