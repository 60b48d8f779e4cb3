"""DataTable keyboard bindings."""

from typing import Annotated

DATA_TABLE_BINDINGS: list[
    Annotated[tuple[str, str, str], "key, action, description"]
] = [
    ("home", "scroll_top", "Top"),
    ("end", "scroll_bottom", "Bottom"),
]

__all__ = [
    "DATA_TABLE_BINDINGS",
]
