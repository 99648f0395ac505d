"""Named window construction recipes."""

import logging
from typing import Optional

from .interface import WindowBuilder

logger = logging.getLogger('widgetkit')

DEFAULT_WINDOW_TITLE = "New Window"


class WindowCreationManager:
    """Runs builder steps in a fixed order.

    The manager only references its builder; the caller keeps the builder and
    reads the result through ``builder.get_window()``.
    """

    def __init__(self, builder: Optional[WindowBuilder] = None):
        self._builder = builder

    def set_builder(self, builder: WindowBuilder) -> None:
        self._builder = builder

    def create_default_window(self) -> None:
        """Build a window titled ``DEFAULT_WINDOW_TITLE``."""
        self._build(DEFAULT_WINDOW_TITLE)

    def create_window_with_title(self, title: str) -> None:
        self._build(title)

    def _build(self, title: str) -> None:
        if self._builder is None:
            raise RuntimeError("No window builder set. Call set_builder() first.")

        logger.debug(f"Building {self._builder.platform.display_name} window titled '{title}'")
        self._builder.create_native_window()
        self._builder.add_menubar()
        self._builder.set_title(title)
        self._builder.set_default_background_color()
