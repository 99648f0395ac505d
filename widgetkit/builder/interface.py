"""Abstract interface for step-by-step window builders."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

from ..platforms import Platform

logger = logging.getLogger('widgetkit')


@dataclass
class Window:
    """Window product; ``structure`` accumulates one fragment per build step."""

    structure: str = ""

    platform = Platform.NONE

    def print_structure(self) -> None:
        logger.info(self.structure)


class WindowBuilder(ABC):
    """Builds one window at a time.

    The builder owns its in-progress window until ``get_window`` hands it to
    the caller; from then on the builder works on a fresh, empty window.
    """

    platform: Platform = Platform.NONE

    def __init__(self):
        self._window = self._new_window()

    @abstractmethod
    def _new_window(self) -> Window:
        """Create an empty product of this builder's platform."""
        pass

    def reset(self) -> None:
        """Discard the in-progress window and start an empty one."""
        logger.debug(f"Resetting {self.platform.display_name} window builder")
        self._window = self._new_window()

    @abstractmethod
    def create_native_window(self) -> None:
        pass

    @abstractmethod
    def add_menubar(self) -> None:
        pass

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Add the window title.

        Args:
            title: Title text, used verbatim
        """
        pass

    @abstractmethod
    def set_default_background_color(self) -> None:
        pass

    def get_window(self) -> Window:
        """Take the in-progress window.

        Ownership moves to the caller: the builder starts a new empty window,
        so later steps never modify the returned one.
        """
        window = self._window
        self._window = self._new_window()
        return window
