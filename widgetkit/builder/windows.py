"""Windows window builder."""

from dataclasses import dataclass

from ..platforms import Platform
from .interface import Window, WindowBuilder


@dataclass
class WindowsWindow(Window):
    platform = Platform.WINDOWS


class WindowsWindowBuilder(WindowBuilder):
    """Describes a native Windows window."""

    platform = Platform.WINDOWS

    def _new_window(self) -> WindowsWindow:
        return WindowsWindow()

    def create_native_window(self) -> None:
        self._window.structure += "Window: Standard Windows; "

    def add_menubar(self) -> None:
        self._window.structure += "Menubar: Windows default; "

    def set_title(self, title: str) -> None:
        self._window.structure += "Window title: " + title + ";"

    def set_default_background_color(self) -> None:
        self._window.structure += "Background color: Windows default; "
