"""MacOS window builder."""

from dataclasses import dataclass

from ..platforms import Platform
from .interface import Window, WindowBuilder


@dataclass
class MacOSWindow(Window):
    platform = Platform.MACOS


class MacOSWindowBuilder(WindowBuilder):
    """Describes a native MacOS window."""

    platform = Platform.MACOS

    def _new_window(self) -> MacOSWindow:
        return MacOSWindow()

    def create_native_window(self) -> None:
        self._window.structure += "Window: Standard MacOS; "

    def add_menubar(self) -> None:
        self._window.structure += "Menubar: MacOS default; "

    def set_title(self, title: str) -> None:
        self._window.structure += "Window title: " + title + ";"

    def set_default_background_color(self) -> None:
        self._window.structure += "Background color: MacOS default; "
