"""End-to-end use of the window builders."""

from typing import List

from .director import WindowCreationManager
from .interface import Window, WindowBuilder
from .macos import MacOSWindowBuilder
from .windows import WindowsWindowBuilder

DEFAULT_CUSTOM_TITLE = "New title"


def build_both_recipes(manager: WindowCreationManager, builder: WindowBuilder,
                       title: str = DEFAULT_CUSTOM_TITLE) -> List[Window]:
    """Build the default window and a titled window with one builder."""
    manager.set_builder(builder)

    manager.create_default_window()
    default_window = builder.get_window()
    default_window.print_structure()

    builder.reset()
    manager.create_window_with_title(title)
    titled_window = builder.get_window()
    titled_window.print_structure()

    return [default_window, titled_window]


def client_code(manager: WindowCreationManager, title: str = DEFAULT_CUSTOM_TITLE) -> List[Window]:
    """Run both recipes with the Windows builder, then the MacOS builder.

    Returns:
        The four windows produced, in build order
    """
    windows: List[Window] = []
    for builder in (WindowsWindowBuilder(), MacOSWindowBuilder()):
        windows.extend(build_both_recipes(manager, builder, title))
    return windows
