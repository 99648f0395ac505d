"""Builder demo: platform windows assembled step by step."""

from .interface import Window, WindowBuilder
from .windows import WindowsWindow, WindowsWindowBuilder
from .macos import MacOSWindow, MacOSWindowBuilder
from .director import WindowCreationManager, DEFAULT_WINDOW_TITLE
from .client import client_code, build_both_recipes

__all__ = [
    'Window', 'WindowBuilder',
    'WindowsWindow', 'WindowsWindowBuilder',
    'MacOSWindow', 'MacOSWindowBuilder',
    'WindowCreationManager', 'DEFAULT_WINDOW_TITLE',
    'client_code', 'build_both_recipes',
]
