"""Abstract factory demo: matched families of platform widgets."""

from .interface import Button, TextEdit, WindowApplication
from .windows import WindowsButton, WindowsTextEdit, WindowsWindowApplication
from .macos import MacOSButton, MacOSTextEdit, MacOSWindowApplication
from .factory import create_window_application, detect_host_platform
from .client import client_code

__all__ = [
    'Button', 'TextEdit', 'WindowApplication',
    'WindowsButton', 'WindowsTextEdit', 'WindowsWindowApplication',
    'MacOSButton', 'MacOSTextEdit', 'MacOSWindowApplication',
    'create_window_application', 'detect_host_platform', 'client_code',
]
