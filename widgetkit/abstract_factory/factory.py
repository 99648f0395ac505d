"""Window application factory selection."""

import platform as host_platform
from typing import Optional
import logging

from ..platforms import Platform
from .interface import WindowApplication
from .windows import WindowsWindowApplication
from .macos import MacOSWindowApplication

logger = logging.getLogger('widgetkit')

UNSUPPORTED_PLATFORM_MESSAGE = "None of platforms is chosen!"


def detect_host_platform(system: Optional[str] = None) -> Platform:
    """Detect the widget family matching the running operating system.

    Args:
        system: Optional override for ``platform.system()``

    Returns:
        Platform.MACOS on Darwin, Platform.WINDOWS on Windows, otherwise Platform.NONE
    """
    if system is None:
        system = host_platform.system()

    if system == "Darwin":
        return Platform.MACOS
    elif system == "Windows":
        return Platform.WINDOWS
    else:
        logger.debug(f"No widget family for host system: {system}")
        return Platform.NONE


def create_window_application(selected: Platform) -> WindowApplication:
    """Create the window application for the selected platform.

    Args:
        selected: Platform resolved from the run configuration

    Returns:
        The concrete application producing that platform's widgets

    Raises:
        ValueError: If no supported platform is selected
    """
    if selected == Platform.WINDOWS:
        logger.debug("Creating Windows window application")
        return WindowsWindowApplication()
    elif selected == Platform.MACOS:
        logger.debug("Creating MacOS window application")
        return MacOSWindowApplication()
    else:
        raise ValueError(UNSUPPORTED_PLATFORM_MESSAGE)
