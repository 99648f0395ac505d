"""Windows widget family."""

import logging

from ..platforms import Platform
from .interface import Button, TextEdit, WindowApplication

logger = logging.getLogger('widgetkit')


class WindowsButton(Button):
    platform = Platform.WINDOWS

    def button_click(self) -> None:
        # Windows native handling
        logger.info("Windows button was clicked")


class WindowsTextEdit(TextEdit):
    platform = Platform.WINDOWS

    def get_text(self) -> str:
        # Windows native handling
        return self._text

    def set_text(self, text: str) -> None:
        # Windows native handling
        self._text = text
        logger.info(f"Windows TextEdit text set to '{self._text}'")


class WindowsWindowApplication(WindowApplication):
    """Creates Windows widgets."""

    platform = Platform.WINDOWS

    def create_button(self) -> Button:
        logger.debug("Creating Windows button")
        return WindowsButton()

    def create_text_edit(self) -> TextEdit:
        logger.debug("Creating Windows text edit")
        return WindowsTextEdit()
