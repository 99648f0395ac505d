"""MacOS widget family."""

import logging

from ..platforms import Platform
from .interface import Button, TextEdit, WindowApplication

logger = logging.getLogger('widgetkit')


class MacOSButton(Button):
    platform = Platform.MACOS

    def button_click(self) -> None:
        # MacOS native handling
        logger.info("MacOS button was clicked")


class MacOSTextEdit(TextEdit):
    platform = Platform.MACOS

    def get_text(self) -> str:
        # MacOS native handling
        return self._text

    def set_text(self, text: str) -> None:
        # MacOS native handling
        self._text = text
        logger.info(f"MacOS TextEdit text set to '{self._text}'")


class MacOSWindowApplication(WindowApplication):
    """Creates MacOS widgets."""

    platform = Platform.MACOS

    def create_button(self) -> Button:
        logger.debug("Creating MacOS button")
        return MacOSButton()

    def create_text_edit(self) -> TextEdit:
        logger.debug("Creating MacOS text edit")
        return MacOSTextEdit()
