"""End-to-end use of a window application."""

import logging
from typing import Tuple

from .interface import Button, TextEdit, WindowApplication

logger = logging.getLogger('widgetkit')

DEFAULT_TEXT = "Hello OS"


def client_code(application: WindowApplication, text: str = DEFAULT_TEXT) -> Tuple[Button, TextEdit]:
    """Exercise one widget family through its abstract interfaces only.

    Returns:
        The (button, text_edit) pair that was created
    """
    button = application.create_button()
    text_edit = application.create_text_edit()

    button.button_click()
    text_edit.set_text(text)
    logger.info(f"Text edit have text -> {text_edit.get_text()}")

    return button, text_edit
