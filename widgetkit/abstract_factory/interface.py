"""Abstract interfaces for the widget product families."""

from abc import ABC, abstractmethod

from ..platforms import Platform


class Button(ABC):
    """Abstract clickable button."""

    platform: Platform = Platform.NONE

    @abstractmethod
    def button_click(self) -> None:
        """Handle a click using the native toolkit."""
        pass


class TextEdit(ABC):
    """Abstract single-line text field."""

    platform: Platform = Platform.NONE

    def __init__(self):
        self._text = ""

    @abstractmethod
    def get_text(self) -> str:
        """Get the text currently held by the field."""
        pass

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the text held by the field.

        Args:
            text: New content of the field
        """
        pass


class WindowApplication(ABC):
    """Abstract factory producing one matching family of widgets.

    Concrete applications only ever return products of their own platform,
    so a client holding one application can never mix families.
    """

    platform: Platform = Platform.NONE

    @abstractmethod
    def create_button(self) -> Button:
        """Create a new button of this application's family."""
        pass

    @abstractmethod
    def create_text_edit(self) -> TextEdit:
        """Create a new text field of this application's family."""
        pass

    def get_platform_name(self) -> str:
        """Get the display name of this application's platform."""
        return self.platform.display_name
