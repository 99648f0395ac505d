"""Platform selection values shared by the demos."""

from enum import Enum


class Platform(Enum):
    """Widget family a run is configured for."""

    WINDOWS = "windows"
    MACOS = "macos"
    NONE = "none"

    @property
    def display_name(self) -> str:
        """Name used in trace output (e.g. 'Windows', 'MacOS')."""
        return {
            Platform.WINDOWS: "Windows",
            Platform.MACOS: "MacOS",
            Platform.NONE: "None",
        }[self]

    @classmethod
    def parse(cls, value: str) -> "Platform":
        """Parse a platform name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the name is not one of the known platforms
        """
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown platform '{value}'. Expected one of: {valid}")
