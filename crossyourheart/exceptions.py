"""Errors raised while assembling the tutorial."""


class TutorialError(Exception):
    """Base class for tutorial errors."""


class ThemeResolutionError(TutorialError):
    """A theme color is missing or malformed."""


class AssetNotFoundError(TutorialError):
    """A slide image does not resolve to a bundled asset."""

    def __init__(self, name: str, location: str) -> None:
        super().__init__(f"Asset '{name}' not found in {location}")
        self.name = name
        self.location = location


class DeckConfigurationError(TutorialError):
    """The slide deck was used outside its initialize-once contract."""
