"""First-run tutorial screen and its slide deck."""

from .deck import SlideDeck, SlideDeckProtocol
from .screen import TutorialScreen, TutorialState
from .slides import SLIDE_CONTENT, build_slides

__all__ = [
    "SLIDE_CONTENT",
    "SlideDeck",
    "SlideDeckProtocol",
    "TutorialScreen",
    "TutorialState",
    "build_slides",
]
