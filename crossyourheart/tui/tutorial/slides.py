"""Slide content for the first-run tutorial."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from crossyourheart.models import WHITE, Slide
from crossyourheart.tui.assets import AssetCatalog
from crossyourheart.tui.theme import Theme

logger = logging.getLogger(__name__)

ColorRole = Literal["primary", "richTeal", "richGreen"]


@dataclass(frozen=True)
class SlideContent:
    """Authored text and styling role for one slide."""

    title: str
    description: str
    image: str
    color: ColorRole


# Fixed tutorial order; primary bookends, teal for the list, green for solving
SLIDE_CONTENT: tuple[SlideContent, ...] = (
    SlideContent(
        "Welcome to Cross Your Heart!",
        "Let's take a quick tour of the app...",
        "cross_your_heart_logo_large",
        "primary",
    ),
    SlideContent(
        "Puzzle List Screen",
        "When you open the app, you'll see a list of puzzles. "
        "Try the Welcome puzzle for a fun introduction to the app!",
        "puzzle_list_screen",
        "richTeal",
    ),
    SlideContent(
        "Downloading Puzzles",
        "Press the Download button to find puzzles on the web. "
        "You can also open puzzles that are emailed to you, "
        "or that you download using your web browser.",
        "puzzle_list_screen_download_button",
        "richTeal",
    ),
    SlideContent(
        "Loading Puzzles from Disk",
        "If you have downloaded a puzzle, but haven't yet opened it in "
        "Cross Your Heart, press the File button to find it using your file manager.",
        "puzzle_list_screen_file_button",
        "richTeal",
    ),
    SlideContent(
        "Puzzle Solving Screen",
        "When you select a puzzle, you'll see the puzzle solving screen. "
        "This is a fairly standard interface for crossword solving, "
        "with a few special features...",
        "puzzle_screen",
        "richGreen",
    ),
    SlideContent(
        "Puzzle Menu Options",
        "The top menu includes the timer, puzzle info, pen/pencil toggle, "
        "and more options such as hints and navigation preferences.",
        "puzzle_screen_menu",
        "richGreen",
    ),
    SlideContent(
        "Navigating Within the Puzzle",
        "In order to move around the puzzle, you can tap the entry you want in the "
        "grid (double-tap to switch directions, or just tap the clue text). "
        "You can also quickly navigate between clues using the buttons above the keyboard.",
        "puzzle_screen_navigation",
        "richGreen",
    ),
    SlideContent(
        "Keyboard",
        "Use the bottom-left button to enter a rebus. "
        "Use the bottom right button to undo your most recent changes.",
        "puzzle_screen_keyboard",
        "richGreen",
    ),
    SlideContent(
        "Have Fun!",
        "That's it! Enjoy solving! You can always review this tutorial by "
        'selecting "Show Tutorial" in the puzzle list screen.',
        "cross_your_heart_logo_large",
        "primary",
    ),
)


def build_slides(theme: Theme, assets: AssetCatalog) -> tuple[Slide, ...]:
    """Assemble the tutorial slides in display order.

    Theme and asset errors propagate unchanged; a tutorial with a missing
    color or image is not shown at all.
    """
    slides = []
    for content in SLIDE_CONTENT:
        assets.resolve(content.image)
        slides.append(
            Slide(
                title=content.title,
                description=content.description,
                image=content.image,
                title_color=WHITE,
                description_color=WHITE,
                background_color=theme.resolve(content.color),
            )
        )
    logger.debug("Built %d tutorial slides", len(slides))
    return tuple(slides)
