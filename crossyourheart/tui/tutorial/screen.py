"""Tutorial screen: nine slides introducing the app, dismissed by Skip or Done."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import Footer, Header

from crossyourheart.models import Slide
from crossyourheart.tui.assets import AssetCatalog
from crossyourheart.tui.theme import Theme
from crossyourheart.tui.tutorial.deck import SlideDeck, SlideDeckProtocol
from crossyourheart.tui.tutorial.keybindings import (
    BACK_H_BINDING,
    BACK_LEFT_BINDING,
    DONE_ENTER_BINDING,
    NEXT_L_BINDING,
    NEXT_RIGHT_BINDING,
    NEXT_SPACE_BINDING,
    SKIP_ESCAPE_BINDING,
    SKIP_S_BINDING,
    compose_bindings,
)
from crossyourheart.tui.tutorial.slides import build_slides

logger = logging.getLogger(__name__)


class TutorialState(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class TutorialScreen(Screen):
    """First-run tour of the puzzle list and puzzle solving screens.

    Slides are built from the given theme and assets when the screen is
    constructed; a missing color or image raises immediately. Skip and Done
    both close the screen without a result, so the caller cannot tell them
    apart.
    """

    BINDINGS = compose_bindings(
        NEXT_RIGHT_BINDING,
        NEXT_L_BINDING,
        NEXT_SPACE_BINDING,
        BACK_LEFT_BINDING,
        BACK_H_BINDING,
        SKIP_S_BINDING,
        SKIP_ESCAPE_BINDING,
        DONE_ENTER_BINDING,
    )

    def __init__(
        self,
        theme: Theme,
        assets: AssetCatalog,
        deck: Optional[SlideDeckProtocol] = None,
    ) -> None:
        super().__init__()
        self._slides = build_slides(theme, assets)
        self._deck: SlideDeckProtocol = (
            deck if deck is not None else SlideDeck(load_image=assets.load, id="tutorial-deck")
        )
        self._deck.initialize(self._slides)
        self._deck.set_handlers(on_skip=self._on_skip, on_done=self._on_done)
        self.tutorial_state = TutorialState.ACTIVE

    @property
    def slides(self) -> tuple[Slide, ...]:
        return self._slides

    @property
    def deck(self) -> SlideDeckProtocol:
        return self._deck

    def compose(self) -> ComposeResult:
        """Build the tutorial UI."""
        yield Header()
        if isinstance(self._deck, Widget):
            yield self._deck
        yield Footer()

    def action_next(self) -> None:
        """Advance, or finish when the last slide is showing."""
        if self._deck.can_finish:
            self._deck.done()
        else:
            self._deck.advance()

    def action_back(self) -> None:
        """Go back one slide."""
        self._deck.retreat()

    def action_skip(self) -> None:
        """Leave the tutorial early."""
        self._deck.skip()

    def action_done(self) -> None:
        """Finish the tutorial; on earlier slides this advances instead."""
        self.action_next()

    def on_slide_deck_changed(self, event: SlideDeck.Changed) -> None:
        logger.debug("Tutorial at slide %d: %s", event.index + 1, self._slides[event.index].title)

    def _on_skip(self, index: int) -> None:
        self._close("skip", index)

    def _on_done(self) -> None:
        self._close("done", len(self._slides) - 1)

    def _close(self, action: str, index: int) -> None:
        if self.tutorial_state is TutorialState.CLOSED:
            return
        self.tutorial_state = TutorialState.CLOSED
        logger.info("Tutorial closed via %s on slide %d/%d", action, index + 1, len(self._slides))
        self.dismiss()
