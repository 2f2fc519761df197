"""Paginated slide container used by the tutorial screen."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, Sequence

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Static

from crossyourheart.exceptions import DeckConfigurationError
from crossyourheart.models import Slide

logger = logging.getLogger(__name__)

SkipHandler = Callable[[int], None]
DoneHandler = Callable[[], None]


class SlideDeckProtocol(Protocol):
    """What the tutorial screen needs from a slide deck."""

    @property
    def index(self) -> int: ...

    @property
    def can_skip(self) -> bool: ...

    @property
    def can_finish(self) -> bool: ...

    def initialize(self, slides: Sequence[Slide]) -> None: ...

    def set_handlers(self, on_skip: SkipHandler, on_done: DoneHandler) -> None: ...

    def advance(self) -> bool: ...

    def retreat(self) -> bool: ...

    def skip(self) -> bool: ...

    def done(self) -> bool: ...


class DeckButton(Button):
    """Mouse-only control; keys always go to the screen bindings."""

    can_focus = False


class SlideDeck(Vertical):
    """Shows one slide at a time with Back/Skip/Next/Done controls.

    The cursor is clamped to the slide range and never wraps. Skip is
    offered on every slide but the last, Done only on the last. Whichever
    fires first finishes the deck; nothing fires after that.
    """

    DEFAULT_CSS = """
    SlideDeck {
        height: 1fr;
        align: center middle;
        padding: 1 4;
    }

    SlideDeck #deck-title {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        margin-bottom: 1;
    }

    SlideDeck #deck-image {
        width: 100%;
        height: auto;
        content-align: center middle;
        margin-bottom: 1;
    }

    SlideDeck #deck-description {
        width: 100%;
        text-align: center;
    }

    SlideDeck #deck-indicator {
        width: 100%;
        content-align: center middle;
        margin-top: 1;
    }

    SlideDeck #deck-actions {
        height: auto;
        align: center middle;
        margin-top: 1;
    }

    SlideDeck #deck-actions Button {
        margin: 0 1;
    }
    """

    class Changed(Message):
        """Posted when the visible slide changes."""

        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(
        self,
        load_image: Callable[[str], str],
        *,
        id: Optional[str] = None,
    ) -> None:
        super().__init__(id=id)
        self._load_image = load_image
        self._slides: tuple[Slide, ...] = ()
        self._cursor = 0
        self._finished = False
        self._on_skip: Optional[SkipHandler] = None
        self._on_done: Optional[DoneHandler] = None

    # -- contract -------------------------------------------------------

    def initialize(self, slides: Sequence[Slide]) -> None:
        """Load the slide sequence. Must be called exactly once."""
        if self._slides:
            raise DeckConfigurationError("Slide deck is already initialized")
        if not slides:
            raise DeckConfigurationError("Slide deck needs at least one slide")
        self._slides = tuple(slides)
        self._cursor = 0

    def set_handlers(self, on_skip: SkipHandler, on_done: DoneHandler) -> None:
        """Register the Skip and Done callbacks."""
        self._on_skip = on_skip
        self._on_done = on_done

    @property
    def slides(self) -> tuple[Slide, ...]:
        return self._slides

    @property
    def index(self) -> int:
        return self._cursor

    @property
    def last_index(self) -> int:
        self._require_slides()
        return len(self._slides) - 1

    @property
    def current_slide(self) -> Slide:
        self._require_slides()
        return self._slides[self._cursor]

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def can_skip(self) -> bool:
        return not self._finished and self._cursor < self.last_index

    @property
    def can_finish(self) -> bool:
        return not self._finished and self._cursor == self.last_index

    def advance(self) -> bool:
        """Move to the next slide. Returns False at the end."""
        return self._move_to(self._cursor + 1)

    def retreat(self) -> bool:
        """Move to the previous slide. Returns False at the start."""
        return self._move_to(self._cursor - 1)

    def skip(self) -> bool:
        """Fire the Skip handler if Skip is currently offered."""
        if not self.can_skip:
            return False
        self._finished = True
        logger.debug("Skip pressed on slide %d", self._cursor)
        if self._on_skip is not None:
            self._on_skip(self._cursor)
        return True

    def done(self) -> bool:
        """Fire the Done handler if the last slide is showing."""
        if not self.can_finish:
            return False
        self._finished = True
        logger.debug("Done pressed on slide %d", self._cursor)
        if self._on_done is not None:
            self._on_done()
        return True

    # -- internals ------------------------------------------------------

    def _require_slides(self) -> None:
        if not self._slides:
            raise DeckConfigurationError("Slide deck used before initialize()")

    def _move_to(self, index: int) -> bool:
        if self._finished:
            return False
        clamped = max(0, min(index, self.last_index))
        if clamped == self._cursor:
            return False
        self._cursor = clamped
        logger.debug("Showing slide %d/%d", clamped + 1, len(self._slides))
        if self.is_mounted:
            self._render_slide()
            self.post_message(self.Changed(clamped))
        return True

    def _indicator_text(self) -> str:
        dots = "".join("●" if i == self._cursor else "○" for i in range(len(self._slides)))
        return f"{self._cursor + 1} / {len(self._slides)}  {dots}"

    # -- widget ---------------------------------------------------------

    def compose(self) -> ComposeResult:
        yield Static(id="deck-title")
        yield Static(id="deck-image")
        yield Static(id="deck-description")
        yield Static(id="deck-indicator")
        with Horizontal(id="deck-actions"):
            yield DeckButton("Back", id="deck-back")
            yield DeckButton("Skip", id="deck-skip")
            yield DeckButton("Next", id="deck-next", variant="primary")
            yield DeckButton("Done", id="deck-done", variant="success")

    def on_mount(self) -> None:
        self._render_slide()

    def _render_slide(self) -> None:
        slide = self.current_slide
        self.styles.background = slide.background_color

        title = self.query_one("#deck-title", Static)
        title.update(Text(slide.title))
        title.styles.color = slide.title_color

        image = self.query_one("#deck-image", Static)
        image.update(Text(self._load_image(slide.image)))
        image.styles.color = slide.title_color

        description = self.query_one("#deck-description", Static)
        description.update(Text(slide.description))
        description.styles.color = slide.description_color

        self.query_one("#deck-indicator", Static).update(self._indicator_text())

        last = self._cursor == self.last_index
        self.query_one("#deck-back", DeckButton).disabled = self._cursor == 0
        self.query_one("#deck-skip", DeckButton).display = not last
        self.query_one("#deck-next", DeckButton).display = not last
        self.query_one("#deck-done", DeckButton).display = last

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route control buttons to deck operations."""
        event.stop()
        if event.button.id == "deck-back":
            self.retreat()
        elif event.button.id == "deck-next":
            self.advance()
        elif event.button.id == "deck-skip":
            self.skip()
        elif event.button.id == "deck-done":
            self.done()
