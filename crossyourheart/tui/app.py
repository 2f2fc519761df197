"""Host app that launches the tutorial and exits when it closes."""

from typing import Any, Optional

from textual.app import App

from crossyourheart.config import Settings, get_settings
from crossyourheart.tui.assets import AssetCatalog
from crossyourheart.tui.theme import Theme
from crossyourheart.tui.tutorial.keybindings import QUIT_Q_BINDING, compose_bindings
from crossyourheart.tui.tutorial.screen import TutorialScreen


class TutorialApp(App):
    """Cross Your Heart tutorial.

    Stands in for the puzzle list screen: it pushes the tutorial on mount
    and exits as soon as the tutorial is dismissed.
    """

    TITLE = "Cross Your Heart"
    SUB_TITLE = "Tutorial"

    BINDINGS = compose_bindings(QUIT_Q_BINDING)

    def __init__(self, settings: Optional[Settings] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._settings = settings if settings is not None else get_settings()

    def on_mount(self) -> None:
        """Push the tutorial screen on mount."""
        screen = TutorialScreen(
            Theme.from_settings(self._settings),
            AssetCatalog(self._settings.assets_dir),
        )
        self.push_screen(screen, callback=self._on_tutorial_closed)

    def _on_tutorial_closed(self, result: object = None) -> None:
        self.exit()

    def action_quit(self) -> None:
        """Exit without finishing the tutorial."""
        self.exit()
