"""End-to-end tests driving the tutorial through Textual's test pilot."""

from __future__ import annotations

import pytest

from crossyourheart.config import Settings
from crossyourheart.tui.app import TutorialApp
from crossyourheart.tui.tutorial.screen import TutorialScreen, TutorialState


@pytest.mark.asyncio
async def test_advancing_eight_times_then_done_closes_tutorial(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)

        for _ in range(8):
            await pilot.press("right")
        assert screen.deck.index == 8

        await pilot.click("#deck-done")
        await pilot.pause()

    assert screen.tutorial_state is TutorialState.CLOSED
    assert app.return_value is None


@pytest.mark.asyncio
async def test_skip_key_closes_tutorial_from_first_slide(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)

        await pilot.press("s")
        await pilot.pause()

    assert screen.tutorial_state is TutorialState.CLOSED


@pytest.mark.asyncio
async def test_slide_background_follows_theme(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)
        deck = screen.query_one("#tutorial-deck")

        assert deck.styles.background.hex.upper() == "#3F51B5"
        await pilot.press("right")
        assert deck.styles.background.hex.upper() == "#00707A"


@pytest.mark.asyncio
async def test_enter_on_first_slide_advances_instead_of_closing(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)
        assert app.focused is None

        await pilot.press("enter")

        assert screen.deck.index == 1
        assert screen.tutorial_state is TutorialState.ACTIVE


@pytest.mark.asyncio
async def test_enter_on_last_slide_finishes_tutorial(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)

        for _ in range(8):
            await pilot.press("enter")
        assert screen.deck.index == 8
        assert screen.tutorial_state is TutorialState.ACTIVE

        await pilot.press("enter")
        await pilot.pause()

    assert screen.tutorial_state is TutorialState.CLOSED


@pytest.mark.asyncio
async def test_escape_skips_tutorial(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)
        await pilot.press("right", "right")

        await pilot.press("escape")
        await pilot.pause()

    assert screen.tutorial_state is TutorialState.CLOSED
    assert screen.deck.index == 2


@pytest.mark.asyncio
async def test_left_and_h_go_back(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)
        await pilot.press("l", "l", "l")
        assert screen.deck.index == 3

        await pilot.press("left")
        assert screen.deck.index == 2
        await pilot.press("h", "h", "h")
        assert screen.deck.index == 0
        assert screen.tutorial_state is TutorialState.ACTIVE


@pytest.mark.asyncio
async def test_clicking_a_control_does_not_steal_keyboard_focus(settings: Settings) -> None:
    app = TutorialApp(settings=settings)
    async with app.run_test(size=(100, 40)) as pilot:
        screen = app.screen
        assert isinstance(screen, TutorialScreen)

        await pilot.click("#deck-next")
        assert screen.deck.index == 1
        assert app.focused is None

        await pilot.press("enter")
        assert screen.deck.index == 2
