"""Unit tests for tutorial slide assembly."""

from __future__ import annotations

import pytest

from crossyourheart.exceptions import AssetNotFoundError, ThemeResolutionError
from crossyourheart.models import WHITE
from crossyourheart.tui.assets import AssetCatalog
from crossyourheart.tui.theme import Theme
from crossyourheart.tui.tutorial.slides import build_slides

EXPECTED_TITLES = [
    "Welcome to Cross Your Heart!",
    "Puzzle List Screen",
    "Downloading Puzzles",
    "Loading Puzzles from Disk",
    "Puzzle Solving Screen",
    "Puzzle Menu Options",
    "Navigating Within the Puzzle",
    "Keyboard",
    "Have Fun!",
]


def test_build_slides_yields_nine_slides_in_tour_order(theme: Theme, assets: AssetCatalog) -> None:
    slides = build_slides(theme, assets)

    assert [slide.title for slide in slides] == EXPECTED_TITLES


def test_all_slide_text_is_white(theme: Theme, assets: AssetCatalog) -> None:
    for slide in build_slides(theme, assets):
        assert slide.title_color == WHITE
        assert slide.description_color == WHITE


def test_slide_backgrounds_follow_screen_groups(theme: Theme, assets: AssetCatalog) -> None:
    backgrounds = [slide.background_color for slide in build_slides(theme, assets)]

    assert backgrounds[0] == theme.primary
    assert backgrounds[1:4] == [theme.rich_teal] * 3
    assert backgrounds[4:8] == [theme.rich_green] * 4
    assert backgrounds[8] == theme.primary


def test_welcome_and_farewell_share_the_logo(theme: Theme, assets: AssetCatalog) -> None:
    slides = build_slides(theme, assets)

    assert slides[0].image == slides[-1].image == "cross_your_heart_logo_large"


def test_build_slides_is_deterministic(theme: Theme, assets: AssetCatalog) -> None:
    assert build_slides(theme, assets) == build_slides(theme, assets)


def test_missing_image_propagates(theme: Theme, tmp_path) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(AssetNotFoundError):
        build_slides(theme, AssetCatalog(tmp_path))


def test_theme_failure_propagates(assets: AssetCatalog) -> None:
    class _BrokenTheme:
        def resolve(self, name: str) -> str:
            raise ThemeResolutionError(f"no color {name}")

    with pytest.raises(ThemeResolutionError):
        build_slides(_BrokenTheme(), assets)  # type: ignore[arg-type]
