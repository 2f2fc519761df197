"""Global fixtures: default settings, theme and bundled assets."""

import pytest

from crossyourheart.config import Settings
from crossyourheart.tui.assets import AssetCatalog
from crossyourheart.tui.theme import Theme


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only (no .env file)."""
    return Settings(_env_file=None)


@pytest.fixture
def theme() -> Theme:
    """Distinct, easy-to-recognize theme colors."""
    return Theme(primary="#111111", rich_teal="#00aaaa", rich_green="#00bb00")


@pytest.fixture
def assets() -> AssetCatalog:
    """Catalog over the bundled slide images."""
    return AssetCatalog()
