"""Color theme passed explicitly to the tutorial screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from crossyourheart.exceptions import ThemeResolutionError
from crossyourheart.models import normalize_hex_color

if TYPE_CHECKING:
    from crossyourheart.config import Settings

# Resource names used by slide content, mapped to Theme fields
COLOR_RESOURCES: dict[str, str] = {
    "primary": "primary",
    "richTeal": "rich_teal",
    "richGreen": "rich_green",
}


class Theme(BaseModel):
    """The three background colors used by the tutorial slides."""

    model_config = ConfigDict(frozen=True)

    primary: str
    rich_teal: str
    rich_green: str

    @field_validator("primary", "rich_teal", "rich_green")
    @classmethod
    def _hex_color(cls, value: str) -> str:
        return normalize_hex_color(value)

    @classmethod
    def from_settings(cls, settings: Settings) -> Theme:
        """Build the theme from configured colors.

        Raises:
            ThemeResolutionError: If any configured color is not `#RRGGBB`.
        """
        try:
            return cls(
                primary=settings.theme_primary,
                rich_teal=settings.theme_rich_teal,
                rich_green=settings.theme_rich_green,
            )
        except ValidationError as e:
            raise ThemeResolutionError(f"Invalid theme colors: {e}") from e

    def resolve(self, name: str) -> str:
        """Return the color for a resource name like `richTeal`."""
        field_name = COLOR_RESOURCES.get(name)
        if field_name is None:
            raise ThemeResolutionError(f"Unknown theme color: {name!r}")
        return getattr(self, field_name)
