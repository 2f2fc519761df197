"""Immutable slide record shown by the tutorial deck."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

WHITE = "#FFFFFF"

_HEX_COLOR_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


def normalize_hex_color(value: str) -> str:
    """Return `value` as upper-case `#RRGGBB`, or raise ValueError."""
    match = _HEX_COLOR_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Not an RGB hex color: {value!r}")
    return f"#{match.group(1).upper()}"


class Slide(BaseModel):
    """One full-screen onboarding panel.

    Slides are built once when the tutorial screen is constructed and never
    mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1, description="Headline shown at the top")
    description: str = Field(min_length=1, description="Body text under the image")
    image: str = Field(min_length=1, description="Bundled asset name")
    title_color: str = WHITE
    description_color: str = WHITE
    background_color: str

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("title_color", "description_color", "background_color")
    @classmethod
    def _hex_color(cls, value: str) -> str:
        return normalize_hex_color(value)
