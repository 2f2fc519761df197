"""Lookup of bundled slide images.

Images are plain-text renderings stored as `<name>.txt`, either in the
`crossyourheart.assets` package or in a configured override directory.
"""

from __future__ import annotations

import logging
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Optional

from crossyourheart.exceptions import AssetNotFoundError

logger = logging.getLogger(__name__)

ASSET_SUFFIX = ".txt"


class AssetCatalog:
    """Resolves image names to bundled assets."""

    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = root

    @property
    def location(self) -> str:
        if self._root is not None:
            return str(self._root)
        return "crossyourheart.assets"

    def resolve(self, name: str) -> Traversable:
        """Return a readable handle for `name`.

        Raises:
            AssetNotFoundError: If no asset with that name exists.
        """
        base = self._root if self._root is not None else files("crossyourheart.assets")
        candidate = base / f"{name}{ASSET_SUFFIX}"
        if not candidate.is_file():
            raise AssetNotFoundError(name, self.location)
        return candidate

    def load(self, name: str) -> str:
        """Return the text of an asset."""
        text = self.resolve(name).read_text(encoding="utf-8")
        logger.debug("Loaded asset %s (%d chars)", name, len(text))
        return text
