"""Placeholder image references derived from an entry title."""

import re
from typing import Tuple

DEFAULT_BASE_URL = "https://picsum.photos/seed"


def slugify_title(title: str) -> str:
    """Lowercase the title and drop all whitespace."""
    return re.sub(r"\s+", "", title.lower())


class PlaceholderImageService:
    """Builds deterministic cover and gallery URLs for entries without images.

    The same title always yields the same references, so a placeholder
    survives re-saving an entry unchanged.
    """

    COVER_SIZE = (400, 600)
    GALLERY_SIZE = (300, 200)
    GALLERY_SUFFIXES = ("1", "2")

    def __init__(self, base_url: str = DEFAULT_BASE_URL) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("Placeholder base URL must not be empty")
        self._base_url = base_url.strip().rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def cover_for(self, title: str) -> str:
        width, height = self.COVER_SIZE
        return f"{self._base_url}/{slugify_title(title)}/{width}/{height}"

    def gallery_for(self, title: str) -> Tuple[str, ...]:
        width, height = self.GALLERY_SIZE
        slug = slugify_title(title)
        return tuple(
            f"{self._base_url}/{slug}{suffix}/{width}/{height}"
            for suffix in self.GALLERY_SUFFIXES
        )
