"""App icon discovery.

Icons are recognised by name: any output path containing ``icon-<anything>.png``
(case-insensitive). Pixel dimensions are read from the PNG itself so the
manifest and the ``<link>`` tags always describe the file actually served.
"""

import io
import re
from collections.abc import Mapping
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from ..models import RawSource

ICON_PATTERN = re.compile(r"icon-.*?\.png", re.IGNORECASE)


class IconError(Exception):
    """Raised when an icon asset cannot be decoded as an image."""

    pass


@dataclass(frozen=True)
class Icon:
    """An icon found in the asset map."""

    path: str
    width: int
    height: int

    @property
    def sizes(self) -> str:
        return f"{self.width}x{self.height}"


def _image_size(path: str, data: bytes) -> tuple[int, int]:
    try:
        with Image.open(io.BytesIO(data)) as image:
            return image.size
    except (UnidentifiedImageError, OSError) as e:
        raise IconError(f"Could not decode icon {path}: {e}") from e


def find_icons(assets: Mapping[str, RawSource]) -> list[Icon]:
    """Return every icon in the asset map, in map order."""
    icons = []
    for path, source in assets.items():
        if ICON_PATTERN.search(path):
            width, height = _image_size(path, source.source())
            icons.append(Icon(path=path, width=width, height=height))
    return icons
