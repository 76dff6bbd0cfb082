"""Web App Manifest for PWA installation.

Defines app metadata for installation on home screens. The icon list is
derived from the icons already copied into the build.
"""

import json
import logging
from collections.abc import Mapping

from ..config import PwaConfig
from ..models import Asset, RawSource
from ._icons import find_icons

logger = logging.getLogger(__name__)

# Fixed, unhashed name so pages can link to it at a stable URL.
MANIFEST_NAME = "manifest.webmanifest"


def manifest_data(config: PwaConfig, assets: Mapping[str, RawSource]) -> dict:
    """Build the manifest document as a dictionary."""
    icons = [
        {"src": icon.path, "type": "image/png", "sizes": icon.sizes}
        for icon in find_icons(assets)
    ]
    return {
        "name": config.name,
        "short_name": config.short_name or config.name,
        "start_url": ".",
        "display": "standalone",
        "background_color": config.background_color or config.theme_color,
        "theme_color": config.theme_color,
        "description": config.description,
        "icons": icons,
    }


def build_manifest(config: PwaConfig, assets: Mapping[str, RawSource]) -> Asset:
    """Render ``manifest.webmanifest`` from configuration and the icons in ``assets``."""
    data = manifest_data(config, assets)
    logger.info("Manifest lists %d icon(s)", len(data["icons"]))
    return Asset(MANIFEST_NAME, json.dumps(data, indent=4, ensure_ascii=False))
