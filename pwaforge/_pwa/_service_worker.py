"""Service Worker generation.

The service worker precaches every file in the build plus the site root,
and drops caches left behind by older tags on activation.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from .._render import render_script
from ..config import PwaConfig
from ..models import Asset, RawSource

logger = logging.getLogger(__name__)

_TEMPLATE_PATH = Path(__file__).parent / "templates" / "service.js"

# Registered by the bootstrap script at a well-known URL, so never hashed.
SERVICE_WORKER_NAME = "service.js"


def precache_paths(config: PwaConfig, assets: Mapping[str, RawSource]) -> list[str]:
    """List the URLs the service worker fetches on install.

    In production every path is prefixed with ``/<scope>/``; otherwise the
    asset map keys are used as-is. The site root comes last.
    """
    if config.is_production:
        paths = [f"/{config.scope}/{name}" for name in assets]
        paths.append(f"/{config.scope}/")
    else:
        paths = list(assets)
        paths.append("/")
    return paths


def build_service_worker(config: PwaConfig, assets: Mapping[str, RawSource]) -> Asset:
    """Render ``service.js`` with the precache list for the current asset map."""
    files = precache_paths(config, assets)
    js = render_script(
        _TEMPLATE_PATH,
        {
            "tag": json.dumps(config.tag),
            "app": json.dumps(config.scope),
            "files": json.dumps(files, indent=4),
        },
    )
    logger.info("Service worker precaches %d path(s) under tag %s", len(files), config.tag)
    return Asset(SERVICE_WORKER_NAME, js)
