"""Service Worker registration script.

The bootstrap script registers ``service.js`` and is referenced from views
through its hashed name, so its file name carries a content hash.
"""

import json
from pathlib import Path

from .._render import render_script
from ..config import PwaConfig
from ..hashing import hashed_name
from ..models import Asset

_TEMPLATE_PATH = Path(__file__).parent / "templates" / "pwa.js"


def registration_scope(config: PwaConfig) -> str:
    """Path prefix of ``service.js``: ``"<scope>/"`` in production, empty otherwise."""
    if config.is_production:
        return f"{config.scope}/"
    return ""


def build_pwa_bootstrap(config: PwaConfig) -> Asset:
    """Render the registration script as ``pwa.<hash>.js``."""
    js = render_script(_TEMPLATE_PATH, {"scope": json.dumps(registration_scope(config))})
    return Asset(hashed_name("pwa.js", js), js)
