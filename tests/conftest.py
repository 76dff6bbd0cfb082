"""Shared fixtures for pwaforge tests."""

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from pwaforge.config import PwaConfig


def png_bytes(width: int, height: int) -> bytes:
    """Encode a blank PNG of the given size."""
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), (0, 0, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def make_png() -> Callable[[int, int], bytes]:
    return png_bytes


@pytest.fixture
def pwa_config() -> PwaConfig:
    """Development-mode configuration."""
    return PwaConfig(
        name="Field Notes",
        theme_color="#336699",
        tag="v1",
        description="Notes that work offline",
    )


@pytest.fixture
def production_config() -> PwaConfig:
    """Production configuration served under /myapp/."""
    return PwaConfig(
        name="Field Notes",
        theme_color="#336699",
        tag="v1",
        description="Notes that work offline",
        mode="production",
        scope="myapp",
    )


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Create a minimal site source tree."""
    (tmp_path / "javascripts").mkdir()
    (tmp_path / "javascripts" / "app.js").write_text("console.log(1)")
    (tmp_path / "stylesheets").mkdir()
    (tmp_path / "stylesheets" / "main.css").write_text("body { margin: 0; }")
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "icon-192.png").write_bytes(png_bytes(192, 192))
    (tmp_path / "images" / "icon-512.png").write_bytes(png_bytes(512, 512))
    (tmp_path / "views").mkdir()
    (tmp_path / "views" / "index.j2").write_text(
        """<!DOCTYPE html>
<html>
<head>
<title>{{ name() }}</title>
<meta name="description" content="{{ description() }}">
<meta name="theme-color" content="{{ theme_color() }}">
<link rel="manifest" href="manifest.webmanifest">
<link rel="stylesheet" href="{{ asset_path('main.css') }}">
{% for link in icon_links() %}<link rel="{{ link.rel }}" sizes="{{ link.sizes }}" href="{{ link.href }}">
{% endfor %}{% set pwa = script_attributes('pwa.js') %}<script src="{{ pwa.src }}" integrity="{{ pwa.integrity }}"></script>
{% set app = script_attributes('app.js') %}<script src="{{ app.src }}" integrity="{{ app.integrity }}"></script>
</head>
<body></body>
</html>
"""
    )
    return tmp_path
