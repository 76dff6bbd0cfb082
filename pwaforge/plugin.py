"""Build orchestration.

PwaPlugin runs every generation step against a single Compilation. Steps
run in a fixed order and each step's output is added to the asset map before
the next one starts: the manifest reads the copied icons, views resolve
hashed scripts, styles and icons, and the service worker precaches all of it.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from ._pwa import build_manifest, build_pwa_bootstrap, build_service_worker
from .collector import collect_directory, copy_file
from .config import PwaConfig
from .models import Asset, Compilation
from .views import render_views

logger = logging.getLogger(__name__)


class PwaPlugin:
    """Adds PWA files and fingerprinted static assets to a compilation.

    Source layout (relative to ``source_dir``):
    - javascripts/*.js
    - stylesheets/*.css
    - images/*.png (optional)
    - views/*.j2
    - favicon.ico (optional)
    """

    def __init__(self, config: PwaConfig, source_dir: Path | str = ".") -> None:
        self.config = config
        self.source_dir = Path(source_dir)

    def copy_scripts(self, compilation: Compilation) -> list[Asset]:
        return collect_directory(compilation, self.source_dir / "javascripts", [".js"], "javascripts")

    def copy_styles(self, compilation: Compilation) -> list[Asset]:
        return collect_directory(compilation, self.source_dir / "stylesheets", [".css"], "stylesheets")

    def copy_images(self, compilation: Compilation) -> list[Asset]:
        return collect_directory(compilation, self.source_dir / "images", [".png"], "images", optional=True)

    def copy_favicon(self, compilation: Compilation) -> Asset | None:
        return copy_file(compilation, self.source_dir / "favicon.ico", "favicon.ico")

    def apply(self, compilation: Compilation, callback: Callable[[], None] | None = None) -> Compilation:
        """Run every step, then signal completion through ``callback``.

        If a step raises, the exception propagates and ``callback`` is not
        called. Assets added by earlier steps stay in the compilation.
        """
        logger.info(
            "Building PWA assets for %s (mode=%s, tag=%s)",
            self.config.name,
            self.config.mode,
            self.config.tag,
        )

        def add_all(assets: list[Asset]) -> None:
            for asset in assets:
                compilation.add_asset(asset)

        # 1. Static assets, so later steps can resolve their hashed names
        add_all(self.copy_scripts(compilation))
        add_all(self.copy_styles(compilation))
        add_all(self.copy_images(compilation))

        # 2. Generated PWA files
        compilation.add_asset(build_pwa_bootstrap(self.config))
        compilation.add_asset(build_manifest(self.config, compilation.assets))

        # 3. Views reference everything above
        add_all(render_views(self.config, compilation, self.source_dir / "views"))

        # 4. Service worker precaches everything above
        compilation.add_asset(build_service_worker(self.config, compilation.assets))

        favicon = self.copy_favicon(compilation)
        if favicon is not None:
            compilation.add_asset(favicon)

        logger.info("PWA build complete: %d assets", len(compilation.assets))

        if callback is not None:
            callback()
        return compilation
