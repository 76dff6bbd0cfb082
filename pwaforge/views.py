"""HTML view rendering with fingerprinted asset lookups.

Views are Jinja2 templates in the views directory. Templates never hard-code
hashed file names; they ask for the logical name and the helpers exposed by
ViewContext resolve it against the files already in the build:

    {% set pwa = script_attributes("pwa.js") %}
    <script src="{{ pwa.src }}" integrity="{{ pwa.integrity }}"></script>
    <link rel="stylesheet" href="{{ asset_path('main.css') }}">
    {% for link in icon_links() %}
    <link rel="{{ link.rel }}" sizes="{{ link.sizes }}" href="{{ link.href }}">
    {% endfor %}

Files whose name starts with an underscore are layouts and partials: they can
be extended or included but are not rendered to a page of their own.
"""

import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path, PurePosixPath
from typing import Any

from ._pwa import find_icons
from ._render import render_view
from .collector import CollectorError
from .config import PwaConfig
from .hashing import HASH_LENGTH, integrity
from .models import Asset, Compilation

logger = logging.getLogger(__name__)

VIEW_EXTENSION = ".j2"
OUTPUT_EXTENSION = ".html"

# <basename>.<hash><ext> where the hash is exactly HASH_LENGTH hex chars
_HASHED_NAME = re.compile(rf"^(?P<base>.+)\.[0-9a-f]{{{HASH_LENGTH}}}(?P<ext>\.[^.]+)?$")


class AssetLookupError(Exception):
    """Base class for failures to resolve a logical asset name."""

    pass


class MissingAssetError(AssetLookupError):
    """Raised when no fingerprinted asset matches a logical name."""

    pass


class AmbiguousAssetError(AssetLookupError):
    """Raised when more than one fingerprinted asset matches a logical name."""

    pass


class AssetIndex:
    """Maps logical names to fingerprinted output paths.

    Built in one pass over the asset map; lookups are a dictionary access
    instead of a pattern scan per reference.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], list[str]] = {}

    @classmethod
    def build(cls, paths: Iterable[str]) -> "AssetIndex":
        index = cls()
        for path in paths:
            match = _HASHED_NAME.match(PurePosixPath(path).name)
            if match:
                key = (match.group("base"), match.group("ext") or "")
                index._entries.setdefault(key, []).append(path)
        return index

    def candidates(self, logical_path: str) -> list[str]:
        """Every output path matching ``logical_path``, in asset map order.

        A directory in ``logical_path`` ("javascripts/app.js") restricts the
        candidates to that output folder; a bare name matches in any folder.
        """
        logical = PurePosixPath(logical_path)
        found = self._entries.get((logical.stem, logical.suffix), [])
        if str(logical.parent) != ".":
            found = [path for path in found if PurePosixPath(path).parent == logical.parent]
        return list(found)

    def resolve(self, logical_path: str) -> str:
        """Return the unique output path for ``logical_path``.

        Raises:
            MissingAssetError: If nothing matches.
            AmbiguousAssetError: If several differently hashed files match.
        """
        found = self.candidates(logical_path)
        if not found:
            raise MissingAssetError(f"Could not find asset {logical_path}")
        if len(found) > 1:
            raise AmbiguousAssetError(f"Asset {logical_path} is ambiguous: {', '.join(found)}")
        return found[0]


class ViewContext:
    """Helpers available to view templates.

    Every helper is a method, configuration accessors included, and templates
    only see the names returned by ``template_context()``.
    """

    def __init__(self, config: PwaConfig, compilation: Compilation) -> None:
        self._config = config
        self._compilation = compilation
        self._index = AssetIndex.build(compilation.assets)

    def asset_path(self, logical_path: str) -> str:
        """Resolve a logical name such as "app.js" to its fingerprinted path."""
        return self._index.resolve(logical_path)

    def script_attributes(self, logical_path: str) -> dict[str, str]:
        """Return ``src`` and ``integrity`` attributes for a script tag.

        The integrity value is computed from the bytes that will be emitted.
        """
        path = self.asset_path(logical_path)
        return {
            "src": path,
            "integrity": integrity(self._compilation.assets[path].source()),
        }

    def icon_links(self) -> list[dict[str, str]]:
        """Return one apple-touch-icon link per icon in the build."""
        return [
            {"rel": "apple-touch-icon", "sizes": icon.sizes, "href": icon.path}
            for icon in find_icons(self._compilation.assets)
        ]

    def theme_color(self) -> str:
        return self._config.theme_color

    def description(self) -> str:
        return self._config.description

    def name(self) -> str:
        return self._config.name

    def template_context(self) -> dict[str, Callable[..., Any]]:
        return {
            "asset_path": self.asset_path,
            "script_attributes": self.script_attributes,
            "icon_links": self.icon_links,
            "theme_color": self.theme_color,
            "description": self.description,
            "name": self.name,
        }


def _output_name(template_path: Path) -> str:
    stem = template_path.stem
    if stem.endswith(OUTPUT_EXTENSION):
        return stem
    return f"{stem}{OUTPUT_EXTENSION}"


def render_views(config: PwaConfig, compilation: Compilation, views_dir: Path) -> list[Asset]:
    """Render every view template in ``views_dir`` to HTML.

    Must run after the assets the views reference have been added to
    ``compilation``. Each template (partials included) is registered as a
    build dependency.

    Raises:
        CollectorError: If ``views_dir`` does not exist.
        MissingAssetError: If a view references an asset not in the build.
        AmbiguousAssetError: If a referenced name matches several assets.
        TemplateError: If a template is malformed or uses an undefined name.
    """
    if not views_dir.is_dir():
        raise CollectorError(f"Views directory not found: {views_dir}")

    context = ViewContext(config, compilation).template_context()

    views: list[Asset] = []
    for path in sorted(views_dir.iterdir()):
        if not path.is_file() or path.suffix != VIEW_EXTENSION:
            continue
        compilation.add_dependency(path)
        if path.name.startswith("_"):
            logger.debug("Skipping partial %s", path.name)
            continue

        html = render_view(path, context)
        views.append(Asset(_output_name(path), html))

    logger.info("Rendered %d view(s) from %s", len(views), views_dir)
    return views
