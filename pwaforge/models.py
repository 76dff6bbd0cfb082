"""Data models for generated assets and the compilation they are added to."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Asset:
    """A generated output file.

    Attributes:
        name: Output-relative path using forward slashes (e.g. "javascripts/app.<hash>.js").
        source: File content. Text is written as UTF-8.
    """

    name: str
    source: bytes | str

    @property
    def content(self) -> bytes:
        """Content as bytes, encoding text as UTF-8."""
        if isinstance(self.source, str):
            return self.source.encode("utf-8")
        return self.source

    @property
    def size(self) -> int:
        """Size of the emitted file in bytes."""
        return len(self.content)


class RawSource:
    """Lazy accessor stored in the asset map.

    Mirrors the host protocol: consumers call ``source()`` and ``size()``
    rather than reading attributes.
    """

    def __init__(self, asset: Asset) -> None:
        self._asset = asset

    def source(self) -> bytes:
        return self._asset.content

    def size(self) -> int:
        return self._asset.size


@dataclass
class Compilation:
    """Mutable state shared by every build step.

    Attributes:
        assets: Output path -> accessor. Entries are only ever inserted; later
            steps resolve references against what earlier steps added.
        file_dependencies: Absolute paths of every source file read, so a
            watcher can trigger a rebuild when one changes.
    """

    assets: dict[str, RawSource] = field(default_factory=dict)
    file_dependencies: set[str] = field(default_factory=set)

    def add_asset(self, asset: Asset) -> None:
        """Insert an asset into the map."""
        if asset.name in self.assets:
            logger.warning("Asset %s emitted twice, keeping the latest", asset.name)
        self.assets[asset.name] = RawSource(asset)
        logger.debug("Added asset %s (%d bytes)", asset.name, asset.size)

    def add_dependency(self, path: Path) -> None:
        self.file_dependencies.add(str(path.resolve()))

    def emit(self, output_dir: Path) -> list[Path]:
        """Write every asset under ``output_dir``.

        Returns:
            The written file paths, in asset map order.
        """
        written: list[Path] = []
        for name, source in self.assets.items():
            target = output_dir / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(source.source())
            written.append(target)
        logger.info("Wrote %d assets to %s", len(written), output_dir)
        return written
