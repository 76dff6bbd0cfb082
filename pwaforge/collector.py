"""Copy source directories into the compilation with fingerprinted names."""

import logging
from collections.abc import Iterable
from pathlib import Path

from .hashing import hashed_name
from .models import Asset, Compilation

logger = logging.getLogger(__name__)


class CollectorError(Exception):
    """Raised when a required source directory or file cannot be read."""

    pass


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise CollectorError(f"Failed to read {path}: {e}") from e


def collect_directory(
    compilation: Compilation,
    source_dir: Path,
    extensions: Iterable[str],
    output_subfolder: str,
    *,
    optional: bool = False,
) -> list[Asset]:
    """Hash and copy the files of a directory.

    Only the top level of ``source_dir`` is read. Files whose extension is not
    in ``extensions`` are passed over: plain copying is the only transform,
    so sources in other dialects (e.g. ``.scss``) are left to other tools.

    Args:
        compilation: Receives a build dependency for every file read.
        source_dir: Directory to read.
        extensions: Accepted suffixes including the dot, compared case-insensitively.
        output_subfolder: Output folder for the copies (e.g. "javascripts").
        optional: Return an empty list if ``source_dir`` does not exist.

    Returns:
        One Asset per matching file, named ``<subfolder>/<stem>.<hash><ext>``.

    Raises:
        CollectorError: If a required directory is missing or a file is unreadable.
    """
    accepted = {ext.lower() for ext in extensions}

    if not source_dir.is_dir():
        if optional:
            logger.debug("Optional directory %s not found, skipping", source_dir)
            return []
        raise CollectorError(f"Source directory not found: {source_dir}")

    try:
        entries = sorted(source_dir.iterdir())
    except OSError as e:
        raise CollectorError(f"Failed to list {source_dir}: {e}") from e

    assets: list[Asset] = []
    for path in entries:
        if not path.is_file():
            continue
        if path.suffix.lower() not in accepted:
            logger.debug("Skipping %s (extension not in %s)", path.name, sorted(accepted))
            continue

        data = _read_bytes(path)
        compilation.add_dependency(path)
        assets.append(Asset(f"{output_subfolder}/{hashed_name(path.name, data)}", data))

    logger.info("Collected %d file(s) from %s", len(assets), source_dir)
    return assets


def copy_file(
    compilation: Compilation,
    path: Path,
    output_name: str,
    *,
    optional: bool = True,
) -> Asset | None:
    """Copy a single file without renaming it.

    Returns:
        The Asset, or None if ``path`` is optional and absent.

    Raises:
        CollectorError: If a required file is missing or unreadable.
    """
    if not path.is_file():
        if optional:
            logger.debug("Optional file %s not found, skipping", path)
            return None
        raise CollectorError(f"Source file not found: {path}")

    data = _read_bytes(path)
    compilation.add_dependency(path)
    return Asset(output_name, data)
