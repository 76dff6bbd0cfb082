"""pwaforge - Build-time asset generator for Progressive Web Apps."""

import argparse
import logging
import sys
from pathlib import Path

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def _cmd_build(args: argparse.Namespace) -> None:
    """Execute the build command - generate PWA assets and write them out."""
    _setup_logging(args.verbose)

    logger.info("pwaforge %s starting...", __version__)

    # Import here so logging is configured first
    from ._pwa import IconError
    from ._render import TemplateError
    from .collector import CollectorError
    from .config import ConfigError, load_config
    from .models import Compilation
    from .plugin import PwaPlugin
    from .views import AssetLookupError

    # 1. Load configuration
    try:
        config = load_config(args.config)
        logger.info("Configuration loaded from %s", args.config)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    output_dir = Path(args.output or config.build.output_dir)

    # 2. Run the build
    compilation = Compilation()
    plugin = PwaPlugin(config.pwa, source_dir=config.build.source_dir)
    try:
        plugin.apply(compilation)
    except AssetLookupError as e:
        logger.error("Asset error: %s", e)
        sys.exit(1)
    except TemplateError as e:
        logger.error("Template error: %s", e)
        sys.exit(1)
    except (CollectorError, IconError) as e:
        logger.error("Input error: %s", e)
        sys.exit(1)

    # 3. Write or list the output
    if args.dry_run:
        for name, source in compilation.assets.items():
            print(f"{source.size():>10}  {name}")
        return

    try:
        compilation.emit(output_dir)
    except OSError as e:
        logger.error("Failed to write output: %s", e)
        sys.exit(1)


def main() -> None:
    """Main entry point for the pwaforge package."""
    parser = argparse.ArgumentParser(
        description="pwaforge - Generate service worker, manifest and fingerprinted assets for a PWA"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pwaforge {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser(
        "build",
        help="Build PWA assets (default)",
    )
    build_parser.add_argument(
        "-c", "--config",
        default="pwa.yaml",
        help="Path to configuration file (default: pwa.yaml)",
    )
    build_parser.add_argument(
        "-o", "--output",
        help="Output directory (overrides build.output_dir)",
    )
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the generated assets without writing them",
    )
    build_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging",
    )
    build_parser.set_defaults(func=_cmd_build)

    args = parser.parse_args()

    # Default to 'build' if no command specified
    if args.command is None:
        args.config = "pwa.yaml"
        args.output = None
        args.dry_run = False
        args.verbose = False
        args.func = _cmd_build

    args.func(args)
