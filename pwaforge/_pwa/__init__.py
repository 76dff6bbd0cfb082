"""Progressive Web App files generated for every build.

This package renders the web manifest, the service worker, and the
bootstrap script that registers it. Script templates live in ``templates/``.

Generated files:
- manifest.webmanifest: app metadata and icons found in the build
- service.js: precaches every file of the build under a versioned cache
- pwa.<hash>.js: registers service.js, referenced from views by hashed name
"""

from ._icons import ICON_PATTERN, Icon, IconError, find_icons
from ._manifest import MANIFEST_NAME, build_manifest
from ._registration import build_pwa_bootstrap, registration_scope
from ._service_worker import SERVICE_WORKER_NAME, build_service_worker, precache_paths

__all__ = [
    "ICON_PATTERN",
    "Icon",
    "IconError",
    "find_icons",
    "MANIFEST_NAME",
    "build_manifest",
    "build_pwa_bootstrap",
    "registration_scope",
    "SERVICE_WORKER_NAME",
    "build_service_worker",
    "precache_paths",
]
