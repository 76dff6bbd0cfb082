"""Content hashing for fingerprinted file names and subresource integrity."""

import base64
import hashlib
from pathlib import PurePosixPath

# Length of the hex digest embedded in fingerprinted file names.
HASH_LENGTH = 20


def _to_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return data


def content_hash(data: bytes | str) -> str:
    """Return the short content hash used as a file name infix.

    The hash is a pure function of the bytes: identical content always
    yields the same hash, so unchanged files keep their names across builds.
    Text is UTF-8 encoded before hashing.
    """
    return hashlib.md5(_to_bytes(data), usedforsecurity=False).hexdigest()[:HASH_LENGTH]


def hashed_name(file_name: str, data: bytes | str) -> str:
    """Insert the content hash before the extension: ``app.js`` -> ``app.<hash>.js``."""
    path = PurePosixPath(file_name)
    return f"{path.stem}.{content_hash(data)}{path.suffix}"


def integrity(data: bytes | str) -> str:
    """Compute a subresource integrity value (``sha256-<base64>``)."""
    digest = hashlib.sha256(_to_bytes(data)).digest()
    return f"sha256-{base64.b64encode(digest).decode('ascii')}"
