"""Tests for the hashing module."""

import base64
import hashlib

from pwaforge.hashing import HASH_LENGTH, content_hash, hashed_name, integrity


class TestContentHash:
    """Tests for content_hash()."""

    def test_length_and_alphabet(self) -> None:
        """Hash is 20 lowercase hex characters."""
        digest = content_hash(b"console.log(1)")
        assert len(digest) == HASH_LENGTH == 20
        assert all(c in "0123456789abcdef" for c in digest)

    def test_same_content_same_hash(self) -> None:
        """Identical bytes always hash the same."""
        assert content_hash(b"body { margin: 0; }") == content_hash(b"body { margin: 0; }")

    def test_text_is_hashed_as_utf8(self) -> None:
        """A string hashes like its UTF-8 encoding."""
        assert content_hash("héllo") == content_hash("héllo".encode("utf-8"))

    def test_different_content_different_hash(self) -> None:
        """A corpus of distinct inputs yields distinct hashes."""
        corpus = [b"", b"a", b"b", b"ab", b"ba", b"console.log(1)", b"console.log(2)", bytes(range(256))]
        hashes = {content_hash(data) for data in corpus}
        assert len(hashes) == len(corpus)


class TestHashedName:
    """Tests for hashed_name()."""

    def test_inserts_hash_before_extension(self) -> None:
        """Hash goes between stem and extension."""
        digest = content_hash(b"x")
        assert hashed_name("app.js", b"x") == f"app.{digest}.js"

    def test_keeps_inner_dots_in_stem(self) -> None:
        """Only the last extension is split off."""
        digest = content_hash(b"x")
        assert hashed_name("vendor.min.js", b"x") == f"vendor.min.{digest}.js"


class TestIntegrity:
    """Tests for integrity()."""

    def test_sha256_base64(self) -> None:
        """Value is the base64 SHA-256 digest with the sha256- prefix."""
        expected = base64.b64encode(hashlib.sha256(b"console.log(1)").digest()).decode()
        assert integrity(b"console.log(1)") == f"sha256-{expected}"

    def test_changes_with_content(self) -> None:
        """Different content gives a different integrity value."""
        assert integrity(b"a") != integrity(b"b")
