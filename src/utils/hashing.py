"""One-way credential hashing.

Passwords are never stored; the user store keeps only the hex digest
produced here.  The digest algorithm is resolved once, when the hasher is
built, so a runtime without the configured algorithm fails at startup
instead of silently producing unusable digests.
"""

from __future__ import annotations

import hashlib

from src.utils.errors import ConfigurationError

DEFAULT_ALGORITHM = "sha256"


class CredentialHasher:
    """Deterministic, fixed-length, hex-encoded digest of a plaintext credential.

    Parameters
    ----------
    algorithm:
        Any name accepted by :func:`hashlib.new`.  Defaults to SHA-256,
        which yields 64 hex characters.

    Raises
    ------
    ConfigurationError
        If *algorithm* is not available in this Python runtime, or is a
        variable-length digest (``shake_*``) that cannot yield a fixed-size
        hex string without an explicit length.
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        try:
            probe = hashlib.new(algorithm)
        except (ValueError, TypeError) as exc:
            raise ConfigurationError(
                message=f"Digest algorithm {algorithm!r} is not available",
                component="hasher",
            ) from exc

        if probe.digest_size == 0:
            raise ConfigurationError(
                message=f"Digest algorithm {algorithm!r} has no fixed output length",
                component="hasher",
            )

        self._algorithm = probe.name

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def digest_length(self) -> int:
        """Length of every digest string this hasher returns (hex chars)."""
        return hashlib.new(self._algorithm).digest_size * 2

    def hash(self, plaintext: str) -> str:
        """Return the hex digest of *plaintext* encoded as UTF-8."""
        return hashlib.new(self._algorithm, plaintext.encode("utf-8")).hexdigest()

    def matches(self, plaintext: str, digest: str) -> bool:
        """Return True if *plaintext* hashes to *digest*."""
        return self.hash(plaintext) == digest
