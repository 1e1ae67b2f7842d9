"""Content-address hashing for entry identity."""

import hashlib

from rssnorm.core.exceptions import ConfigurationError


def content_hash(value: str, algorithm: str = "sha256") -> str:
    """Return the hex digest of value.

    Raises:
        ConfigurationError: If hashlib does not provide the algorithm.
    """
    try:
        digest = hashlib.new(algorithm)
    except ValueError as e:
        raise ConfigurationError(
            f"Unsupported hash algorithm: {algorithm}", config_key="hash_algorithm"
        ) from e
    digest.update(value.encode("utf-8"))
    return digest.hexdigest()
