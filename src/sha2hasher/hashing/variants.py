"""SHA-2 variant selection."""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any


class HashVariant(str, Enum):
    """The SHA-2 algorithms a file can be hashed with."""

    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        return self.digest_size * 2

    @property
    def label(self) -> str:
        """Display name such as ``SHA-256``."""
        return f"SHA-{self.value[3:]}"

    def new(self) -> hashlib._Hash:
        """Return a fresh streaming hash state for this variant."""
        return _CONSTRUCTORS[self]()

    @classmethod
    def parse(cls, value: Any) -> HashVariant:
        """Coerce ``value`` into a variant.

        Accepts a member, its value, common spellings (``"SHA-256"``,
        ``"SHA256"``, ``"sha_256"``) and the bare bit length (``256``).
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            key = f"sha{value}"
        elif isinstance(value, str):
            key = value.strip().lower().replace("-", "").replace("_", "")
            if key.isdigit():
                key = f"sha{key}"
        else:
            raise ValueError(f"Unsupported hash algorithm {value!r}")

        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unsupported hash algorithm {value!r}; expected one of: {choices}") from None

    @classmethod
    def from_hex_length(cls, length: int) -> HashVariant:
        """Infer the variant producing hex digests of ``length`` characters."""
        for member in cls:
            if member.hex_length == length:
                return member
        raise ValueError(f"No SHA-2 variant produces a {length}-character hex digest")


_DIGEST_SIZES = {
    HashVariant.SHA224: 28,
    HashVariant.SHA256: 32,
    HashVariant.SHA384: 48,
    HashVariant.SHA512: 64,
}

_CONSTRUCTORS = {
    HashVariant.SHA224: hashlib.sha224,
    HashVariant.SHA256: hashlib.sha256,
    HashVariant.SHA384: hashlib.sha384,
    HashVariant.SHA512: hashlib.sha512,
}


__all__ = ["HashVariant"]
