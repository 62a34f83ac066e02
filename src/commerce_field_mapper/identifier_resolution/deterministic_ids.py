"""Deterministic identifier derivation."""

from __future__ import annotations

import hashlib
import uuid


def compute_deterministic_id(seed: str) -> str:
    """Derive a stable GUID string from `seed`.

    The MD5 digest of the UTF-8 seed is read as a little-endian GUID, which
    matches the identifiers the content repository computes for workflow
    references.
    """
    digest = hashlib.md5(seed.encode("utf-8"), usedforsecurity=False).digest()
    return str(uuid.UUID(bytes_le=digest))


def braced(identifier: str) -> str:
    """Render an identifier in the brace-delimited form used by field values."""
    return f"{{{identifier.strip('{}')}}}"
