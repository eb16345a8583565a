"""Content identifier helpers.

The engine treats content identifiers as opaque strings. Callers that
hold the raw content can derive the conventional fingerprint here.
"""

from __future__ import annotations

import blake3

CONTENT_ID_HEX_LENGTH = 64


def compute_content_id(content: bytes) -> str:
    """Compute the BLAKE3 fingerprint used as a content identifier.

    Args:
        content: Raw content bytes.

    Returns:
        64-character lowercase hex digest.
    """
    return blake3.blake3(content).hexdigest()


def is_fingerprint(content_id: str) -> bool:
    """Check whether an identifier has the shape of a BLAKE3 fingerprint."""
    if len(content_id) != CONTENT_ID_HEX_LENGTH:
        return False
    try:
        bytes.fromhex(content_id)
    except ValueError:
        return False
    return content_id == content_id.lower()
