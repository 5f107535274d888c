"""
Shared utility functions for the bloglist service.
"""

from __future__ import annotations

import re
import secrets
from datetime import datetime, timezone


_ID_RE = re.compile(r"^[0-9a-f]{24}$")


def generate_id() -> str:
    """
    Generate a unique document ID.

    Returns:
        A 24 character lowercase hex string like "65a1f0c2e4b0a1b2c3d4e5f6"
    """
    return secrets.token_hex(12)


def is_valid_id(value: str) -> bool:
    """Check that a string has the shape of an ID produced by generate_id()."""
    return bool(_ID_RE.match(value or ""))


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)
