from __future__ import annotations

from uuid import uuid4


def new_id(prefix: str) -> str:
    """Fresh opaque id such as ``mt3f9a0c1b22de``."""
    return f"{prefix}{uuid4().hex[:12]}"
