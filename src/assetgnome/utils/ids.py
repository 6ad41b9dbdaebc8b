"""Unique identifier generation."""

import uuid


def new_id() -> str:
    """Return a random 32-character lowercase hex identifier."""
    return uuid.uuid4().hex
