"""Shared type aliases, result codes, and exceptions for the cast engine."""

from __future__ import annotations

from enum import Enum

AnglerAddress = str
SlotId = str


class CastError(Enum):
    """Typed failure codes carried on a CastResult. Never raised."""

    SLOT_EMPTY = "SLOT_EMPTY"
    COOLDOWN_OR_CAP = "COOLDOWN_OR_CAP"


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, unknown catalog name)."""
