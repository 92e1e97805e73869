"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import OwnerSource

__all__ = ["OwnerSource"]
