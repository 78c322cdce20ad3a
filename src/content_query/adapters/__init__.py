"""Registry adapters."""

from __future__ import annotations

from .memory import InMemorySchemaRegistry

__all__ = ["InMemorySchemaRegistry"]
