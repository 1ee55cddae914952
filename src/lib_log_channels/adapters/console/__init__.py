"""Console adapters."""

from __future__ import annotations

from .rich_stream import RichStreamAdapter

__all__ = ["RichStreamAdapter"]
