"""HTTP layer."""

from __future__ import annotations

from docsagent.api.app import create_app

__all__ = ["create_app"]
