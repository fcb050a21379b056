"""HTTP transport for Web Quality Analyzer."""

from .app import app

__all__ = ["app"]
