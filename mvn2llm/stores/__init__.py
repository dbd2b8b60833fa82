"""Persistent stores."""

from .archive_cache import DEFAULT_CACHE_DIR, ArchiveCache

__all__ = ["ArchiveCache", "DEFAULT_CACHE_DIR"]
