"""Utility helpers for git-porcelain."""

from .feed import ChangeFeed

__all__ = ["ChangeFeed"]
