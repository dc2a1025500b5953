"""Blob storage adapters."""

from .client import HttpBlobStore, InMemoryBlobStore

__all__ = ["HttpBlobStore", "InMemoryBlobStore"]
