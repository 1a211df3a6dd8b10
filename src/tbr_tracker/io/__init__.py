"""I/O layer - In-memory collection storage and seed data loading."""

from .collection_store import CollectionStore
from .seed_loader import SeedLoader

__all__ = ["CollectionStore", "SeedLoader"]
