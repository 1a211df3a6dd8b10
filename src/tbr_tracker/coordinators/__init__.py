"""Coordinators - Orchestration layer connecting UI with business logic."""

from .collection_coordinator import CollectionCoordinator

__all__ = ["CollectionCoordinator"]
