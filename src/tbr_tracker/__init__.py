"""
TBR Tracker - A personal list of books, anime and manga to read or watch.

This package provides a desktop application for:
- Recording entries with status, rating, genres and notes
- Searching and filtering the list
- Collection statistics
"""

__version__ = "0.1.0"
__author__ = "Pablo-mercado"

# Make key components available at package level
from tbr_tracker.core import EntryDraft, TBRItem, ViewCriteria
from tbr_tracker.io import CollectionStore

__all__ = [
    "TBRItem",
    "EntryDraft",
    "ViewCriteria",
    "CollectionStore",
]
