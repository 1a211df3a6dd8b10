"""Seed Loader - parses the startup collection from a JSON file."""

import json
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Tuple

from tbr_tracker.core import TBRItem


class SeedLoader:
    """Builds the initial entry list from a JSON array.

    Format:
    [
        {
            "id": "1",
            "title": "Dune",
            "image": "https://...",
            "gallery": ["https://...", "https://..."],
            "genre": ["Sci-Fi"],
            "rating": 4.5,
            "status": "Completed",
            "category": "Book",
            "notes": "...",
            "dateAdded": "2024-01-15"
        }
    ]
    """

    def load(self, seed_path: Path) -> List[TBRItem]:
        """Read and validate every entry in the seed file.

        Args:
            seed_path: Path to the JSON seed file.

        Returns:
            List[TBRItem]: Entries in file order.

        Raises:
            RuntimeError: If the file cannot be read or is not a JSON array of objects.
            ValueError: If an entry breaks an invariant.
        """
        seed_path = Path(seed_path)
        try:
            data = json.loads(seed_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise RuntimeError(f"Failed to read seed file {seed_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Seed file is not valid JSON {seed_path}: {e}") from e

        if not isinstance(data, list):
            raise RuntimeError(f"Seed file must contain a JSON array: {seed_path}")

        items = []
        for position, record in enumerate(data):
            if not isinstance(record, dict):
                raise RuntimeError(f"Seed record #{position} is not an object")
            item = self.parse_record(record)
            item.validate()
            items.append(item)
        return items

    @staticmethod
    def parse_record(record: Dict[str, Any]) -> TBRItem:
        """Convert one JSON object into a TBRItem.

        Raises:
            ValueError: If a required key is missing or a value has the wrong shape.
        """
        try:
            rating = record.get("rating")
            if rating is not None and (
                isinstance(rating, bool) or not isinstance(rating, (int, float))
            ):
                raise ValueError(f"rating must be a number, got {rating!r}")
            return TBRItem(
                id=str(record["id"]),
                title=_require_str(record, "title"),
                image=_require_str(record, "image", ""),
                gallery=_require_str_list(record, "gallery"),
                genre=_require_str_list(record, "genre"),
                rating=float(rating) if rating is not None else None,
                status=_require_str(record, "status"),
                category=_require_str(record, "category"),
                notes=_require_str(record, "notes", None) or None,
                date_added=date.fromisoformat(record["dateAdded"]),
            )
        except KeyError as e:
            raise ValueError(f"Seed record is missing field {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"Malformed seed record {record.get('id')!r}: {e}") from e


_REQUIRED = object()


def _require_str(record: Dict[str, Any], key: str, default: Any = _REQUIRED) -> Any:
    if key not in record and default is not _REQUIRED:
        return default
    value = record[key]
    if value is None and default is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def _require_str_list(record: Dict[str, Any], key: str) -> Tuple[str, ...]:
    values = record.get(key, [])
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"{key} must be a list of strings, got {values!r}")
    return tuple(values)
