"""Settings Manager - Handles seed data, logging and placeholder configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from tbr_tracker.services.placeholder_images import DEFAULT_BASE_URL

TRUE_VALUES = ("1", "true", "yes", "on")


class SettingsManager:
    """
    Manages application settings.

    Reads values from a .env file in the project root, falling back to the
    process environment.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_seed_path(self) -> Optional[Path]:
        """Seed JSON file; relative paths resolve against the project root."""
        value = self._get("TBR_SEED_PATH")
        if value is None:
            return None
        path = Path(value).expanduser()
        return path if path.is_absolute() else self._project_root / path

    def get_placeholder_base_url(self) -> str:
        return self._get("TBR_PLACEHOLDER_BASE_URL") or DEFAULT_BASE_URL

    def get_log_level(self) -> str:
        return (self._get("TBR_LOG_LEVEL") or "INFO").upper()

    def regenerate_gallery_on_edit(self) -> bool:
        value = self._get("TBR_REGENERATE_GALLERY")
        return value is not None and value.lower() in TRUE_VALUES

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
