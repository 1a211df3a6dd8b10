"""Services layer - filtering, form handling and configuration."""

from tbr_tracker.services.entry_editor import EditorSubmission, EntryEditor, parse_rating
from tbr_tracker.services.entry_form import EntryForm
from tbr_tracker.services.placeholder_images import PlaceholderImageService, slugify_title
from tbr_tracker.services.settings_manager import SettingsManager
from tbr_tracker.services.view_filter import (
	compute_stats,
	derive_view,
	filter_items,
	matches_criteria,
	matches_query,
)

__all__ = [
	"EntryEditor",
	"EditorSubmission",
	"EntryForm",
	"parse_rating",
	"PlaceholderImageService",
	"slugify_title",
	"SettingsManager",
	"derive_view",
	"filter_items",
	"compute_stats",
	"matches_query",
	"matches_criteria",
]
