"""Shared pytest configuration."""

import os

# Widget tests must run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
