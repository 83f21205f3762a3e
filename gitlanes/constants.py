"""
Centralized constants for gitlanes.

Palette tokens, paging defaults and file locations used across the
package live here so they are easy to find and modify.
"""

from pathlib import Path

# Colors cycled across lanes, in allocation order
DEFAULT_PALETTE = [
    "#4CAF50",  # Green
    "#2196F3",  # Blue
    "#FF9800",  # Orange
    "#9C27B0",  # Purple
    "#F44336",  # Red
    "#00BCD4",  # Cyan
    "#E91E63",  # Pink
    "#795548",  # Brown
]

# Commits per page when loading history incrementally
DEFAULT_PAGE_SIZE = 50

# Settings file
SETTINGS_FILE = Path.home() / ".config" / "gitlanes" / "settings.json"
