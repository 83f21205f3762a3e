"""
Settings management for gitlanes
"""

import copy
import json
from pathlib import Path
from typing import Any

from gitlanes.constants import DEFAULT_PAGE_SIZE, DEFAULT_PALETTE, SETTINGS_FILE


class Settings:
    """Manages layout settings"""

    DEFAULT_SETTINGS = {
        "graph": {
            "palette": list(DEFAULT_PALETTE),
            "page_size": DEFAULT_PAGE_SIZE,  # Commits loaded per page
            "include_tags": True,
            "include_remotes": False,
        },
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = SETTINGS_FILE

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if self.config_path.exists():
            with open(self.config_path) as f:
                loaded = json.load(f)
                # Merge with defaults to handle new settings
                self._merge_settings(self.settings, loaded)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                base_dict: dict[str, Any] = base[key]
                value_dict: dict[str, Any] = value
                self._merge_settings(base_dict, value_dict)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'graph.page_size')"""
        parts = path.split(".")
        value: Any = self.settings

        for part in parts:
            if isinstance(value, dict):
                value_dict: dict[str, Any] = value
                if part in value_dict:
                    value = value_dict[part]
                else:
                    return default
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_palette(self) -> list[str]:
        """Get the lane colors, in allocation order.

        Raises ValueError for an empty palette or non-string entries, since
        every lane must end up with a color.
        """
        palette = self.get("graph.palette", DEFAULT_PALETTE)
        if not isinstance(palette, list) or not palette:
            raise ValueError("graph.palette must be a non-empty list of colors")
        if not all(isinstance(color, str) and color for color in palette):
            raise ValueError("graph.palette entries must be non-empty strings")
        return list(palette)

    def get_page_size(self) -> int:
        """Get the number of commits loaded per page"""
        page_size = int(self.get("graph.page_size", DEFAULT_PAGE_SIZE))
        if page_size < 1:
            raise ValueError(f"graph.page_size must be positive, got {page_size}")
        return page_size

    def get_include_tags(self) -> bool:
        return bool(self.get("graph.include_tags", True))

    def get_include_remotes(self) -> bool:
        return bool(self.get("graph.include_remotes", False))
