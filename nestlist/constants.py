"""
Constants for the nestlist application.

Note: These constants serve as default fallback values.
Actual values may be overridden from nestlist.json at runtime via ConfigManager.
"""
from pathlib import Path
from typing import Any, Optional
import json

# =============================================================================
# Default Fallback Values
# =============================================================================

# Box titles shown by the terminal front-end
DEFAULT_MENU_BOX_TITLE = "Menu"
DEFAULT_SELECTED_BOX_TITLE = "Selected"
DEFAULT_LIST_BOX_TITLE = "List"
DEFAULT_BODY_BOX_TITLE = "Body"
DEFAULT_SAVE_COMMAND_DESCRIPTION = "save"

# Display defaults
DEFAULT_HIGHLIGHT_SYMBOL = "=>"
DEFAULT_SAVE_NOTICE = "SAVED!"
DEFAULT_CONFIG_FILENAME = "nestlist.json"

# Messages (not configurable)
NO_ROOT_ITEMS_MESSAGE = "No items in root list"

# Usage hints, in display order
USAGE_EXIT = "ctrl-c: exit"
USAGE_BACK = "b: back to previous page"
USAGE_ADD = "a: add items to selection"
USAGE_EDIT = "e: edit selection"
USAGE_DELETE = "d: delete selection"
USAGE_ADD_MODE = "enter: add item | ctrl-s/esc: save and return to previous"

# =============================================================================
# Raw Keys
# Strings as returned by click.getchar(). Bindings live in managers/events.py.
# =============================================================================

KEY_UP = "\x1b[A"
KEY_DOWN = "\x1b[B"
KEY_LEFT = "\x1b[D"
# Windows console arrow keys
KEY_UP_WIN = "\xe0H"
KEY_DOWN_WIN = "\xe0P"
KEY_LEFT_WIN = "\xe0K"

CTRL_C = "\x03"
CTRL_S = "\x13"
ESCAPE = "\x1b"


# =============================================================================
# Config Loader
# Load values from nestlist.json at runtime.
# =============================================================================

_config_manager_instance: Optional['ConfigManager'] = None


class ConfigManager:
    """
    Manages loading configuration from a nestlist.json file with fallback to defaults.

    Usage:
        # With default path (./nestlist.json)
        config = ConfigManager()
        notice = config.get_str('save_notice', DEFAULT_SAVE_NOTICE)

        # With custom path
        config = ConfigManager(config_path=Path("/custom/path/nestlist.json"))
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Direct path to the config file. Defaults to ./nestlist.json.
        """
        self._config: Optional[dict] = None
        self._config_path = config_path if config_path is not None else Path(DEFAULT_CONFIG_FILENAME)

    def _load_config(self) -> dict:
        """Load config from the config file."""
        if self._config is not None:
            return self._config

        if self._config_path.exists():
            try:
                with open(self._config_path, "r") as f:
                    loaded = json.load(f)
                self._config = loaded if isinstance(loaded, dict) else {}
            except (json.JSONDecodeError, IOError):
                self._config = {}
        else:
            self._config = {}

        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value with fallback to default.

        Args:
            key: Configuration key name.
            default: Default value if key not found.

        Returns:
            Config value or default.
        """
        config = self._load_config()
        return config.get(key, default)

    def get_str(self, key: str, default: str) -> str:
        """Get a string config value with fallback."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def reload(self) -> dict:
        """Force reload of config from disk."""
        self._config = None
        return self._load_config()

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path


def get_config_manager(reset: bool = False) -> ConfigManager:
    """
    Get the singleton ConfigManager instance with default path.

    Args:
        reset: If True, reset the singleton and create a new instance.

    Returns:
        ConfigManager singleton instance.
    """
    global _config_manager_instance
    if _config_manager_instance is None or reset:
        _config_manager_instance = ConfigManager()
    return _config_manager_instance


def reset_config_manager() -> None:
    """Reset the singleton ConfigManager instance (useful for testing)."""
    global _config_manager_instance
    _config_manager_instance = None


def get_save_notice() -> str:
    """Get the notice shown after a successful save."""
    return get_config_manager().get_str('save_notice', DEFAULT_SAVE_NOTICE)


def get_highlight_symbol() -> str:
    """Get the marker drawn next to the selected item."""
    return get_config_manager().get_str('highlight_symbol', DEFAULT_HIGHLIGHT_SYMBOL)
