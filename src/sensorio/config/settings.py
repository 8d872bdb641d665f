"""
Application settings and configuration.

This module provides centralized access to application settings with automatic
persistence to disk. Settings are stored as JSON in a platform-specific location:

- Windows: %APPDATA%/LocalLow/sensorio/settings.json
- macOS: ~/Library/Application Support/sensorio/settings.json
- Linux: ~/.config/sensorio/settings.json

Settings are automatically loaded on first access and saved when updated.

Example:
    from sensorio.config.settings import get_settings, get_settings_manager
    
    # Get current settings
    settings = get_settings()
    print(settings.default_dataset_url)
    
    # Update settings (auto-saves)
    manager = get_settings_manager()
    manager.update(fetch_timeout=30)
    
    # Add recent file (auto-saves)
    manager.add_recent_file("/path/to/cameras.csv")
"""

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional
import logging

from ..infrastructure.paths import DEFAULT_DATASET_URL, get_persistent_data_directory, get_log_file_path


@dataclass
class AppSettings:
    """Application-wide settings."""
    
    # Logging settings
    log_level: int = logging.INFO
    log_to_file: bool = True
    log_file_path: Optional[Path] = field(default_factory=get_log_file_path)
    
    # Dataset settings
    default_dataset_url: str = DEFAULT_DATASET_URL
    default_file_name: str = "cameras.csv"
    fetch_timeout: float = 20.0
    
    # Recent files
    recent_files: list[str] = field(default_factory=list)
    max_recent_items: int = 10


class SettingsManager:
    """
    Manages loading and saving application settings.
    """
    
    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize the settings manager.
        
        Args:
            config_file: Path to configuration file. If None, uses default location.
        """
        if config_file is None:
            data_dir = get_persistent_data_directory()
            config_file = data_dir / "settings.json"
        
        self.config_file = config_file
        self._settings = AppSettings()
        self._logger = logging.getLogger(__name__)
    
    def load(self) -> AppSettings:
        """
        Load settings from configuration file.
        
        Returns:
            The loaded settings object.
        """
        if not self.config_file.exists():
            self._logger.info(f"Settings file not found at {self.config_file}, using defaults")
            return self._settings
        
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
            
            # Convert Path strings back to Path objects
            if data.get('log_file_path'):
                data['log_file_path'] = Path(data['log_file_path'])
            
            for key, value in data.items():
                if hasattr(self._settings, key):
                    setattr(self._settings, key, value)
            
            self._logger.info(f"Settings loaded from {self.config_file}")
            
        except json.JSONDecodeError as e:
            self._logger.error(f"Failed to parse settings file: {e}. Using defaults.")
        except OSError as e:
            self._logger.error(f"Failed to load settings: {e}. Using defaults.")
        
        return self._settings
    
    def save(self, settings: Optional[AppSettings] = None) -> None:
        """
        Save settings to configuration file.
        
        Args:
            settings: Settings object to save. If None, saves current settings.
        """
        if settings is not None:
            self._settings = settings
        
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            
            data = asdict(self._settings)
            
            # Forward slashes keep the file portable between platforms
            if data.get('log_file_path'):
                data['log_file_path'] = str(Path(data['log_file_path'])).replace('\\', '/')
            
            # Atomic write: write to temp file, then rename
            temp_file = self.config_file.with_suffix('.tmp')
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            
            temp_file.replace(self.config_file)
            
            self._logger.info(f"Settings saved to {self.config_file}")
            
        except OSError as e:
            self._logger.error(f"Failed to save settings: {e}")
    
    def get(self) -> AppSettings:
        """
        Get the current settings.
        
        Returns:
            The current settings object.
        """
        return self._settings
    
    def update(self, **kwargs) -> None:
        """
        Update specific settings and auto-save.
        
        Args:
            **kwargs: Setting names and values to update.
        """
        for key, value in kwargs.items():
            if hasattr(self._settings, key):
                setattr(self._settings, key, value)
            else:
                self._logger.warning(f"Ignoring unknown setting: {key}")
        
        self.save()
    
    def add_recent_file(self, path: str) -> None:
        """
        Add a dataset file to the recent files list.
        
        Args:
            path: Path to the CSV file that was opened.
        """
        normalized_path = str(Path(path)).replace('\\', '/')
        
        if normalized_path in self._settings.recent_files:
            self._settings.recent_files.remove(normalized_path)
        
        self._settings.recent_files.insert(0, normalized_path)
        
        if len(self._settings.recent_files) > self._settings.max_recent_items:
            self._settings.recent_files = self._settings.recent_files[:self._settings.max_recent_items]
        
        self.save()


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings_manager() -> SettingsManager:
    """
    Get the global settings manager instance.
    
    Returns:
        The global SettingsManager.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
        _settings_manager.load()
    return _settings_manager


def get_settings() -> AppSettings:
    """
    Get the current application settings.
    
    Returns:
        The current AppSettings object.
    """
    return get_settings_manager().get()
