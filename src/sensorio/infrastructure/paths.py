"""
Path utilities and constants.

This module provides helper functions for working with paths in the application.
"""

import platform
from pathlib import Path


APP_NAME = "sensorio"

DEFAULT_DATASET_URL = (
    "https://raw.githubusercontent.com/HumanMint/atlas-vision/main/public/data/cameras.csv"
)


def get_persistent_data_directory() -> Path:
    """
    Get the persistent data directory for the application (cross-platform).
    
    Returns:
        Path to the persistent data directory.
        
    Platform-specific locations:
        - Windows: %APPDATA%/LocalLow/sensorio
        - macOS: ~/Library/Application Support/sensorio
        - Linux: ~/.config/sensorio
    """
    system = platform.system()
    
    if system == "Windows":
        base = Path.home() / "AppData" / "LocalLow"
    elif system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path.home() / ".config"
    
    data_dir = base / APP_NAME
    data_dir.mkdir(parents=True, exist_ok=True)
    
    return data_dir


def get_settings_file_path() -> Path:
    """
    Get the path to the settings file.
    
    Returns:
        Path to the settings.json file.
    """
    return get_persistent_data_directory() / "settings.json"


def get_log_file_path() -> Path:
    """
    Get the path to the main log file.
    
    Returns:
        Path to the log.txt file.
    """
    return get_persistent_data_directory() / "log.txt"


def get_old_log_file_path() -> Path:
    """
    Get the path to the old log file.
    
    Returns:
        Path to the log.old.txt file.
    """
    return get_persistent_data_directory() / "log.old.txt"


def resolve_export_path(destination: Path, file_name: str) -> Path:
    """
    Resolve where an export should be written.
    
    Args:
        destination: A target file path, or a directory to place ``file_name`` in.
        file_name: File name used when ``destination`` is a directory.
        
    Returns:
        The full path of the file to write.
    """
    destination = Path(destination)
    if destination.is_dir():
        return destination / file_name
    return destination
