"""
Repository pattern for loading and exporting the sensor database.

This module connects an editing session to the data boundaries: local CSV
files, the remote default dataset, and CSV export. Failures are turned into a
single human-readable message on the session and never touch the tree.
"""

from pathlib import Path
from typing import Callable, Optional

from .errors import DatasetFetchError, DatasetParseError
from .session import EditingSession
from .tree_builder import build_tree
from ..config.settings import AppSettings, get_settings, get_settings_manager
from ..infrastructure.csv_io import load_sensor_csv, parse_sensor_csv, write_sensor_csv
from ..infrastructure.dataset_fetcher import fetch_default_dataset
from ..infrastructure.logging_config import get_logger
from ..infrastructure.paths import resolve_export_path

logger = get_logger(__name__)


class SensorRepository:
    """
    Loads datasets into an editing session and exports them back out.
    """

    def __init__(
        self,
        session: EditingSession,
        settings: Optional[AppSettings] = None,
        fetcher: Optional[Callable[[str, float], str]] = None
    ):
        """
        Initialize the repository.

        Args:
            session: The session receiving loaded trees.
            settings: Application settings. Defaults to the global settings.
            fetcher: Callable(url, timeout) returning the default dataset text.
                Defaults to an HTTP fetch.
        """
        self.session = session
        self._settings = settings if settings is not None else get_settings()
        self._fetcher = fetcher or fetch_default_dataset

    def load_text(self, text: str, file_name: Optional[str] = None, source: str = "CSV") -> bool:
        """
        Parse a CSV payload and replace the session tree with it.

        Args:
            text: CSV text.
            file_name: File name to track for export, or None to keep the current one.
            source: Label used in the error message ("CSV", "default CSV").

        Returns:
            True on success. On failure the session error is set and the
            tree and dirty flag are left untouched.
        """
        try:
            records = parse_sensor_csv(text)
        except DatasetParseError as e:
            self.session.report_error(f"Error parsing {source}: {e}")
            return False

        self.session.replace_tree(build_tree(records), file_name)
        return True

    def load_file(self, file_path: Path) -> bool:
        """
        Load a local CSV file into the session.

        The file's name becomes the export file name and its path is
        recorded in the recent files list.

        Args:
            file_path: Path to the CSV file.

        Returns:
            True on success, False with the session error set otherwise.
        """
        file_path = Path(file_path)
        logger.info(f"Loading dataset from {file_path}")
        try:
            records = load_sensor_csv(file_path)
        except (OSError, UnicodeDecodeError) as e:
            self.session.report_error(f"Error reading {file_path.name}: {e}")
            return False
        except DatasetParseError as e:
            self.session.report_error(f"Error parsing CSV: {e}")
            return False

        self.session.replace_tree(build_tree(records), file_path.name)
        get_settings_manager().add_recent_file(str(file_path))
        return True

    def load_default(self) -> bool:
        """
        Fetch the default dataset and load it into the session.

        Returns:
            True on success, False with the session error set otherwise.
        """
        try:
            text = self._fetcher(self._settings.default_dataset_url, self._settings.fetch_timeout)
        except DatasetFetchError as e:
            self.session.report_error(str(e))
            return False

        return self.load_fetched(text)

    def load_fetched(self, text: str) -> bool:
        """
        Load an already fetched default dataset payload.

        Used when the fetch itself ran elsewhere (e.g. on a worker thread).
        """
        return self.load_text(text, file_name=self._settings.default_file_name, source="default CSV")

    def export(self, destination: Optional[Path] = None) -> Path:
        """
        Flatten the session tree and write it as CSV.

        Args:
            destination: Target file, or a directory receiving the tracked
                file name. Defaults to the tracked file name in the current
                directory.

        Returns:
            Path of the written file.

        Raises:
            DatasetExportError: If the file cannot be written. The dirty flag
                is left unchanged.
        """
        if destination is None:
            destination = Path.cwd()
        target = resolve_export_path(Path(destination), self.session.file_name)

        records = self.session.to_records()
        write_sensor_csv(records, target)
        self.session.mark_saved()
        logger.info(f"Exported {len(records)} records to {target}")
        return target
