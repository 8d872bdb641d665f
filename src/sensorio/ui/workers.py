"""
Worker threads for background operations.

This module provides worker threads for operations that should not block the
UI thread. Fetching the default dataset is the only asynchronous boundary of
the editor: the thread hands the payload back and the UI thread loads it.
"""

from typing import Callable, Optional

from PySide6.QtCore import QThread, Signal

from sensorio.core.errors import DatasetFetchError
from sensorio.infrastructure.dataset_fetcher import fetch_default_dataset
from sensorio.infrastructure.logging_config import get_logger
from sensorio.infrastructure.paths import DEFAULT_DATASET_URL


logger = get_logger(__name__)


class DefaultDatasetFetchThread(QThread):
    """
    Worker thread fetching the default dataset without blocking the UI.
    
    There is no cancellation: once started, the request runs to completion
    and one of the two signals is emitted.
    """
    
    # Signal emitted with the CSV payload when the fetch succeeds
    fetch_complete = Signal(str)
    
    # Signal emitted with a user-facing message when the fetch fails
    fetch_error = Signal(str)
    
    def __init__(
        self,
        url: str = DEFAULT_DATASET_URL,
        timeout: float = 20,
        fetcher: Optional[Callable[[str, float], str]] = None,
        parent=None
    ):
        """
        Initialize the fetch thread.
        
        Args:
            url: Location of the default dataset.
            timeout: Request timeout in seconds.
            fetcher: Callable(url, timeout) returning the payload. Defaults to an HTTP fetch.
            parent: Parent QObject.
        """
        super().__init__(parent)
        self._url = url
        self._timeout = timeout
        self._fetcher = fetcher or fetch_default_dataset
    
    def run(self):
        """Run the fetch."""
        try:
            text = self._fetcher(self._url, self._timeout)
        except DatasetFetchError as e:
            logger.error(f"Error fetching default dataset in thread: {e}")
            self.fetch_error.emit(str(e))
            return
        self.fetch_complete.emit(text)
