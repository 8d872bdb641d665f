"""
Retrieval of the default sensor dataset over HTTP.

A single request is issued per call; there is no retry. Callers decide
whether to try again.
"""

import requests

from ..core.errors import DatasetFetchError
from .logging_config import get_logger
from .paths import DEFAULT_DATASET_URL

logger = get_logger(__name__)


FETCH_ERROR_MESSAGE = "Failed to fetch default database."


def fetch_default_dataset(url: str = DEFAULT_DATASET_URL, timeout: float = 20) -> str:
    """
    Download the default dataset as text.
    
    Args:
        url: Location of the CSV payload.
        timeout: Request timeout in seconds.
        
    Returns:
        The response body decoded as text.
        
    Raises:
        DatasetFetchError: On transport errors or a non-success status.
    """
    logger.info(f"Fetching default dataset from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Default dataset fetch failed: {e}")
        raise DatasetFetchError(FETCH_ERROR_MESSAGE) from e
    
    response.encoding = response.encoding or "utf-8"
    logger.debug(f"Fetched {len(response.content)} bytes")
    return response.text
