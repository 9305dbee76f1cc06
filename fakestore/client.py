"""HTTP client for the fake store REST API."""

import asyncio
import logging

import requests

from .config import CatalogSettings
from .errors import TransportError

logger = logging.getLogger(__name__)


class CatalogClient:
    """Fetches raw response bodies from the catalog API."""

    def __init__(self, settings: CatalogSettings | None = None):
        self.settings = settings or CatalogSettings()
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def url_for(self, path: str) -> str:
        """Join a request path onto the configured base URL."""
        path = path.strip().lstrip("/")
        if not path:
            raise ValueError("path must not be empty")
        return f"{self.settings.base_url.rstrip('/')}/{path}"

    async def fetch(self, path: str) -> str:
        """Fetch ``path`` and return the response body as text.

        The request runs in a worker thread so the event loop stays free
        while it is in flight.

        Raises:
            ValueError: If ``path`` is empty
            TransportError: On connection failure, timeout or non-2xx status
        """
        url = self.url_for(path)
        return await asyncio.to_thread(self._get, url)

    def _get(self, url: str) -> str:
        logger.info(f"Fetching {url}")

        try:
            response = self.session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise TransportError(f"HTTP {status} from {url}") from e
        except requests.Timeout as e:
            raise TransportError(f"Timed out fetching {url}") from e
        except requests.RequestException as e:
            raise TransportError(f"Error fetching {url}: {e}") from e

        logger.debug(f"Received from {url}: {response.text}")
        return response.text

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
