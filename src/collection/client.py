"""HTTP client for the museum collections website and its JSON API."""

from typing import Any
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests

from common.logger import get_logger

from .errors import FetchError
from .settings import CollectionSettings

logger = get_logger(__name__)


class LouvreClient:
    """Client for collections.louvre.fr.

    Two kinds of resources are fetched:
    - artwork records, served as JSON when ``.json`` is appended to the
      ARK path (``/ark:/53355/cl010062370.json``)
    - search results pages, served as HTML from ``/recherche``

    Each call is a single attempt: no retries and no timeout beyond the
    transport defaults.
    """

    def __init__(self, settings: CollectionSettings | None = None):
        """Initialize the client.

        Args:
            settings: Upstream origin and ARK prefix (default: from environment)
        """
        self.settings = settings or CollectionSettings.from_env()
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def build_api_url(self, path: str) -> str:
        """Resolve an API path against the base URL and force a ``.json`` suffix.

        Example:
            >>> client.build_api_url("/ark:/53355/cl010062370")
            'https://collections.louvre.fr/ark:/53355/cl010062370.json'
        """
        parts = urlsplit(urljoin(f"{self.settings.base_url}/", path))
        url_path = parts.path
        if not url_path.endswith(".json"):
            url_path += ".json"
        return urlunsplit((parts.scheme, parts.netloc, url_path, parts.query, parts.fragment))

    def fetch_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Fetch a JSON document from the collection API.

        Args:
            path: Path relative to the base URL; ``.json`` is appended if missing
            params: Query parameters, ``None`` values are dropped

        Returns:
            Decoded JSON body

        Raises:
            FetchError: On network failure, non-2xx status or invalid JSON
        """
        url = self.build_api_url(path)
        response = self._get(url, params)
        try:
            return response.json()
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {url}: {e}") from e

    def fetch_html(self, url: str, params: dict[str, Any] | None = None) -> str:
        """Fetch an HTML page.

        Raises:
            FetchError: On network failure or non-2xx status
        """
        return self._get(url, params).text

    def fetch_artwork(self, ark_id: str) -> Any:
        """Fetch the raw JSON record of one artwork."""
        return self.fetch_json(self.settings.artwork_path(ark_id))

    def fetch_search_page(self, query: str, page: int = 1) -> str:
        """Fetch one page of keyword search results."""
        return self.fetch_html(self.settings.search_url, {"page": page, "q": query})

    def fetch_artist_page(self, artist: str) -> str:
        """Fetch the advanced-search results listing an artist's works, oldest first."""
        params = {"sort": "date", "advanced": 1, "authorStr[0]": artist}
        return self.fetch_html(self.settings.search_url, params)

    def _get(self, url: str, params: dict[str, Any] | None) -> requests.Response:
        params = {key: value for key, value in (params or {}).items() if value is not None}
        logger.info(f"Fetching {url} {params or ''}".rstrip())

        try:
            response = self.session.get(url, params=params)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise FetchError(f"Request failed with status code {status}: {url}") from e
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

        return response

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
