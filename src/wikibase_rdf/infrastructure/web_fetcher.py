import logging
from io import BytesIO
from typing import BinaryIO, Optional, Protocol

import requests

from wikibase_rdf.rdf_builder.property_registry.errors import NetworkError

logger = logging.getLogger(__name__)


class WebResourceFetcher(Protocol):
    """Retrieves the body of a web resource."""

    def get_stream(self, url: str) -> BinaryIO:
        """Return a readable byte stream for url.

        Raises:
            NetworkError: if the resource could not be retrieved
        """
        ...


class RequestsWebResourceFetcher:
    """WebResourceFetcher backed by a requests Session."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def get_stream(self, url: str) -> BinaryIO:
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"GET {url} failed: {e}") from e
        return BytesIO(response.content)

    def close(self):
        self.session.close()

    def __enter__(self) -> "RequestsWebResourceFetcher":
        return self

    def __exit__(self, *exc_info):
        self.close()
