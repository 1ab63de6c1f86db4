import json
import logging
from io import BytesIO
from typing import Callable
from urllib.parse import parse_qs, urlparse

import pytest

from wikibase_rdf.internal_representation.datatypes import Datatype
from wikibase_rdf.rdf_builder.property_registry.errors import NetworkError
from wikibase_rdf.rdf_builder.property_registry.registry import PropertyTypeRegistry
from wikibase_rdf.rdf_builder.property_registry.resolver import PropertyTypeResolver

logger = logging.getLogger(__name__)

TEST_API_URL = "https://wikibase.test/w/api.php"


def datatype_response(property_id: str, datatype: str) -> bytes:
    """Body of a wbgetentities answer for a single property"""
    return json.dumps(
        {
            "entities": {
                property_id: {
                    "type": "property",
                    "datatype": datatype,
                    "id": property_id,
                }
            },
            "success": 1,
        }
    ).encode("utf-8")


class FakeFetcher:
    """WebResourceFetcher serving canned bodies keyed by the ``ids`` parameter.

    Unknown ids fail with NetworkError. A value may also be an exception
    instance, which is raised instead.
    """

    def __init__(self, bodies: dict[str, bytes | Exception] | None = None):
        self.bodies = bodies or {}
        self.urls: list[str] = []

    def get_stream(self, url: str) -> BytesIO:
        self.urls.append(url)
        logger.debug(f"FakeFetcher GET {url}")
        property_id = parse_qs(urlparse(url).query)["ids"][0]
        body = self.bodies.get(property_id)
        if body is None:
            raise NetworkError(f"no route to {url}")
        if isinstance(body, Exception):
            raise body
        return BytesIO(body)

    def calls_for(self, property_id: str) -> int:
        return sum(1 for url in self.urls if f"ids={property_id}&" in url)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher(
        {
            "P9001": datatype_response("P9001", "url"),
            "P9002": datatype_response("P9002", "globe-coordinate"),
            "P9003": datatype_response("P9003", "nonsense-type"),
            "P9004": b"<html>Service unavailable</html>",
            "P9005": datatype_response("P9005", "commonsMedia"),
        }
    )


@pytest.fixture
def resolver(fake_fetcher: FakeFetcher) -> PropertyTypeResolver:
    return PropertyTypeResolver(fake_fetcher, api_url=TEST_API_URL)


@pytest.fixture
def registry(resolver: PropertyTypeResolver) -> PropertyTypeRegistry:
    """Registry seeded from the bundled snapshot, offline"""
    return PropertyTypeRegistry(resolver=resolver)


@pytest.fixture
def make_registry(resolver: PropertyTypeResolver) -> Callable[..., PropertyTypeRegistry]:
    """Registry factory with an explicit seed mapping"""

    def _make(snapshot: dict[str, Datatype] | None = None) -> PropertyTypeRegistry:
        return PropertyTypeRegistry(resolver=resolver, snapshot=snapshot or {})

    return _make
