import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from pydantic import ValidationError

from wikibase_rdf.internal_representation.datatypes import Datatype
from wikibase_rdf.rdf_builder.property_registry.errors import (
    NetworkError,
    ParseError,
    UnknownTypeError,
)
from wikibase_rdf.rdf_builder.property_registry.models import WbGetEntitiesResponse

if TYPE_CHECKING:
    from wikibase_rdf.infrastructure.web_fetcher import WebResourceFetcher

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://www.wikidata.org/w/api.php"


class PropertyTypeResolver:
    """
    Looks up the datatype of a single property through the wbgetentities API.

    Every call issues exactly one request; there is no caching, retrying or
    batching here. Failures surface as NetworkError, ParseError or
    UnknownTypeError.
    """

    def __init__(self, fetcher: "WebResourceFetcher", api_url: str = DEFAULT_API_URL):
        self.fetcher = fetcher
        self.api_url = api_url

    def build_url(self, property_id: str) -> str:
        params = {
            "action": "wbgetentities",
            "ids": property_id,
            "format": "json",
            "props": "datatype",
        }
        separator = "&" if "?" in self.api_url else "?"
        return f"{self.api_url}{separator}{urlencode(params)}"

    def resolve(self, property_id: str) -> Datatype:
        logger.info(f"Fetching datatype of property {property_id} online")
        url = self.build_url(property_id)

        try:
            stream = self.fetcher.get_stream(url)
            body = stream.read()
        except NetworkError as e:
            raise NetworkError(str(e), property_id) from e
        except OSError as e:
            raise NetworkError(f"reading response failed: {e}", property_id) from e

        datatype_name = self._extract_datatype(property_id, body)
        datatype = Datatype.from_api_name(datatype_name)
        if datatype is None:
            raise UnknownTypeError(datatype_name, property_id)
        return datatype

    @staticmethod
    def _extract_datatype(property_id: str, body: bytes) -> str:
        try:
            response = WbGetEntitiesResponse.model_validate_json(body)
        except ValidationError as e:
            raise ParseError(f"malformed response: {e}", property_id) from e

        if response.error is not None:
            raise ParseError(
                f"API error {response.error.code}: {response.error.info}", property_id
            )

        record = response.entities.get(property_id)
        if record is None:
            raise ParseError("entity missing from response", property_id)
        if record.missing is not None:
            raise ParseError("property does not exist", property_id)
        if record.datatype is None:
            raise ParseError("response has no datatype", property_id)
        return record.datatype
