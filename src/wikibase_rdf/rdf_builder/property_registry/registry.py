import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, TextIO, Union

from wikibase_rdf.config.settings import Settings, settings as default_settings
from wikibase_rdf.internal_representation.datatypes import (
    UNRESOLVED,
    Datatype,
    Unresolved,
)
from wikibase_rdf.internal_representation.value_kinds import ValueKind
from wikibase_rdf.rdf_builder.ontology.datatypes import property_shape
from wikibase_rdf.rdf_builder.property_registry.errors import PropertyTypeError
from wikibase_rdf.rdf_builder.property_registry.resolver import PropertyTypeResolver
from wikibase_rdf.rdf_builder.property_registry.snapshot import (
    load_snapshot,
    property_number,
    write_snapshot,
)

if TYPE_CHECKING:
    from wikibase_rdf.rdf_builder.property_registry.models import PropertyShape

logger = logging.getLogger(__name__)

StoredType = Union[Datatype, Unresolved, str]

VALUE_KIND_DATATYPES = {
    ValueKind.ENTITY: Datatype.ITEM,
    ValueKind.GLOBE: Datatype.GLOBE_COORDINATES,
    ValueKind.QUANTITY: Datatype.QUANTITY,
    ValueKind.TIME: Datatype.TIME,
}


class PropertyTypeRegistry:
    """
    Datatypes of properties used while serializing statements.

    The registry starts out with a snapshot of known property datatypes and
    asks the Wikibase API about anything else. Each property is looked up
    online at most once: a failed lookup is remembered as UNRESOLVED until
    set_type() overrides it.

    Not thread safe; use one registry per worker or guard it externally.
    """

    def __init__(
        self,
        resolver: Optional[PropertyTypeResolver] = None,
        snapshot: Optional[Mapping[str, Datatype]] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        if snapshot is None:
            snapshot = load_snapshot(self.settings.property_types_snapshot)
        self.property_types: dict[str, StoredType] = dict(snapshot)
        self.resolver = resolver or self._default_resolver()
        self.last_registered: Optional[str] = None

    def _default_resolver(self) -> PropertyTypeResolver:
        from wikibase_rdf.infrastructure.web_fetcher import RequestsWebResourceFetcher

        fetcher = RequestsWebResourceFetcher(
            timeout=self.settings.http_timeout,
            user_agent=self.settings.user_agent,
        )
        return PropertyTypeResolver(fetcher, api_url=self.settings.wikibase_api_url)

    def __contains__(self, property_id: str) -> bool:
        return property_id in self.property_types

    def __len__(self) -> int:
        return len(self.property_types)

    def get_type(self, property_id: str) -> StoredType:
        """Return the datatype of a property, looking it up online if needed.

        Returns UNRESOLVED when the lookup failed; the failure is logged,
        never raised.
        """
        if property_id in self.property_types:
            return self.property_types[property_id]

        datatype: StoredType
        try:
            datatype = self.resolver.resolve(property_id)
        except PropertyTypeError as e:
            logger.error(
                f"Could not resolve datatype of {property_id}: "
                f"{type(e).__name__}: {e}"
            )
            datatype = UNRESOLVED

        self.property_types[property_id] = datatype
        return datatype

    def set_type(self, property_id: str, datatype: Union[Datatype, str]):
        self.property_types[property_id] = datatype

    def infer_type_from_value(
        self,
        property_id: str,
        value: Any,
        value_kind: Optional[Union[ValueKind, str]] = None,
    ) -> Datatype:
        """Datatype a property must have to carry the given value.

        Entity, globe, quantity and time values each imply exactly one
        datatype. A string value may belong to a string, URL or Commons
        media property, so the property's own datatype decides, with STRING
        as the fallback.
        """
        kind = ValueKind(value_kind if value_kind is not None else value.kind)

        if kind in VALUE_KIND_DATATYPES:
            return VALUE_KIND_DATATYPES[kind]

        datatype = Datatype.coerce(self.get_type(property_id))
        return datatype if datatype is not None else Datatype.STRING

    def register(self, property_id: str):
        self.last_registered = property_id

    def known_types(self) -> dict[str, Datatype]:
        """Entries holding one of the recognized datatypes."""
        known = {}
        for property_id, stored in self.property_types.items():
            datatype = Datatype.coerce(stored)
            if datatype is not None:
                known[property_id] = datatype
        return known

    def shape(self, property_id: str) -> "PropertyShape":
        datatype = Datatype.coerce(self.get_type(property_id))
        if datatype is None:
            raise KeyError(f"Property {property_id} has no known datatype")
        return property_shape(property_id, datatype)

    def export_snapshot(self, sink: TextIO) -> int:
        """Write all resolved entries as a snapshot, ordered by property number.

        Returns the number of rows written.
        """
        entries = {}
        for property_id, stored in self.property_types.items():
            if stored is UNRESOLVED:
                logger.debug(f"Not exporting unresolved property {property_id}")
                continue

            datatype = Datatype.coerce(stored)
            if datatype is None:
                logger.warning(f"Skipping {property_id}: unknown datatype {stored!r}")
                continue

            try:
                property_number(property_id)
            except ValueError:
                logger.warning(f"Skipping malformed property id {property_id!r}")
                continue

            entries[property_id] = datatype

        count = write_snapshot(entries, sink)
        logger.info(f"Exported {count} property types")
        return count
