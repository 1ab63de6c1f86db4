from wikibase_rdf.internal_representation.datatypes import (
    UNRESOLVED,
    Datatype,
    Unresolved,
)
from wikibase_rdf.internal_representation.value_kinds import ValueKind
from wikibase_rdf.rdf_builder.property_registry.errors import (
    NetworkError,
    ParseError,
    PropertyTypeError,
    UnknownTypeError,
)
from wikibase_rdf.rdf_builder.property_registry.registry import PropertyTypeRegistry
from wikibase_rdf.rdf_builder.property_registry.resolver import PropertyTypeResolver

__all__ = [
    "Datatype",
    "NetworkError",
    "ParseError",
    "PropertyTypeError",
    "PropertyTypeRegistry",
    "PropertyTypeResolver",
    "UNRESOLVED",
    "UnknownTypeError",
    "Unresolved",
    "ValueKind",
]
