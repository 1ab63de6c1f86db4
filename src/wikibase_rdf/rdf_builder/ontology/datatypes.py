from wikibase_rdf.internal_representation.datatypes import Datatype
from wikibase_rdf.rdf_builder.property_registry.models import (
    PropertyPredicates,
    PropertyShape,
)

OBJECT_PROPERTY_DATATYPES = {
    Datatype.ITEM,
    Datatype.COMMONS_MEDIA,
    Datatype.STRING,
    Datatype.URL,
}

VALUE_NODE_DATATYPES = {
    Datatype.TIME,
    Datatype.QUANTITY,
    Datatype.GLOBE_COORDINATES,
}


def get_owl_type(datatype: Datatype) -> str:
    """Map datatype to OWL property type.

    Returns 'owl:ObjectProperty' for item, string, URL and Commons media
    properties, 'owl:DatatypeProperty' for the rest.
    """
    return (
        "owl:ObjectProperty"
        if datatype in OBJECT_PROPERTY_DATATYPES
        else "owl:DatatypeProperty"
    )


def property_shape(pid: str, datatype: Datatype) -> PropertyShape:
    """Create a PropertyShape with appropriate predicates for datatype.

    Args:
        pid: Property ID (e.g., P31)
        datatype: One of the recognized datatypes

    Returns:
        PropertyShape with predicates configured for datatype
    """
    if not isinstance(datatype, Datatype):
        raise ValueError(f"Unsupported datatype: {datatype}")

    predicates = {
        "direct": f"wdt:{pid}",
        "statement": f"ps:{pid}",
        "qualifier": f"pq:{pid}",
        "reference": f"pr:{pid}",
    }

    if datatype in VALUE_NODE_DATATYPES:
        predicates.update(
            value_node=f"psv:{pid}",
            qualifier_value=f"pqv:{pid}",
            reference_value=f"prv:{pid}",
        )

    if datatype == Datatype.QUANTITY:
        predicates.update(
            statement_normalized=f"psn:{pid}",
            qualifier_normalized=f"pqn:{pid}",
            reference_normalized=f"prn:{pid}",
            direct_normalized=f"wdtn:{pid}",
        )

    return PropertyShape(
        pid=pid,
        datatype=datatype,
        predicates=PropertyPredicates(**predicates),
    )
