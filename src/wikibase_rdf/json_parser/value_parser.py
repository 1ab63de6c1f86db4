from typing import Any, Callable

from wikibase_rdf.internal_representation.values import (
    EntityValue,
    GlobeValue,
    QuantityValue,
    StringValue,
    TimeValue,
    Value,
)

ENTITY_TYPE_PREFIXES = {
    "item": "Q",
    "property": "P",
    "lexeme": "L",
}


def parse_entity_value(datavalue: dict[str, Any]) -> EntityValue:
    value = datavalue["value"]
    entity_id = value.get("id")
    if not entity_id:
        prefix = ENTITY_TYPE_PREFIXES[value.get("entity-type", "item")]
        entity_id = f"{prefix}{value['numeric-id']}"
    return EntityValue(value=entity_id)


def parse_globe_value(datavalue: dict[str, Any]) -> GlobeValue:
    value = datavalue["value"]
    latitude = value["latitude"]
    longitude = value["longitude"]
    return GlobeValue(
        value=f"Point({longitude} {latitude})",
        latitude=latitude,
        longitude=longitude,
        altitude=value.get("altitude"),
        precision=value.get("precision"),
        globe=value.get("globe", "http://www.wikidata.org/entity/Q2"),
    )


def parse_quantity_value(datavalue: dict[str, Any]) -> QuantityValue:
    value = datavalue["value"]
    return QuantityValue(
        value=value["amount"],
        unit=value.get("unit", "1"),
        upper_bound=value.get("upperBound"),
        lower_bound=value.get("lowerBound"),
    )


def parse_string_value(datavalue: dict[str, Any]) -> StringValue:
    return StringValue(value=datavalue["value"])


def parse_time_value(datavalue: dict[str, Any]) -> TimeValue:
    value = datavalue["value"]
    return TimeValue(
        value=value["time"],
        timezone=value.get("timezone", 0),
        before=value.get("before", 0),
        after=value.get("after", 0),
        precision=value.get("precision", 11),
        calendarmodel=value.get(
            "calendarmodel", "http://www.wikidata.org/entity/Q1985727"
        ),
    )


PARSERS: dict[str, Callable[[dict[str, Any]], Value]] = {
    "wikibase-entityid": parse_entity_value,
    "globecoordinate": parse_globe_value,
    "quantity": parse_quantity_value,
    "string": parse_string_value,
    "time": parse_time_value,
}


def parse_value(datavalue: dict[str, Any]) -> Value:
    """Parse a Wikibase JSON ``datavalue`` into a typed value.

    Only the value shapes whose kind determines (or, for strings, hints at)
    a property datatype are supported.
    """
    datavalue_type = datavalue.get("type")
    parser = PARSERS.get(str(datavalue_type))
    if not parser:
        raise ValueError(f"Unsupported datavalue type: {datavalue_type}")
    return parser(datavalue)
