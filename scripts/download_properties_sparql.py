#!/usr/bin/env python3
"""
Download all Wikidata property datatypes via SPARQL and rewrite the
bundled property type snapshot.

Only properties with one of the recognized datatypes are kept.

Usage:
    python scripts/download_properties_sparql.py [output.tsv]
"""

import sys
from pathlib import Path

import requests

from wikibase_rdf.config.settings import settings
from wikibase_rdf.internal_representation.datatypes import Datatype
from wikibase_rdf.rdf_builder.property_registry.snapshot import write_snapshot

SPARQL_ENDPOINT = "https://query.wikidata.org/sparql"

BUNDLED_SNAPSHOT = (
    Path(__file__).parent.parent
    / "src"
    / "wikibase_rdf"
    / "rdf_builder"
    / "property_registry"
    / "data"
    / "known_property_types.tsv"
)


def fetch_property_types() -> dict[str, Datatype]:
    """Query the SPARQL endpoint for every property and its datatype"""
    query = """
    SELECT ?property ?datatype WHERE {
      ?property a wikibase:Property .
      ?property wikibase:propertyType ?datatype .
    }
    """

    response = requests.get(
        SPARQL_ENDPOINT,
        params={"query": query, "format": "json"},
        timeout=60,
        headers={"User-Agent": settings.user_agent},
    )
    response.raise_for_status()

    bindings = response.json()["results"]["bindings"]
    print(f"Got {len(bindings)} properties")

    property_types = {}
    skipped = 0
    for row in bindings:
        # http://www.wikidata.org/entity/P31 -> P31
        property_id = row["property"]["value"].rsplit("/", 1)[-1]
        # http://wikiba.se/ontology#WikibaseItem is the Datatype value itself
        datatype = Datatype.coerce(row["datatype"]["value"])
        if datatype is None:
            skipped += 1
            continue
        property_types[property_id] = datatype

    print(f"Skipped {skipped} properties with other datatypes")
    return property_types


def main() -> None:
    output_path = Path(sys.argv[1]) if len(sys.argv) > 1 else BUNDLED_SNAPSHOT

    print("Fetching properties from SPARQL endpoint...")
    property_types = fetch_property_types()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        count = write_snapshot(property_types, f)

    print(f"✅ Saved to {output_path}")
    print(f"   Total properties: {count}")


if __name__ == "__main__":
    main()
