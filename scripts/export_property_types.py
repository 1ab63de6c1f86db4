#!/usr/bin/env python3
"""
Export the property type registry as a snapshot.

Property ids given on the command line are resolved first (online, if
they are not already known), so the export can be used to grow the
snapshot.

Usage:
    python scripts/export_property_types.py [-o snapshot.tsv] [P123 P456 ...]
"""

import argparse
import logging
import sys

from wikibase_rdf.config.settings import settings
from wikibase_rdf.internal_representation.datatypes import UNRESOLVED
from wikibase_rdf.rdf_builder.property_registry.registry import PropertyTypeRegistry

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("property_ids", nargs="*", help="properties to resolve first")
    parser.add_argument("-o", "--output", help="snapshot file (default: stdout)")
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    registry = PropertyTypeRegistry()
    unresolved = [
        pid for pid in args.property_ids if registry.get_type(pid) is UNRESOLVED
    ]
    if unresolved:
        logger.warning(f"Could not resolve: {', '.join(unresolved)}")

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            registry.export_snapshot(f)
    else:
        registry.export_snapshot(sys.stdout)


if __name__ == "__main__":
    main()
