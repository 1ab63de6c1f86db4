"""Reading and writing property datatype snapshots.

A snapshot is a tab separated table with a ``property_id``/``datatype``
header and one row per property, ordered by the numeric part of the
property id::

    property_id	datatype
    P6	ITEM
    P10	COMMONS_MEDIA

The bundled snapshot seeds every registry so that well-known properties
never need a network lookup.
"""

import csv
import logging
import re
from importlib import resources
from pathlib import Path
from typing import Iterable, Mapping, Optional, TextIO

from wikibase_rdf.internal_representation.datatypes import Datatype

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = ["property_id", "datatype"]
BUNDLED_SNAPSHOT = "known_property_types.tsv"

_PROPERTY_ID = re.compile(r"^P([0-9]+)$")


def property_number(property_id: str) -> int:
    """Numeric part of a property id: ``P31`` -> ``31``."""
    match = _PROPERTY_ID.match(property_id)
    if not match:
        raise ValueError(f"Not a property id: {property_id!r}")
    return int(match.group(1))


def sort_by_property_number(property_ids: Iterable[str]) -> list[str]:
    """Sort property ids numerically, so that P9 comes before P10."""
    return sorted(property_ids, key=property_number)


def read_snapshot(stream: TextIO) -> dict[str, Datatype]:
    entries: dict[str, Datatype] = {}
    reader = csv.DictReader(stream, delimiter="\t")
    for line_number, row in enumerate(reader, start=2):
        property_id = (row.get("property_id") or "").strip()
        notation = (row.get("datatype") or "").strip()

        datatype = Datatype.from_notation(notation)
        if datatype is None or not _PROPERTY_ID.match(property_id):
            logger.warning(
                f"Skipping snapshot line {line_number}: {property_id!r} {notation!r}"
            )
            continue
        entries[property_id] = datatype
    return entries


def load_snapshot(path: Optional[Path] = None) -> dict[str, Datatype]:
    """Load a snapshot file, or the bundled one when no path is given."""
    if path is not None:
        with open(path, encoding="utf-8", newline="") as f:
            entries = read_snapshot(f)
        logger.debug(f"Loaded {len(entries)} property types from {path}")
        return entries

    bundled = resources.files(__package__).joinpath("data").joinpath(BUNDLED_SNAPSHOT)
    with bundled.open("r", encoding="utf-8", newline="") as f:
        entries = read_snapshot(f)
    logger.debug(f"Loaded {len(entries)} property types from bundled snapshot")
    return entries


def write_snapshot(entries: Mapping[str, Datatype], sink: TextIO) -> int:
    """Write entries in numeric property order. Returns the row count."""
    writer = csv.writer(sink, delimiter="\t", lineterminator="\n")
    writer.writerow(SNAPSHOT_FIELDS)
    count = 0
    for property_id in sort_by_property_number(entries):
        writer.writerow([property_id, entries[property_id].notation])
        count += 1
    return count
