from enum import Enum


class Datatype(str, Enum):
    ITEM = "http://wikiba.se/ontology#WikibaseItem"
    STRING = "http://wikiba.se/ontology#String"
    QUANTITY = "http://wikiba.se/ontology#Quantity"
    TIME = "http://wikiba.se/ontology#Time"
    URL = "http://wikiba.se/ontology#Url"
    GLOBE_COORDINATES = "http://wikiba.se/ontology#GlobeCoordinate"
    COMMONS_MEDIA = "http://wikiba.se/ontology#CommonsMedia"

    @property
    def notation(self) -> str:
        """Symbolic name used in snapshot files, e.g. ``ITEM``."""
        return self.name

    @classmethod
    def from_api_name(cls, name: str) -> "Datatype | None":
        """
        Map the datatype vocabulary of the wbgetentities API onto Datatype.

        Matching is exact, so "commonsmedia" or "globecoordinate" are not
        recognized. Unknown names return None.
        """
        return _API_NAMES.get(name)

    @classmethod
    def from_notation(cls, name: str) -> "Datatype | None":
        """
        Look up a Datatype by its symbolic name.

        Accepts "TIME" as well as the legacy "DT_TIME" spelling.
        """
        key = name.strip().upper()
        if key.startswith("DT_"):
            key = key[3:]
        return cls.__members__.get(key)

    @classmethod
    def coerce(cls, value: object) -> "Datatype | None":
        """Recognize a member, an ontology IRI or a symbolic name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return cls.from_notation(value)


_API_NAMES: dict[str, Datatype] = {
    "wikibase-item": Datatype.ITEM,
    "string": Datatype.STRING,
    "quantity": Datatype.QUANTITY,
    "url": Datatype.URL,
    "globe-coordinate": Datatype.GLOBE_COORDINATES,
    "time": Datatype.TIME,
    "commonsMedia": Datatype.COMMONS_MEDIA,
}


class Unresolved(Enum):
    """Marker stored for a property whose type lookup failed."""

    UNRESOLVED = "unresolved"

    def __repr__(self) -> str:
        return "UNRESOLVED"


UNRESOLVED = Unresolved.UNRESOLVED
