from typing import Optional


class PropertyTypeError(Exception):
    """Base class for failures while resolving a property datatype."""

    def __init__(self, message: str, property_id: Optional[str] = None):
        if property_id:
            message = f"{property_id}: {message}"
        super().__init__(message)
        self.property_id = property_id


class NetworkError(PropertyTypeError):
    """The web resource could not be retrieved."""


class ParseError(PropertyTypeError):
    """The API response was not well-formed or lacked the datatype."""


class UnknownTypeError(PropertyTypeError):
    def __init__(self, datatype: str, property_id: Optional[str] = None):
        super().__init__(f"unknown datatype {datatype!r}", property_id)
        self.datatype = datatype
