from .base import Value
from .entity_value import EntityValue
from .globe_value import GlobeValue
from .quantity_value import QuantityValue
from .string_value import StringValue
from .time_value import TimeValue

__all__ = [
    "Value",
    "EntityValue",
    "GlobeValue",
    "QuantityValue",
    "StringValue",
    "TimeValue",
]
