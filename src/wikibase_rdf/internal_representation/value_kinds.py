from enum import Enum


class ValueKind(str, Enum):
    ENTITY = "entity"
    GLOBE = "globe"
    QUANTITY = "quantity"
    STRING = "string"
    TIME = "time"
