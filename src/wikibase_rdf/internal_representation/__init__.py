from .datatypes import Datatype, Unresolved, UNRESOLVED
from .value_kinds import ValueKind

__all__ = [
    "Datatype",
    "Unresolved",
    "UNRESOLVED",
    "ValueKind",
]
