from pydantic import ConfigDict, Field, field_validator
from typing_extensions import Literal

from .base import Value


class EntityValue(Value):
    """Reference to another entity, e.g. ``Q5``."""

    kind: Literal["entity"] = Field(default="entity", frozen=True)
    value: str

    model_config = ConfigDict(frozen=True)

    @field_validator("value")
    @classmethod
    def validate_entity_id(cls, v: str) -> str:
        if not v or v[0] not in "QPL" or not v[1:].split("-", 1)[0].isdigit():
            raise ValueError(f"Entity value must be an entity ID, got: {v}")
        return v
