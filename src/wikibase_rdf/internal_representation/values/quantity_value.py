from typing import Optional

from pydantic import ConfigDict, Field, field_validator, model_validator
from typing_extensions import Literal

from .base import Value


class QuantityValue(Value):
    kind: Literal["quantity"] = Field(default="quantity", frozen=True)
    value: str
    unit: str = "1"
    upper_bound: Optional[str] = None
    lower_bound: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("unit")
    @classmethod
    def expand_unit(cls, v: str) -> str:
        if v.startswith("Q"):
            v = "http://www.wikidata.org/entity/" + v
        return v

    @field_validator("value", "upper_bound", "lower_bound")
    @classmethod
    def validate_decimal(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            float(v)
        except ValueError:
            raise ValueError(f"Quantity amount must be a decimal, got: {v}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "QuantityValue":
        amount = float(self.value)
        if self.lower_bound is not None and float(self.lower_bound) > amount:
            raise ValueError("Lower bound cannot be greater than amount")
        if self.upper_bound is not None and float(self.upper_bound) < amount:
            raise ValueError("Upper bound cannot be less than amount")
        return self
