from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class Value(BaseModel):
    kind: Literal["entity", "globe", "quantity", "string", "time"]
    value: Any

    model_config = ConfigDict(frozen=True)
