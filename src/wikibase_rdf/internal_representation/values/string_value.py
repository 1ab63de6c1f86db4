from pydantic import ConfigDict, Field
from typing_extensions import Literal

from .base import Value


class StringValue(Value):
    """Plain string payload.

    The same shape carries strings, URLs and Commons file names, so the
    datatype can only be told from the property.
    """

    kind: Literal["string"] = Field(default="string", frozen=True)
    value: str

    model_config = ConfigDict(frozen=True)
