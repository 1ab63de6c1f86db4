from typing import Optional

from pydantic import BaseModel, ConfigDict

from wikibase_rdf.internal_representation.datatypes import Datatype


class EntityDatatypeRecord(BaseModel):
    """One entry of a ``wbgetentities`` response restricted to ``props=datatype``."""

    id: Optional[str] = None
    type: Optional[str] = None
    datatype: Optional[str] = None
    missing: Optional[str] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class ApiError(BaseModel):
    code: str = ""
    info: str = ""

    model_config = ConfigDict(extra="ignore", frozen=True)


class WbGetEntitiesResponse(BaseModel):
    entities: dict[str, EntityDatatypeRecord] = {}
    error: Optional[ApiError] = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class PropertyPredicates(BaseModel):
    direct: str
    statement: str
    qualifier: str
    reference: str
    value_node: Optional[str] = None
    qualifier_value: Optional[str] = None
    reference_value: Optional[str] = None
    statement_normalized: Optional[str] = None
    qualifier_normalized: Optional[str] = None
    reference_normalized: Optional[str] = None
    direct_normalized: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class PropertyShape(BaseModel):
    pid: str
    datatype: Datatype
    predicates: PropertyPredicates

    model_config = ConfigDict(frozen=True)
