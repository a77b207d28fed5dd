"""Pydantic schemas for API replies."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import TransportError
from .querydsl import Atom, FilterList, FilterToken, decode_filter


class QueryResponse(BaseModel):
    """Reply of a POST query endpoint.

    `results` is kept as raw JSON because its shape depends on the queried
    entity and on the requested fields.
    """

    model_config = ConfigDict(frozen=True)

    results: Any = Field(..., description="Raw result entries.")
    more: bool = Field(..., description="Whether further pages exist.")
    count: Optional[int] = Field(None, description="Total number of matches, when requested.")
    compact_filters: Optional[str] = Field(None, description="Compact string form of the filters, when requested.")
    normalized_filters: Optional[FilterToken] = Field(None, description="Normalized filter tree, when requested.")

    @field_validator("normalized_filters", mode="before")
    @classmethod
    def decode_normalized_filters(cls, value: Any) -> Optional[FilterToken]:
        # DecodeError is not a ValueError, so it propagates past pydantic unchanged
        if value is None or isinstance(value, (Atom, FilterList)):
            return value
        return decode_filter(value, path="$.normalized_filters")

    @classmethod
    def from_json(cls, data: Any) -> "QueryResponse":
        """Validate a decoded reply body.

        Raises:
            DecodeError: if `normalized_filters` is not a valid filter tree
            TransportError: if the body does not have the reply shape
        """
        return parse_reply(cls, data)


class VndbStats(BaseModel):
    """Database-wide entry counts returned by `GET /stats`."""

    releases: int
    producers: int
    vn: int
    tags: int
    staff: int
    traits: int
    chars: int


class UserStat(BaseModel):
    """User entry returned by `GET /user`.

    The length vote fields are only present when requested, so both are optional.
    """

    id: str
    username: str
    lengthvotes: Optional[int] = None
    lengthvotes_sum: Optional[int] = None


class AuthInfo(BaseModel):
    """Token owner and permissions returned by `GET /authinfo`."""

    id: str
    username: str
    permissions: List[str] = Field(default_factory=list)


class UlistLabel(BaseModel):
    """User list label returned by `GET /ulist_labels`."""

    id: int
    private: bool
    label: str
    count: Optional[int] = None


UserStats = Dict[str, Optional[UserStat]]
UlistLabels = Dict[str, List[UlistLabel]]

_adapters: Dict[Any, TypeAdapter] = {}


def parse_reply(schema: Any, data: Any) -> Any:
    """Validate `data` against a model class or a typing alias such as `UserStats`.

    Raises:
        TransportError: when the data does not match the expected shape
    """
    adapter = _adapters.get(schema)
    if adapter is None:
        adapter = _adapters[schema] = TypeAdapter(schema)
    try:
        return adapter.validate_python(data)
    except PydanticValidationError as e:
        raise TransportError(
            "Malformed reply body",
            expected=getattr(schema, "__name__", str(schema)),
            errors=e.error_count(),
        ) from e
