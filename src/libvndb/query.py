"""Query envelope sent to the POST endpoints.

`QueryFormat` is the request body shared by every entity endpoint. It is
usually assembled with the chaining builder:

    query = (
        QueryFormat.builder()
        .filters(["id", "=", "v17"])
        .fields("title, image.url")
        .build()
    )
"""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import BuilderConsumedError
from .querydsl import FilterList, FilterToken, encode_filter, to_filters


class QueryFormat(BaseModel):
    """Immutable request body for a query endpoint."""

    model_config = ConfigDict(frozen=True)

    filters: FilterToken = Field(default_factory=FilterList, description="Filter tree; empty list means no filter.")
    fields: str = Field("", description="Comma-separated list of fields to select.")
    sort: str = Field("id", description="Field to sort on.")
    reverse: bool = Field(False, description="Sort in descending order.")
    results: int = Field(10, description="Number of results per page.")
    page: int = Field(1, description="Page number, starting at 1.")
    user: Optional[str] = Field(None, description="User scope; omitted from the payload when unset.")
    count: bool = Field(False, description="Ask for the total number of matching entries.")
    compact_filters: bool = Field(False, description="Ask the server to echo the filters in compact form.")
    normalized_filters: bool = Field(False, description="Ask the server to echo the normalized filter tree.")

    @field_validator("filters", mode="before")
    @classmethod
    def convert_filters(cls, value: Any) -> FilterToken:
        return to_filters(value)

    @classmethod
    def builder(cls) -> "QueryFormatBuilder":
        return QueryFormatBuilder()

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready request body.

        `user` is the only optional field and is dropped entirely when unset.
        The filter tree is encoded by `encode_filter`, which handles any depth.
        """
        payload = {"filters": encode_filter(self.filters)}
        payload.update(self.model_dump(mode="json", exclude={"filters"}, exclude_none=True))
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_payload(), ensure_ascii=False, separators=(",", ":"))


class QueryFormatBuilder:
    """Chaining builder for `QueryFormat`.

    Every setter returns the builder. Fields that are never set keep the
    `QueryFormat` defaults. `build()` consumes the builder: any further call
    raises `BuilderConsumedError`.
    """

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        self._consumed = False

    def _check_open(self, name: str) -> None:
        if self._consumed:
            raise BuilderConsumedError("Query builder already consumed by build()", field=name)

    def _set(self, name: str, value: Any) -> "QueryFormatBuilder":
        self._check_open(name)
        self._values[name] = value
        return self

    def filters(self, value: Any) -> "QueryFormatBuilder":
        self._check_open("filters")
        return self._set("filters", to_filters(value))

    def fields(self, value: str) -> "QueryFormatBuilder":
        return self._set("fields", value)

    def sort(self, value: str) -> "QueryFormatBuilder":
        return self._set("sort", value)

    def reverse(self, value: bool = True) -> "QueryFormatBuilder":
        return self._set("reverse", value)

    def results(self, value: int) -> "QueryFormatBuilder":
        return self._set("results", value)

    def page(self, value: int) -> "QueryFormatBuilder":
        return self._set("page", value)

    def user(self, value: str) -> "QueryFormatBuilder":
        return self._set("user", value)

    def count(self, value: bool = True) -> "QueryFormatBuilder":
        return self._set("count", value)

    def compact_filters(self, value: bool = True) -> "QueryFormatBuilder":
        return self._set("compact_filters", value)

    def normalized_filters(self, value: bool = True) -> "QueryFormatBuilder":
        return self._set("normalized_filters", value)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def build(self) -> QueryFormat:
        if self._consumed:
            raise BuilderConsumedError("Query builder already consumed by build()")
        self._consumed = True
        return QueryFormat(**self._values)
