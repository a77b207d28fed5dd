"""
libvndb: client library for the VNDB Kana API.

Exposes the async `VndbClient`, the query envelope and the filter token
model for easy access.
"""

from .client import VndbClient
from .exceptions import (
    BuilderConsumedError,
    CredentialAbsentError,
    DecodeError,
    InvalidFilterError,
    TransportError,
    VndbError,
)
from .query import QueryFormat, QueryFormatBuilder
from .querydsl import Atom, FilterList, FilterToken, and_, cond, filter_items, or_, to_token
from .schema import AuthInfo, QueryResponse, UlistLabel, UserStat, VndbStats

__version__ = "0.2.0"

__all__ = [
    "VndbClient",
    "QueryFormat",
    "QueryFormatBuilder",
    "QueryResponse",
    "Atom",
    "FilterList",
    "FilterToken",
    "to_token",
    "filter_items",
    "cond",
    "and_",
    "or_",
    "VndbStats",
    "UserStat",
    "AuthInfo",
    "UlistLabel",
    "VndbError",
    "CredentialAbsentError",
    "TransportError",
    "DecodeError",
    "InvalidFilterError",
    "BuilderConsumedError",
]
