"""Filter DSL module.

Exports the filter token model (`Atom`, `FilterList`) together with the
helpers that build tokens from Python literals and move them to and from
their JSON wire form.
"""

from .convert import and_, cond, filter_items, or_, to_filters, to_token
from .tokens import (
    Atom,
    FilterList,
    FilterToken,
    JsonFilter,
    decode_filter,
    dumps_filter,
    encode_filter,
    loads_filter,
)

__all__ = (
    "Atom",
    "FilterList",
    "FilterToken",
    "JsonFilter",
    "and_",
    "cond",
    "decode_filter",
    "dumps_filter",
    "encode_filter",
    "filter_items",
    "loads_filter",
    "or_",
    "to_filters",
    "to_token",
)
