"""Conversion of Python literals into filter tokens.

Typical usage:

- Single token: `to_token("en")`, `to_token(42)`
- Whole expression: `to_token(["lang", "=", "en"])`
- Variadic form: `filter_items("and", ["lang", "=", "en"], ["votecount", ">=", 100])`
- Combinators: `and_(cond("lang", "=", "en"), cond("olang", "!=", "ja"))`
"""

from collections.abc import Iterable, Mapping, Set
from numbers import Number
from typing import Any

from ..exceptions import InvalidFilterError
from .tokens import Atom, FilterList, FilterToken, render_scalar

__all__ = ("to_token", "to_filters", "filter_items", "cond", "and_", "or_")


def to_token(value: Any) -> FilterToken:
    """Convert a literal or an ordered iterable into a filter token.

    - `Atom`/`FilterList` values are returned unchanged.
    - Strings, booleans and numbers become atoms (see `render_scalar`).
    - Lists, tuples, generators and other ordered iterables become lists
      of recursively converted items, in input order.

    Raises:
        InvalidFilterError: for None, bytes, mappings, sets and other objects
    """
    if isinstance(value, (Atom, FilterList)):
        return value
    if isinstance(value, (str, Number)):
        return Atom(render_scalar(value))
    if value is None or isinstance(value, (bytes, bytearray, Mapping, Set)):
        raise InvalidFilterError(
            "Unsupported filter value",
            value=value,
            type=type(value).__name__,
        )
    if isinstance(value, Iterable):
        return FilterList(tuple(to_token(item) for item in value))
    raise InvalidFilterError("Unsupported filter value", value=value, type=type(value).__name__)


def to_filters(value: Any) -> FilterToken:
    """Convert a top-level filter argument; None means "no filter"."""
    if value is None:
        return FilterList()
    return to_token(value)


def filter_items(*values: Any) -> FilterList:
    """Build a list token from positional values.

    `filter_items("id", "=", "v17")` is the same as `to_token(["id", "=", "v17"])`.
    """
    return FilterList(tuple(to_token(value) for value in values))


def cond(field: str, op: str, value: Any) -> FilterList:
    """Return a `[field, op, value]` comparison."""
    return filter_items(field, op, value)


def and_(*exprs: Any) -> FilterList:
    """Return `["and", *exprs]`."""
    return filter_items("and", *exprs)


def or_(*exprs: Any) -> FilterList:
    """Return `["or", *exprs]`."""
    return filter_items("or", *exprs)
