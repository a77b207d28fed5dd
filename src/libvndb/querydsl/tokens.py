"""Filter token model.

VNDB filters are plain nested JSON arrays without any discriminant tag, e.g.
`["and", ["lang", "=", "en"], ["released", ">=", "2020-01-01"]]`. Position
alone gives meaning to each element, so the model only knows two shapes:

- `Atom`: a single textual token (field name, operator or literal value),
  encoded as a JSON string.
- `FilterList`: an ordered sequence of tokens, encoded as a JSON array.

Both are frozen pydantic root models, so equality is structural and values
are hashable. Decoding follows the shape of the JSON value: strings become
atoms, arrays become lists, anything else is rejected with `DecodeError`.
"""

import json
import math
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Iterator, List, Tuple, Union

from pydantic import ConfigDict, RootModel

from ..exceptions import DecodeError, InvalidFilterError

__all__ = (
    "Atom",
    "FilterList",
    "FilterToken",
    "JsonFilter",
    "decode_filter",
    "encode_filter",
    "loads_filter",
    "dumps_filter",
    "render_scalar",
)

JsonFilter = Union[str, List[Any]]


def render_scalar(value: Any) -> str:
    """Render a scalar literal the way the API expects it inside a filter.

    Strings are kept unchanged, booleans become `true`/`false` and numbers
    are written as plain positional decimals (never exponent notation).

    Raises:
        InvalidFilterError: for non-finite numbers and non-scalar values
    """
    if isinstance(value, str):
        return value
    # bool is an Integral too, so it must be checked first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Integral):
        return str(int(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidFilterError("Non-finite number in filter", value=value)
        return format(value, "f")
    if isinstance(value, Real):
        number = float(value)
        if not math.isfinite(number):
            raise InvalidFilterError("Non-finite number in filter", value=value)
        return format(Decimal(repr(number)), "f")
    raise InvalidFilterError("Unsupported filter literal", value=value, type=type(value).__name__)


class Atom(RootModel[str]):
    """Leaf token holding a single textual value."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, value: Any) -> "Atom":
        """Build an atom from any scalar literal (see `render_scalar`)."""
        return cls(render_scalar(value))

    @property
    def value(self) -> str:
        return self.root

    def __str__(self) -> str:
        return self.root

    def __repr__(self) -> str:
        return f"Atom({self.root!r})"


class FilterList(RootModel):
    """Ordered token sequence; the empty list means "no filter"."""

    model_config = ConfigDict(frozen=True)

    root: Tuple["FilterToken", ...] = ()

    def __iter__(self) -> Iterator["FilterToken"]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: Union[int, slice]) -> Union["FilterToken", "FilterList"]:
        if isinstance(index, slice):
            return FilterList(self.root[index])
        return self.root[index]

    def __and__(self, other: Any) -> "FilterList":
        """Return `["and", self, other]`."""
        from .convert import and_

        return and_(self, other)

    def __or__(self, other: Any) -> "FilterList":
        """Return `["or", self, other]`."""
        from .convert import or_

        return or_(self, other)

    def __repr__(self) -> str:
        return f"FilterList({encode_filter(self)!r})"


FilterToken = Union[Atom, FilterList]

FilterList.model_rebuild()


def encode_filter(token: FilterToken) -> JsonFilter:
    """Encode a token into its JSON value (a `str` or a nested `list`).

    The walk uses an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit or by pydantic's serializer.
    """
    if isinstance(token, Atom):
        return token.root
    result: List[Any] = []
    stack = [(iter(token.root), result)]
    while stack:
        children, out = stack[-1]
        for child in children:
            if isinstance(child, Atom):
                out.append(child.root)
            else:
                nested: List[Any] = []
                out.append(nested)
                stack.append((iter(child.root), nested))
                break
        else:
            stack.pop()
    return result


def dumps_filter(token: FilterToken) -> str:
    """Encode a token into compact JSON text."""
    return json.dumps(encode_filter(token), ensure_ascii=False, separators=(",", ":"))


def decode_filter(data: Any, path: str = "$") -> FilterToken:
    """Decode a JSON value into a filter token.

    Args:
        data: Value produced by a JSON parser
        path: JSON path of `data`, used in error details

    Raises:
        DecodeError: if any position holds something other than a string or an array
    """
    if isinstance(data, str):
        return Atom(data)
    if not isinstance(data, list):
        raise DecodeError(
            "Filter tokens must be JSON strings or arrays",
            path=path,
            type=_json_type_name(data),
        )
    # Each frame holds (source items, their path, decoded children so far).
    stack: List[Tuple[List[Any], str, List[FilterToken]]] = [(data, path, [])]
    while True:
        items, items_path, children = stack[-1]
        index = len(children)
        if index < len(items):
            item = items[index]
            item_path = f"{items_path}[{index}]"
            if isinstance(item, str):
                children.append(Atom(item))
            elif isinstance(item, list):
                stack.append((item, item_path, []))
            else:
                raise DecodeError(
                    "Filter tokens must be JSON strings or arrays",
                    path=item_path,
                    type=_json_type_name(item),
                )
            continue
        stack.pop()
        decoded = FilterList(tuple(children))
        if not stack:
            return decoded
        stack[-1][2].append(decoded)


def loads_filter(text: Union[str, bytes]) -> FilterToken:
    """Decode JSON text into a filter token.

    Raises:
        DecodeError: on invalid JSON text or an invalid token shape
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise DecodeError("Invalid JSON text", reason=str(e)) from e
    return decode_filter(data)


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
