"""
Typed access to the fields of a decoded bencode dictionary.

A decoded tree only ever contains four kinds of node: ``bytes``, ``int``,
``list`` and ``dict`` with ``bytes`` keys. The coercions below check one node
against the type a metainfo field needs and raise a ``FieldTypeError`` naming
the field when it does not fit.
"""

from typing import Callable, TypeVar
from torrentmeta.torrent.errors import (
    FieldTypeError,
    MissingField,
    NotADict,
    NotAList,
    NotANumber,
    NotAString,
    NotAStringList,
)
import logging

logger = logging.getLogger(__name__)

Node = bytes | int | list | dict
T = TypeVar("T")
Coercion = Callable[[Node, str], T]


def node_kind(node: Node) -> str:
    match node:
        case bytes() | bytearray():
            return "a byte string"
        case int():
            return "an integer"
        case list():
            return "a list"
        case dict():
            return "a dictionary"
        case _:
            return f"an unexpected {type(node).__name__}"


def _as_unsigned(node: Node, key: str, bits: int) -> int:
    match node:
        case bool():
            raise NotANumber(key, "found a boolean")
        case int() if 0 <= node < (1 << bits):
            return node
        case int():
            raise NotANumber(key, f"{node} does not fit in an unsigned {bits}-bit integer")
        case _:
            raise NotANumber(key, f"found {node_kind(node)}")


def as_u64(node: Node, key: str) -> int:
    return _as_unsigned(node, key, 64)


def as_u8(node: Node, key: str) -> int:
    return _as_unsigned(node, key, 8)


def as_string(node: Node, key: str) -> str:
    match node:
        case bytes() | bytearray():
            try:
                return bytes(node).decode("utf-8")
            except UnicodeDecodeError as e:
                raise NotAString(key, f"invalid UTF-8 ({e.reason})") from e
        case _:
            raise NotAString(key, f"found {node_kind(node)}")


def as_list(node: Node, key: str) -> list:
    match node:
        case list():
            return node
        case _:
            raise NotAList(key, f"found {node_kind(node)}")


def as_dict(node: Node, key: str) -> dict:
    match node:
        case dict():
            return node
        case _:
            raise NotADict(key, node_kind(node))


def as_string_list(node: Node, key: str) -> tuple[str, ...]:
    if not isinstance(node, list):
        raise NotAStringList(key, f"found {node_kind(node)}")
    items = []
    for i, item in enumerate(node):
        try:
            items.append(as_string(item, key))
        except NotAString as e:
            raise NotAStringList(key, f"element {i}: {e.reason}") from e
    return tuple(items)


def require(
    node: dict, key: str, missing: type[MissingField], coerce: Coercion[T]
) -> T:
    """
    Look up a required field and coerce it.

    Raises ``missing`` when the key is absent; coercion errors propagate.
    """
    try:
        child = node[key.encode("utf-8")]
    except KeyError:
        raise missing() from None
    return coerce(child, key)


def optional(node: dict, key: str, coerce: Coercion[T]) -> T | None:
    """
    Look up an optional field and coerce it.

    Absent and malformed values are treated the same way: both give ``None``.
    """
    child = node.get(key.encode("utf-8"))
    if child is None:
        return None
    try:
        return coerce(child, key)
    except FieldTypeError as e:
        logger.debug(f"Ignoring malformed optional field: {e}")
        return None
