# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Path-based access into decoded JSON documents.

Paths use JSON Pointer syntax (RFC 6901): ``""`` is the whole document,
``/data/search/nodes`` walks object keys, and numeric segments index arrays.
Every accessor either returns the requested value or raises a
:class:`NavigationError` naming the path that failed.
"""

from typing import Any, List

from review_request_status.exceptions import NotFound, TypeMismatch


def _unescape(segment: str) -> str:
    # ~1 must be handled before ~0 so that "~01" becomes "~1" and not "/"
    return segment.replace('~1', '/').replace('~0', '~')


def _parse_index(segment: str) -> int:
    """Return the array index for a segment, or -1 if it is not a valid index."""
    if not segment.isdigit() or not segment.isascii():
        return -1
    if len(segment) > 1 and segment.startswith('0'):
        return -1
    return int(segment)


def kind_of(value: Any) -> str:
    """Name the JSON kind of a decoded value."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__


def resolve(document: Any, path: str) -> Any:
    """Return the node at ``path`` without checking its kind.

    Raises:
        NotFound: a key is missing, an index is out of range or not a number,
            the walk reaches a scalar, or ``path`` is not a valid pointer.
    """
    if path == '':
        return document
    if not path.startswith('/'):
        raise NotFound(path)

    node = document
    for raw_segment in path.split('/')[1:]:
        segment = _unescape(raw_segment)
        if isinstance(node, dict):
            if segment not in node:
                raise NotFound(path)
            node = node[segment]
        elif isinstance(node, list):
            index = _parse_index(segment)
            if index < 0 or index >= len(node):
                raise NotFound(path)
            node = node[index]
        else:
            raise NotFound(path)
    return node


def get_string(document: Any, path: str) -> str:
    """Return the string at ``path``, raising TypeMismatch for any other kind."""
    value = resolve(document, path)
    if not isinstance(value, str):
        raise TypeMismatch(path, 'a string', kind_of(value))
    return value


def get_array(document: Any, path: str) -> List[Any]:
    """Return the array at ``path``, raising TypeMismatch for any other kind."""
    value = resolve(document, path)
    if not isinstance(value, list):
        raise TypeMismatch(path, 'an array', kind_of(value))
    return value
