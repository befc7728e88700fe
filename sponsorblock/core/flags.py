"""Query-string encoding for flag sets and string arrays.

The API takes array parameters as JSON-style lists embedded directly in the
query string (``categories=["sponsor","intro"]``), not as repeated keys.
"""

import json
from collections.abc import Callable, Iterable
from enum import Flag
from typing import TypeVar

F = TypeVar("F", bound=Flag)


def to_url_array(values: Iterable[str]) -> str:
    """
    Encode strings as a JSON-style array for use as a query value.

    Args:
        values: Strings to encode, in the order they should appear

    Returns:
        Compact array string, e.g. ``["a","b"]``. Empty input gives ``[]``.
    """
    return json.dumps(list(values), separators=(",", ":"))


def _is_single_bit(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def iter_set_flags(flags: F) -> list[F]:
    """
    List the single-bit members set in ``flags``.

    Order is always declaration order, so encoded requests are reproducible.
    Combination members (``NONE``, ``ALL``) are never returned.
    """
    flag_type = type(flags)
    return [
        member
        for member in flag_type.__members__.values()
        if _is_single_bit(member.value) and member in flags
    ]


def flags_to_url_value(flags: F, token_of: Callable[[F], str]) -> str:
    """
    Encode a flag set as the API's array-of-tokens query value.

    Args:
        flags: Accepted values
        token_of: Maps a single-bit member to its wire token

    Returns:
        Array string such as ``["sponsor","poi_highlight"]``
    """
    return to_url_array(token_of(member) for member in iter_set_flags(flags))
