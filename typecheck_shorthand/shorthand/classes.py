"""
Registry of native classes reachable through the `instanceof` keyword.

Shorthand tokens such as "date" or "buffer?" do not map to a JSON type;
they compile to `{"instanceof": "date"}` and the validator checks class
membership at runtime. The keyword parameter carries its own nullability
marker, so "date?" accepts None while "date" does not.

Registered names:
    buffer    bytes, bytearray, memoryview
    regexp    compiled regular expressions (re.Pattern)
    function  any callable
    date      datetime.date (and therefore datetime.datetime)
"""

import datetime
import re
from collections.abc import Callable
from types import MappingProxyType
from typing import Mapping, Tuple

from typecheck_shorthand.errors import UnknownClassReference

CLASSES: Mapping[str, Tuple[type, ...]] = MappingProxyType({
    "buffer": (bytes, bytearray, memoryview),
    "regexp": (re.Pattern,),
    "function": (Callable,),
    "date": (datetime.date,),
})

_PARAMETER = re.compile(r"^([a-z]+)(\?)?$")


def is_class_name(name: str) -> bool:
    """Return True if `name` (already lower-cased) is a registered class."""
    return name in CLASSES


def lookup_class(param: str) -> Tuple[Tuple[type, ...], bool]:
    """
    Decode an `instanceof` parameter.

    Args:
        param: Keyword parameter, "<name>" or "<name>?"

    Returns:
        Tuple of (classes to check against, whether None is accepted)

    Raises:
        UnknownClassReference: If the parameter is malformed or the name
            is not registered

    Example:
        ```python
        lookup_class("date?")   # ((datetime.date,), True)
        lookup_class("promise") # raises UnknownClassReference
        ```
    """
    match = _PARAMETER.match(param) if isinstance(param, str) else None
    if match is None or match.group(1) not in CLASSES:
        raise UnknownClassReference(param)

    return CLASSES[match.group(1)], match.group(2) is not None
