"""GraphQL name validation.

See http://facebook.github.io/graphql/October2016/#sec-Names
"""

import re

from .errors import FIELD_NAME, InvalidNameError

_NAME_RE = re.compile(r"[_A-Za-z][_0-9A-Za-z]*")


def is_valid_name(name: str) -> bool:
    """Check whether ``name`` matches the GraphQL name grammar (ASCII only)."""
    return isinstance(name, str) and _NAME_RE.fullmatch(name) is not None


def validate_name(name: str, kind: str = FIELD_NAME, *, short: bool = False) -> None:
    """Raise InvalidNameError unless ``name`` is a valid GraphQL name."""
    if not is_valid_name(name):
        raise InvalidNameError(name, kind, short=short)
