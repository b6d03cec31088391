"""Cycle detection for field graphs.

Fields reference their children directly, so nothing prevents a caller
from building a graph in which a field reaches itself. Rendering such a
graph would recurse forever; check_cycle rejects it first.
"""

import logging

from .errors import CyclicFieldError, NilFieldError

logger = logging.getLogger(__name__)

_DONE = object()


def check_cycle(root) -> None:
    """Walk the descendants of ``root`` depth-first.

    Nodes are tracked by identity on the active path only, so the same
    field may appear in several branches without being reported. The
    walk uses an explicit stack, so tree depth is not bounded by the
    interpreter's recursion limit.

    Raises:
        NilFieldError: If a child slot holds None
        CyclicFieldError: If a field is reachable from itself
    """
    if root is None:
        raise NilFieldError()

    on_path = {id(root)}
    stack = [(root, iter(root.fields))]
    while stack:
        node, children = stack[-1]
        child = next(children, _DONE)
        if child is _DONE:
            stack.pop()
            on_path.discard(id(node))
            continue
        if child is None:
            raise NilFieldError()
        if id(child) in on_path:
            logger.debug("Cycle detected at field %r", child.name)
            raise CyclicFieldError(child)
        on_path.add(id(child))
        stack.append((child, iter(child.fields)))
