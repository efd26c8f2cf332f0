"""
Deduplication of declarations sharing a name.

Anonymous schemas that occur more than once (the same array item shape
under two properties, for instance) are compiled once per occurrence and
end up with the same derived name. Only the last emitted occurrence is
kept. Field contents are not compared: two different shapes that happen
to derive the same name collapse as well.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from .ir_nodes import Declaration

logger = logging.getLogger(__name__)


def deduplicate(declarations: Sequence[Declaration]) -> list[Declaration]:
    """
    Collapse declarations with the same identity key down to the last one.

    Args:
        declarations: Declarations in emission order

    Returns:
        A new list in the same relative order, at most one declaration per key
    """
    counts = Counter(declaration.identity_key for declaration in declarations)
    to_remove = {key: count - 1 for key, count in counts.items() if count > 1}

    result = []
    for declaration in declarations:
        key = declaration.identity_key
        if to_remove.get(key, 0) > 0:
            to_remove[key] -= 1
            logger.debug("Dropping duplicate declaration %s", key)
            continue
        result.append(declaration)

    return result
