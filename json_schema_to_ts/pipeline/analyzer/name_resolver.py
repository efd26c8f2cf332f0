"""
Name resolver for declarations derived from schema context.

Anonymous nested schemas get their declaration name from the property
they sit in: arrays name their elements after themselves, singularized,
and objects are named after their capitalized key.
"""

from __future__ import annotations

import re

import inflection

# Suffixes marking a collection name, replaced by "Item" for the element
COLLECTION_SUFFIXES = ("List", "Array")

ITEM_SUFFIX = "Item"

# Words of a file stem, splitting on camelCase boundaries too
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")


def is_plural(name: str) -> bool:
    """A name is plural when singularizing it changes it ("users" yes, "address" no)."""
    return bool(name) and inflection.singularize(name) != name


def derive_plural_singular(name: str) -> str:
    """Name the element of a collection called `name`.

    Examples:
        "users" -> "user"
        "categories" -> "category"
        "user" -> "userItem"
        "address" -> "addressItem"
        "UserList" -> "UserItem"

    Args:
        name: The collection name (array key or root name)

    Returns:
        The singular form if `name` is a plural noun, otherwise the name
        with its collection suffix replaced by (or extended with) "Item"
    """
    if not name:
        return ITEM_SUFFIX

    if is_plural(name):
        return inflection.singularize(name)

    for suffix in COLLECTION_SUFFIXES:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)] + ITEM_SUFFIX

    return name + ITEM_SUFFIX


def capitalize_first(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched ("userItem" -> "UserItem")."""
    return name[:1].upper() + name[1:]


def to_pascal_case(text: str) -> str:
    """Convert a file stem such as "user_list" or "user-list" to "UserList"."""
    words = _WORD_PATTERN.findall(text.replace("_", " ").replace("-", " "))
    return "".join(capitalize_first(word) for word in words)
