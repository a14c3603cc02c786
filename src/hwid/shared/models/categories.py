"""Enumerated hardware category tags."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Union

from hwid.shared.errors import UnknownCategoryError


class CategoryTag(str, Enum):
    CPU = "CPU"
    RAM = "RAM"
    DISK = "DISK"


def parse_category_tag(name: str) -> CategoryTag:
    """Map a category name to its tag, e.g. ``" cpu "`` -> ``CategoryTag.CPU``.

    Raises UnknownCategoryError for anything else.
    """
    if isinstance(name, CategoryTag):
        return name
    key = str(name).strip().upper()
    try:
        return CategoryTag[key]
    except KeyError:
        raise UnknownCategoryError(str(name)) from None


def parse_category_tags(raw: Union[str, Iterable[str]]) -> List[CategoryTag]:
    items = raw.split(",") if isinstance(raw, str) else list(raw)
    tags: List[CategoryTag] = []
    for item in items:
        if isinstance(item, str) and not item.strip():
            continue
        tag = parse_category_tag(item)
        if tag not in tags:
            tags.append(tag)
    return tags
