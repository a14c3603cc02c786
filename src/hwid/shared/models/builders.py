"""Chainable accumulators over the identifier dataclasses.

    cpu = CategoryBuilder().name(CategoryTag.CPU).add("vendor", "intel").build()
    fp = FingerprintBuilder().name("HWID").add(cpu).build()

build() returns the same object that direct construction plus append()/
add_category() would, in the same order.
"""

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from hwid.shared.errors import HwidError
from hwid.shared.models.categories import CategoryTag
from hwid.shared.models.identifier import Category, Fingerprint


class CategoryBuilder:
    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._pairs: List[Tuple[str, str]] = []

    def name(self, name: Union[str, CategoryTag]) -> "CategoryBuilder":
        self._name = name.value if isinstance(name, CategoryTag) else name
        return self

    def add(self, key: str, value: str) -> "CategoryBuilder":
        self._pairs.append((key, value))
        return self

    def build(self) -> Category:
        if self._name is None:
            raise HwidError("missing_name", "CategoryBuilder.build() called before name()")
        category = Category(self._name)
        for key, value in self._pairs:
            category.append(key, value)
        return category


class FingerprintBuilder:
    def __init__(self) -> None:
        self._label: Optional[str] = None
        self._categories: List[Category] = []

    def name(self, label: Optional[str]) -> "FingerprintBuilder":
        self._label = label
        return self

    def add(self, category: Category) -> "FingerprintBuilder":
        self._categories.append(category)
        return self

    def build(self) -> Fingerprint:
        fingerprint = Fingerprint(self._label)
        for category in self._categories:
            fingerprint.add_category(category)
        return fingerprint
