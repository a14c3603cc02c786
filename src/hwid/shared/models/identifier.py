"""
Hardware identifier tree: Fingerprint -> Category -> Attribute.

Rendering is delegated to hwid.shared.encoding.canonical; hashing to
hwid.shared.encoding.digest. Nothing here talks to the operating system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from hwid.shared.encoding.canonical import (
    render_attribute,
    render_category,
    render_fingerprint,
)
from hwid.shared.encoding.digest import digest_hex
from hwid.shared.models.categories import CategoryTag
from hwid.shared.models.validators import find_reserved_delimiters, is_unambiguous


logger = logging.getLogger("hwid.identifier")


@dataclass(frozen=True, slots=True)
class Attribute:
    key: str
    value: str

    def __post_init__(self) -> None:
        for part in (self.key, self.value):
            found = find_reserved_delimiters(part)
            if found:
                logger.warning(
                    "Attribute %r=%r contains reserved delimiters %s",
                    self.key,
                    self.value,
                    found,
                )
                break

    def render(self) -> str:
        return render_attribute(self)


@dataclass(slots=True)
class Category:
    name: str
    attributes: List[Attribute] = field(default_factory=list)

    @classmethod
    def from_tag(cls, tag: CategoryTag) -> "Category":
        return cls(name=tag.value)

    def append(self, key: str, value: str) -> "Category":
        self.attributes.append(Attribute(key, value))
        return self

    def render(self) -> str:
        return render_category(self)


@dataclass(slots=True)
class Fingerprint:
    label: Optional[str] = None
    categories: List[Category] = field(default_factory=list)

    def add_category(self, category: Category) -> "Fingerprint":
        self.categories.append(category)
        return self

    def render(self, apply_digest: bool = False) -> str:
        """Canonical plaintext form, or its SHA3-512 hex digest when ``apply_digest``."""
        plaintext = render_fingerprint(self)
        if not apply_digest:
            return plaintext
        return digest_hex(plaintext)

    def ambiguous_attributes(self) -> List[Tuple[Category, Attribute]]:
        """Attributes whose key or value would make the plaintext form ambiguous."""
        out: List[Tuple[Category, Attribute]] = []
        for category in self.categories:
            for attribute in category.attributes:
                if not (is_unambiguous(attribute.key) and is_unambiguous(attribute.value)):
                    out.append((category, attribute))
        return out
