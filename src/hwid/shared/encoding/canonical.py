"""
Canonical plaintext encoding of a hardware identifier tree.

    Attribute   -> key=value
    Category    -> NAME(k=v, k=v)
    Fingerprint -> LABEL[CPU(k=v), RAM(k=v)]

Order is taken verbatim from the tree. Nothing is sorted and nothing is
escaped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hwid.shared.models.identifier import Attribute, Category, Fingerprint

SEPARATOR = ", "


def render_attribute(attribute: "Attribute") -> str:
    return f"{attribute.key}={attribute.value}"


def render_category(category: "Category") -> str:
    body = SEPARATOR.join(render_attribute(a) for a in category.attributes)
    return f"{category.name}({body})"


def render_fingerprint(fingerprint: "Fingerprint") -> str:
    body = SEPARATOR.join(render_category(c) for c in fingerprint.categories)
    return f"{fingerprint.label or ''}[{body}]"
