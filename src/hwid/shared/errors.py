from __future__ import annotations


class HwidError(Exception):
    """Base error for hardware identifier construction."""

    def __init__(self, error_code: str, message: str):
        super().__init__(message)
        self.error_code = error_code
        self.message = message


class UnknownCategoryError(HwidError):
    """Category name does not map to a known CategoryTag."""

    def __init__(self, tag: str):
        super().__init__("unknown_category", f"Unknown hardware category: {tag!r}")
        self.tag = tag


class ProbeError(HwidError):
    """System probe returned data that cannot be used."""
