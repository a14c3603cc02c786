from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from hwid.shared.models.categories import CategoryTag, parse_category_tags


def _parse_bool_env(name: str, default: str) -> bool:
    raw = os.getenv(name)
    value = (raw if raw is not None else default).strip().lower()
    return value not in {"", "0", "false", "no", "off"}


def _label_env() -> Optional[str]:
    label = os.getenv("HWID_LABEL", "HWID")
    return label or None


@dataclass(frozen=True, slots=True)
class IdentifyConfig:
    label: Optional[str] = field(default_factory=_label_env)
    apply_digest: bool = field(default_factory=lambda: _parse_bool_env("HWID_APPLY_DIGEST", "1"))
    # Raises UnknownCategoryError on a bad HWID_CATEGORIES entry.
    categories: Tuple[CategoryTag, ...] = field(
        default_factory=lambda: tuple(parse_category_tags(os.getenv("HWID_CATEGORIES", "CPU,RAM,DISK")))
    )

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_config_path: Optional[str] = field(default_factory=lambda: os.getenv("LOG_CFG") or None)
