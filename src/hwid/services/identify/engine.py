from __future__ import annotations

import logging
from typing import Iterable, Optional

from hwid.services.identify.config import IdentifyConfig
from hwid.services.probe.base import SystemProbe
from hwid.services.probe.psutil_probe import PsutilProbe
from hwid.shared.models.builders import CategoryBuilder, FingerprintBuilder
from hwid.shared.models.categories import CategoryTag
from hwid.shared.models.hardware import HardwareSnapshot, Pairs
from hwid.shared.models.identifier import Category, Fingerprint


logger = logging.getLogger("hwid.identify")


def _category(tag: CategoryTag, pairs: Pairs) -> Category:
    builder = CategoryBuilder().name(tag)
    for key, value in pairs:
        builder.add(key, value)
    return builder.build()


def build_fingerprint(
    snapshot: HardwareSnapshot,
    *,
    label: Optional[str],
    categories: Iterable[CategoryTag],
) -> Fingerprint:
    """One category per enabled tag, in the given order; DISK repeats per disk."""
    builder = FingerprintBuilder().name(label)
    for tag in categories:
        if tag is CategoryTag.CPU:
            builder.add(_category(tag, snapshot.cpu.to_attributes()))
        elif tag is CategoryTag.RAM:
            builder.add(_category(tag, snapshot.ram.to_attributes()))
        elif tag is CategoryTag.DISK:
            for disk in snapshot.disks:
                builder.add(_category(tag, disk.to_attributes()))
    return builder.build()


def identify(config: Optional[IdentifyConfig] = None, probe: Optional[SystemProbe] = None) -> str:
    cfg = config or IdentifyConfig()
    snapshot = (probe or PsutilProbe()).snapshot()
    fingerprint = build_fingerprint(snapshot, label=cfg.label, categories=cfg.categories)

    plaintext = fingerprint.render()
    logger.debug("Canonical hardware identifier: %s", plaintext)

    count = len(fingerprint.categories)
    if not cfg.apply_digest:
        logger.info("Hardware identifier built (plaintext, %d categories)", count)
        return plaintext
    logger.info("Hardware identifier built (sha3-512, %d categories)", count)
    return fingerprint.render(apply_digest=True)
