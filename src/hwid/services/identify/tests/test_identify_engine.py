from __future__ import annotations

import logging

import pytest

from hwid.services.identify.config import IdentifyConfig
from hwid.services.identify.engine import build_fingerprint, identify
from hwid.services.probe.static_probe import StaticProbe
from hwid.shared.encoding.digest import digest_hex, is_digest
from hwid.shared.models.categories import CategoryTag
from hwid.shared.models.hardware import HardwareSnapshot

ALL = (CategoryTag.CPU, CategoryTag.RAM, CategoryTag.DISK)

PAYLOAD = {
    "cpu": {"brand": "Xeon E5-2670", "vendor": "GenuineIntel", "frequency_mhz": 2600, "cores": 8},
    "ram": {"total_bytes": 17179869184},
    "disks": [
        {"device": "/dev/sda", "total_bytes": 512110190592},
        {"device": "/dev/sdb", "total_bytes": 1000204886016},
    ],
}
PLAINTEXT = (
    "HWID[CPU(brand=xeon e5-2670, vendor=genuineintel, frequency=2600, cores=8), "
    "RAM(total=17179869184), "
    "DISK(total=512110190592), DISK(total=1000204886016)]"
)


def test_build_fingerprint_all_categories() -> None:
    snapshot = StaticProbe(PAYLOAD).snapshot()
    fingerprint = build_fingerprint(snapshot, label="HWID", categories=ALL)
    assert [c.name for c in fingerprint.categories] == ["CPU", "RAM", "DISK", "DISK"]
    assert fingerprint.render() == PLAINTEXT


def test_build_fingerprint_follows_configured_order() -> None:
    snapshot = StaticProbe(PAYLOAD).snapshot()
    fingerprint = build_fingerprint(snapshot, label=None, categories=[CategoryTag.RAM, CategoryTag.CPU])
    assert fingerprint.render().startswith("[RAM(total=17179869184), CPU(")


def test_build_fingerprint_partial_data() -> None:
    fingerprint = build_fingerprint(HardwareSnapshot(), label="HWID", categories=ALL)
    assert fingerprint.render() == "HWID[CPU(), RAM()]"


def test_build_fingerprint_no_categories() -> None:
    snapshot = StaticProbe(PAYLOAD).snapshot()
    assert build_fingerprint(snapshot, label="HWID", categories=[]).render() == "HWID[]"


def test_identify_plaintext(caplog: pytest.LogCaptureFixture) -> None:
    cfg = IdentifyConfig(label="HWID", apply_digest=False, categories=ALL)
    with caplog.at_level(logging.DEBUG, logger="hwid.identify"):
        result = identify(cfg, StaticProbe(PAYLOAD))
    assert result == PLAINTEXT
    assert any("plaintext" in r.getMessage() for r in caplog.records)


def test_identify_hashed_is_stable() -> None:
    cfg = IdentifyConfig(label="HWID", apply_digest=True, categories=ALL)
    first = identify(cfg, StaticProbe(PAYLOAD))
    assert is_digest(first)
    assert first == digest_hex(PLAINTEXT)
    assert identify(cfg, StaticProbe(PAYLOAD)) == first


def test_identify_hash_changes_with_hardware() -> None:
    cfg = IdentifyConfig(label="HWID", apply_digest=True, categories=ALL)
    changed = dict(PAYLOAD, ram={"total_bytes": 8589934592})
    assert identify(cfg, StaticProbe(PAYLOAD)) != identify(cfg, StaticProbe(changed))
