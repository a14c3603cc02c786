from __future__ import annotations

import pytest
from pydantic import ValidationError

from hwid.shared.models.hardware import CpuInfo, DiskInfo, HardwareSnapshot, RamInfo


def test_cpu_info_normalizes_text() -> None:
    cpu = CpuInfo(brand="  Intel(R) Xeon(R) CPU E5-2670  ", vendor="GenuineIntel", frequency_mhz=2600, cores=8)
    assert cpu.brand == "intel(r) xeon(r) cpu e5-2670"
    assert cpu.vendor == "genuineintel"
    assert cpu.to_attributes() == [
        ("brand", "intel(r) xeon(r) cpu e5-2670"),
        ("vendor", "genuineintel"),
        ("frequency", "2600"),
        ("cores", "8"),
    ]


def test_missing_values_are_skipped() -> None:
    assert CpuInfo(brand="   ", cores=4).to_attributes() == [("cores", "4")]
    assert RamInfo().to_attributes() == []
    assert DiskInfo(device="/dev/sda").to_attributes() == []


def test_disk_encodes_capacity_only() -> None:
    assert DiskInfo(device="/dev/SDA", total_bytes=512110190592).to_attributes() == [("total", "512110190592")]


def test_snapshot_defaults_and_validation() -> None:
    snapshot = HardwareSnapshot()
    assert snapshot.cpu == CpuInfo()
    assert snapshot.disks == []

    with pytest.raises(ValidationError):
        HardwareSnapshot.model_validate({"ram": {"total_bytes": -1}})
    with pytest.raises(ValidationError):
        HardwareSnapshot.model_validate({"gpu": {}})
