"""
Raw hardware values as reported by a system probe.

Every field is optional: a probe that could not read a value leaves it
unset and the matching attribute is simply omitted.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


Pairs = List[Tuple[str, str]]


def _normalize_text(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip().lower()
    return text or None


def _pairs(**values: object) -> Pairs:
    return [(key, str(value)) for key, value in values.items() if value is not None]


class HardwareModel(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class CpuInfo(HardwareModel):
    brand: Optional[str] = None
    vendor: Optional[str] = None
    frequency_mhz: Optional[int] = Field(default=None, ge=0)
    cores: Optional[int] = Field(default=None, ge=0)

    @field_validator("brand", "vendor", mode="before")
    @classmethod
    def _text(cls, value: object) -> Optional[str]:
        return _normalize_text(value)

    def to_attributes(self) -> Pairs:
        return _pairs(
            brand=self.brand,
            vendor=self.vendor,
            frequency=self.frequency_mhz,
            cores=self.cores,
        )


class RamInfo(HardwareModel):
    total_bytes: Optional[int] = Field(default=None, ge=0)

    def to_attributes(self) -> Pairs:
        return _pairs(total=self.total_bytes)


class DiskInfo(HardwareModel):
    device: Optional[str] = None
    total_bytes: Optional[int] = Field(default=None, ge=0)

    @field_validator("device", mode="before")
    @classmethod
    def _text(cls, value: object) -> Optional[str]:
        return _normalize_text(value)

    def to_attributes(self) -> Pairs:
        # device names are unstable across reboots; only capacity is encoded
        return _pairs(total=self.total_bytes)


class HardwareSnapshot(HardwareModel):
    cpu: CpuInfo = Field(default_factory=CpuInfo)
    ram: RamInfo = Field(default_factory=RamInfo)
    disks: List[DiskInfo] = Field(default_factory=list)
