from __future__ import annotations

import logging
import platform
from pathlib import Path
from typing import Dict, List, Optional

import psutil

from hwid.shared.models.hardware import CpuInfo, DiskInfo, HardwareSnapshot, RamInfo


logger = logging.getLogger("hwid.probe")

_PROBE_ERRORS = (OSError, RuntimeError, psutil.Error)

_SKIP_OPTS = {"removable", "cdrom"}
_SKIP_FSTYPES = {"squashfs", "iso9660", "udf"}
_SKIP_DEVICE_PREFIXES = ("/dev/loop",)

# /sys/block/<dev>/size is always in 512-byte sectors
_SECTOR_BYTES = 512


def _read_cpuinfo(path: Path) -> Dict[str, str]:
    """First processor block of /proc/cpuinfo as a dict (empty when unavailable)."""
    fields: Dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    if fields:
                        break
                    continue
                key, sep, value = line.partition(":")
                if sep:
                    fields.setdefault(key.strip(), value.strip())
    except OSError:
        return {}
    return fields


def _whole_disk(device: str, sys_block: Path) -> Optional[Path]:
    """sysfs directory of the disk holding ``device``; None when sysfs has no entry."""
    if not device.startswith("/dev/"):
        return None
    block = sys_block / Path(device).name
    if not block.exists():
        return None
    if (block / "partition").exists():
        return block.resolve().parent
    return block


def _is_removable(disk: Path) -> bool:
    try:
        return (disk / "removable").read_text(encoding="utf-8").strip() == "1"
    except OSError:
        return False


class PsutilProbe:
    """Reads CPU, RAM and non-removable disk values from the running host."""

    def __init__(
        self,
        cpuinfo_path: Path = Path("/proc/cpuinfo"),
        sys_block: Path = Path("/sys/class/block"),
    ) -> None:
        self._cpuinfo_path = cpuinfo_path
        self._sys_block = sys_block

    def snapshot(self) -> HardwareSnapshot:
        return HardwareSnapshot(cpu=self._cpu(), ram=self._ram(), disks=self._disks())

    def _cpu(self) -> CpuInfo:
        info = _read_cpuinfo(self._cpuinfo_path)
        brand = info.get("model name") or platform.processor() or None
        vendor = info.get("vendor_id")

        # rated maximum only; current clock varies between calls
        frequency: Optional[int] = None
        try:
            freq = psutil.cpu_freq()
            if freq is not None:
                frequency = int(freq.max) or None
        except _PROBE_ERRORS as e:
            logger.warning("CPU frequency unavailable: %s", e)

        cores: Optional[int] = None
        try:
            cores = psutil.cpu_count(logical=False)
        except _PROBE_ERRORS as e:
            logger.warning("CPU core count unavailable: %s", e)

        return CpuInfo(brand=brand, vendor=vendor, frequency_mhz=frequency, cores=cores)

    def _ram(self) -> RamInfo:
        try:
            return RamInfo(total_bytes=psutil.virtual_memory().total)
        except _PROBE_ERRORS as e:
            logger.warning("RAM total unavailable: %s", e)
            return RamInfo()

    def _disk_capacity(self, disk: Path) -> Optional[int]:
        try:
            return int((disk / "size").read_text(encoding="utf-8").strip()) * _SECTOR_BYTES
        except (OSError, ValueError) as e:
            logger.warning("Disk capacity unavailable for %s: %s", disk.name, e)
            return None

    def _disks(self) -> List[DiskInfo]:
        try:
            partitions = psutil.disk_partitions(all=False)
        except _PROBE_ERRORS as e:
            logger.warning("Disk enumeration failed: %s", e)
            return []

        disks: List[DiskInfo] = []
        seen: set[str] = set()
        for part in partitions:
            if not part.device:
                continue
            opts = {opt.strip() for opt in (part.opts or "").split(",")}
            if opts & _SKIP_OPTS or part.fstype in _SKIP_FSTYPES:
                continue
            if part.device.startswith(_SKIP_DEVICE_PREFIXES):
                continue

            disk = _whole_disk(part.device, self._sys_block)
            device = f"/dev/{disk.name}" if disk is not None else part.device
            if device in seen:
                continue
            if disk is not None and _is_removable(disk):
                continue
            seen.add(device)

            total: Optional[int]
            if disk is not None:
                total = self._disk_capacity(disk)
            else:
                # no sysfs entry, e.g. non-Linux hosts
                try:
                    total = psutil.disk_usage(part.mountpoint).total
                except _PROBE_ERRORS as e:
                    logger.warning("Disk capacity unavailable for %s: %s", device, e)
                    total = None
            disks.append(DiskInfo(device=device, total_bytes=total))
        return disks
