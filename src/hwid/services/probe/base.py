from __future__ import annotations

from typing import Protocol

from hwid.shared.models.hardware import HardwareSnapshot


class SystemProbe(Protocol):
    def snapshot(self) -> HardwareSnapshot: ...
