from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from hwid.shared.errors import ProbeError
from hwid.shared.models.hardware import HardwareSnapshot


class StaticProbe:
    """Probe that replays pre-gathered values instead of querying the OS."""

    def __init__(self, payload: Mapping[str, Any] | HardwareSnapshot) -> None:
        if isinstance(payload, HardwareSnapshot):
            self._snapshot = payload
            return
        try:
            self._snapshot = HardwareSnapshot.model_validate(dict(payload))
        except ValidationError as e:
            raise ProbeError("invalid_probe_payload", f"Invalid hardware payload: {e}") from e

    def snapshot(self) -> HardwareSnapshot:
        return self._snapshot.model_copy(deep=True)
