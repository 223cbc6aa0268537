"""Optical flashes: groups of photodetector hits judged to belong together."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN, UNINITIALIZED_INT
from cafrecord.vector import Vector3D

_TIME_PLACEHOLDER = -9999.0
_VALUE_PLACEHOLDER = -5.0
_INDEX_PLACEHOLDER = -5
_N_WALLS = 2


def _per_wall() -> list[float]:
    return [SIGNALING_NAN] * _N_WALLS


def _placeholder_vector() -> Vector3D:
    return Vector3D(_TIME_PLACEHOLDER, _TIME_PLACEHOLDER, _TIME_PLACEHOLDER)


@dataclass
class OpFlash:
    """An optical flash; times in us, positions in cm.

    ``cryo`` is 0 for SBND or the ICARUS east cryostat, 1 for ICARUS west.
    """

    onbeamtime: bool = False
    cryo: int = UNINITIALIZED_INT
    firstpmt: int = UNINITIALIZED_INT
    time: float = SIGNALING_NAN
    timewidth: float = SIGNALING_NAN
    timemean: float = SIGNALING_NAN
    timesd: float = SIGNALING_NAN
    firsttime: float = SIGNALING_NAN
    totalpe: float = SIGNALING_NAN
    fasttototal: float = SIGNALING_NAN
    peperwall: list[float] = field(default_factory=_per_wall)

    center: Vector3D = field(default_factory=Vector3D)
    width: Vector3D = field(default_factory=Vector3D)

    def set_default(self) -> None:
        """Fill every field with its placeholder value."""
        self.onbeamtime = False
        self.cryo = _INDEX_PLACEHOLDER
        self.firstpmt = _INDEX_PLACEHOLDER
        self.time = _TIME_PLACEHOLDER
        self.timewidth = _VALUE_PLACEHOLDER
        self.timemean = _TIME_PLACEHOLDER
        self.timesd = _VALUE_PLACEHOLDER
        self.firsttime = _TIME_PLACEHOLDER
        self.totalpe = _VALUE_PLACEHOLDER
        self.fasttototal = _VALUE_PLACEHOLDER
        self.peperwall = [_VALUE_PLACEHOLDER] * _N_WALLS

        self.center = _placeholder_vector()
        self.width = _placeholder_vector()