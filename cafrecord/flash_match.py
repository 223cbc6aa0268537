"""Matching of TPC charge in a slice to an optical flash."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN
from cafrecord.vector import Vector3D

_PLACEHOLDER = -5.0
_SCALARS = (
    "time",
    "chargeQ",
    "lightPE",
    "score",
    "scoreY",
    "scoreZ",
    "scoreRR",
    "scoreRatio",
)


@dataclass
class FlashMatch:
    """A charge-to-light match; ``score`` is the sum of the metric terms."""

    present: bool = False
    time: float = SIGNALING_NAN
    chargeQ: float = SIGNALING_NAN
    chargeCenter: Vector3D = field(default_factory=Vector3D)
    lightPE: float = SIGNALING_NAN
    lightCenter: Vector3D = field(default_factory=Vector3D)
    score: float = SIGNALING_NAN
    scoreY: float = SIGNALING_NAN
    scoreZ: float = SIGNALING_NAN
    scoreRR: float = SIGNALING_NAN
    scoreRatio: float = SIGNALING_NAN

    def set_default(self) -> None:
        """Mark as absent and fill the scalars with placeholders; centres are kept."""
        self.present = False
        for name in _SCALARS:
            setattr(self, name, _PLACEHOLDER)