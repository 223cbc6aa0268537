"""Hits and tracks from the cosmic-ray tagger, and their matches to TPC tracks."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN
from cafrecord.vector import Vector3D

_INT_MIN = -(2**31)


@dataclass
class CRTHit:
    """A hit in the cosmic-ray tagger; positions in cm, times in us."""

    position: Vector3D = field(default_factory=Vector3D)
    position_err: Vector3D = field(default_factory=Vector3D)
    time: float = SIGNALING_NAN
    t0: float = SIGNALING_NAN
    t1: float = SIGNALING_NAN
    pe: float = SIGNALING_NAN
    plane: int = _INT_MIN


@dataclass
class CRTHitMatch:
    """Match between a TPC track and a CRT hit; distance in cm."""

    hit: CRTHit = field(default_factory=CRTHit)
    distance: float = SIGNALING_NAN


@dataclass
class CRTTrack:
    """A CRT track made from two hits."""

    hita: CRTHit = field(default_factory=CRTHit)
    hitb: CRTHit = field(default_factory=CRTHit)
    time: float = SIGNALING_NAN


@dataclass
class CRTTrackMatch:
    """Match between a TPC track and a CRT track; time in us, angle in rad."""

    time: float = SIGNALING_NAN
    angle: float = SIGNALING_NAN