"""Short stub tracks near the vertex, with their per-plane hits."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN, Plane
from cafrecord.matching import TrackTruth
from cafrecord.vector import Vector3D


@dataclass
class StubHit:
    """One hit on a stub; charge is calibrated and lifetime-corrected [electrons]."""

    charge: float = SIGNALING_NAN
    wire: int = -1
    ontrack: bool = False


@dataclass
class StubPlane:
    """A stub as seen on one wire plane."""

    p: Plane = Plane.UNKNOWN
    pitch: float = SIGNALING_NAN
    trkpitch: float = SIGNALING_NAN
    vtx_w: float = SIGNALING_NAN
    hit_w: int = -1
    hits: list[StubHit] = field(default_factory=list)


@dataclass
class Stub:
    """A stub: endpoints, per-plane views, electric field and truth.

    ``pfpid`` is -1 when no particle overlays the stub.
    """

    vtx: Vector3D = field(default_factory=Vector3D)
    end: Vector3D = field(default_factory=Vector3D)
    planes: list[StubPlane] = field(default_factory=list)
    efield_vtx: float = SIGNALING_NAN
    efield_end: float = SIGNALING_NAN
    pfpid: int = -1
    truth: TrackTruth = field(default_factory=TrackTruth)