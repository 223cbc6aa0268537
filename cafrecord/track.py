"""Reconstructed tracks and their calorimetry."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.crt import CRTHitMatch, CRTTrackMatch
from cafrecord.enums import SIGNALING_NAN, Plane
from cafrecord.matching import TrackTruth
from cafrecord.pfp import PFP
from cafrecord.track_pid import (
    TrackDazzle,
    TrackScatterClosestApproach,
    TrackStoppingChi2Fit,
    TrkChi2PID,
    TrkMCS,
    TrkRange,
)
from cafrecord.vector import Vector3D

_INT_MIN = -(2**31)
_UINT_MAX = 2**32 - 1
_USHORT_MAX = 2**16 - 1
_N_PLANES = 3


@dataclass
class CaloPoint:
    """Calorimetry of one point along a track."""

    rr: float = SIGNALING_NAN
    dqdx: float = SIGNALING_NAN
    dedx: float = SIGNALING_NAN
    pitch: float = SIGNALING_NAN
    t: float = SIGNALING_NAN
    p: Vector3D = field(default_factory=Vector3D)
    integral: float = SIGNALING_NAN
    sumadc: float = SIGNALING_NAN
    wire: int = -1


@dataclass
class TrackCalo:
    """Calorimetry of a track on one wire plane."""

    nhit: int = -999
    ke: float = SIGNALING_NAN
    charge: float = SIGNALING_NAN
    points: list[CaloPoint] = field(default_factory=list)

    def set_default(self) -> None:
        """Fill the summary values with placeholders; points are kept."""
        self.nhit = -1
        self.ke = -1.0
        self.charge = -1.0


def _per_plane(factory):
    return lambda: [factory() for _ in range(_N_PLANES)]


@dataclass
class Track:
    """A reconstructed track: geometry, per-plane PID and calorimetry, and matches.

    ``npts`` is an unsigned 16-bit count, so its unfilled value is the type's maximum.
    """

    producer: int = _UINT_MAX
    npts: int = _USHORT_MAX
    len: float = SIGNALING_NAN
    costh: float = SIGNALING_NAN
    phi: float = SIGNALING_NAN
    dir: Vector3D = field(default_factory=Vector3D)
    dir_end: Vector3D = field(default_factory=Vector3D)
    start: Vector3D = field(default_factory=Vector3D)
    end: Vector3D = field(default_factory=Vector3D)
    ID: int = _INT_MIN

    chi2pid: list[TrkChi2PID] = field(default_factory=_per_plane(TrkChi2PID))
    calo: list[TrackCalo] = field(default_factory=_per_plane(TrackCalo))
    bestplane: Plane = Plane.UNKNOWN

    mcsP: TrkMCS = field(default_factory=TrkMCS)
    rangeP: TrkRange = field(default_factory=TrkRange)

    truth: TrackTruth = field(default_factory=TrackTruth)
    crthit: CRTHitMatch = field(default_factory=CRTHitMatch)
    crttrack: CRTTrackMatch = field(default_factory=CRTTrackMatch)
    pfp: PFP = field(default_factory=PFP)

    scatterClosestApproach: TrackScatterClosestApproach = field(
        default_factory=TrackScatterClosestApproach
    )
    stoppingChi2Fit: TrackStoppingChi2Fit = field(default_factory=TrackStoppingChi2Fit)
    dazzle: TrackDazzle = field(default_factory=TrackDazzle)