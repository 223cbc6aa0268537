"""Reconstructed showers with per-plane energy, PID and selection metrics."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN
from cafrecord.matching import TrackTruth
from cafrecord.pfp import PFP
from cafrecord.vector import Vector3D

_UINT_MAX = 2**32 - 1
_N_PLANES = 3


@dataclass
class ShowerPlaneInfo:
    """Shower energy and hits on one wire plane."""

    dEdx: float = SIGNALING_NAN
    energy: float = SIGNALING_NAN
    nHits: int = 0
    wirePitch: float = SIGNALING_NAN


@dataclass
class ShowerRazzle:
    """Output of the shower PID classifier."""

    pdg: int = -5
    electronScore: float = -5.0
    photonScore: float = -5.0
    otherScore: float = -5.0
    bestScore: float = -5.0


@dataclass
class ShowerSelection:
    """Selection metrics: density-gradient fit, stub track fit and residuals to other showers."""

    densityGradient: float = -5.0
    densityGradientPower: float = -5.0
    trackLength: float = -5.0
    trackWidth: float = -5.0
    showerResiduals: list[float] = field(default_factory=list)


def _placeholder_vector() -> Vector3D:
    return Vector3D(-5.0, -5.0, -5.0)


def _planes() -> list[ShowerPlaneInfo]:
    return [ShowerPlaneInfo() for _ in range(_N_PLANES)]


@dataclass
class Shower:
    """A reconstructed shower: energy, direction and extent, without its hits."""

    bestplane: int = -5
    bestplane_dEdx: float = -5.0
    bestplane_energy: float = -5.0
    conversion_gap: float = -5.0
    density: float = -5.0
    len: float = -5.0
    open_angle: float = -5.0
    plane: list[ShowerPlaneInfo] = field(default_factory=_planes)
    dir: Vector3D = field(default_factory=_placeholder_vector)
    start: Vector3D = field(default_factory=_placeholder_vector)
    end: Vector3D = field(default_factory=_placeholder_vector)
    cosmicDist: float = -5.0

    pfp: PFP = field(default_factory=PFP)
    razzle: ShowerRazzle = field(default_factory=ShowerRazzle)
    selVars: ShowerSelection = field(default_factory=ShowerSelection)
    truth: TrackTruth = field(default_factory=TrackTruth)

    producer: int = _UINT_MAX