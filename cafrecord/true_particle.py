"""Truth information on a simulated particle."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import (
    SIGNALING_NAN,
    G4Process,
    GenieStatus,
    Generator,
    Wall,
)
from cafrecord.vector import Vector3D

_INT_MIN = -(2**31)
_UINT_MAX = 2**32 - 1
_N_CRYOSTATS = 2
_N_PLANES = 3


@dataclass
class TrueParticlePlaneInfo:
    """Energy and hits a particle left on one wire plane."""

    visE: float = SIGNALING_NAN
    nhit: int = 0


def _plane_grid() -> list[list[TrueParticlePlaneInfo]]:
    return [
        [TrueParticlePlaneInfo() for _ in range(_N_PLANES)]
        for _ in range(_N_CRYOSTATS)
    ]


@dataclass
class TrueParticle:
    """A simulated particle: energies, times, momenta and positions, without hits.

    ``plane`` is indexed first by cryostat, then by wire plane.
    """

    plane: list[list[TrueParticlePlaneInfo]] = field(default_factory=_plane_grid)

    genE: float = SIGNALING_NAN
    startE: float = SIGNALING_NAN
    endE: float = SIGNALING_NAN
    genT: float = SIGNALING_NAN
    startT: float = SIGNALING_NAN
    endT: float = SIGNALING_NAN
    length: float = SIGNALING_NAN

    genp: Vector3D = field(default_factory=Vector3D)
    startp: Vector3D = field(default_factory=Vector3D)
    endp: Vector3D = field(default_factory=Vector3D)
    gen: Vector3D = field(default_factory=Vector3D)
    start: Vector3D = field(default_factory=Vector3D)
    end: Vector3D = field(default_factory=Vector3D)

    wallin: Wall = Wall.NONE
    wallout: Wall = Wall.NONE

    cont_tpc: bool = False
    crosses_tpc: bool = False
    contained: bool = False

    pdg: int = _INT_MIN
    G4ID: int = _INT_MIN
    interaction_id: int = _INT_MIN
    cryostat: int = -1

    daughters: list[int] = field(default_factory=list)
    parent: int = _UINT_MAX

    generator: Generator = Generator.UNKNOWN

    start_process: G4Process = G4Process.UNKNOWN
    end_process: G4Process = G4Process.UNKNOWN

    gstatus: GenieStatus = GenieStatus.UNDEFINED