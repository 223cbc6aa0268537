"""Truth information on a simulated neutrino interaction."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import (
    SIGNALING_NAN,
    UNINITIALIZED_INT,
    Det,
    Generator,
    GenieInteractionMode,
    GenieInteractionType,
)
from cafrecord.true_particle import TrueParticle
from cafrecord.vector import Vector3D

_N_CRYOSTATS = 2
_N_PLANES = 3


@dataclass
class Multiverse:
    """Weights of one parameter set, one per universe."""

    univ: list[float] = field(default_factory=list)


@dataclass
class TrueInteractionPlaneInfo:
    """Energy and hits an interaction left on one wire plane."""

    visE: float = SIGNALING_NAN
    nhitprim: int = 0
    nhit: int = 0


def _plane_grid() -> list[list[TrueInteractionPlaneInfo]]:
    return [
        [TrueInteractionPlaneInfo() for _ in range(_N_PLANES)]
        for _ in range(_N_CRYOSTATS)
    ]


@dataclass
class TrueInteraction:
    """A simulated neutrino interaction.

    ``plane`` is indexed first by cryostat, then by wire plane. ``wgt`` holds
    systematic weights, one entry per parameter set in the global record.
    """

    initpdg: int = -1
    pdg: int = -1
    index: int = -1
    targetPDG: int = -999
    hitnuc: int = -999
    genie_mode: GenieInteractionMode = GenieInteractionMode.UNKNOWN
    genie_inttype: GenieInteractionType = GenieInteractionType.UNKNOWN

    isnc: bool = False
    iscc: bool = False
    isvtxcont: bool = False
    is_numucc_primary: bool = False

    E: float = SIGNALING_NAN

    plane: list[list[TrueInteractionPlaneInfo]] = field(default_factory=_plane_grid)

    time: float = SIGNALING_NAN
    bjorkenX: float = SIGNALING_NAN
    inelasticityY: float = SIGNALING_NAN
    Q2: float = SIGNALING_NAN
    q0: float = SIGNALING_NAN
    modq: float = SIGNALING_NAN
    q0_lab: float = SIGNALING_NAN
    modq_lab: float = SIGNALING_NAN
    w: float = SIGNALING_NAN
    t: float = SIGNALING_NAN
    eccqe: float = SIGNALING_NAN
    baseline: float = SIGNALING_NAN

    npiplus: int = 0
    npiminus: int = 0
    npizero: int = 0
    nproton: int = 0
    nneutron: int = 0

    ischarm: bool = False
    isseaquark: bool = False
    resnum: int = -999
    xsec: float = SIGNALING_NAN

    genweight: float = SIGNALING_NAN

    parent_dcy_mode: int = -1
    parent_pdg: int = -1
    prod_vtx: Vector3D = field(default_factory=Vector3D)
    parent_dcy_mom: Vector3D = field(default_factory=Vector3D)
    parent_dcy_E: float = SIGNALING_NAN
    imp_weight: float = SIGNALING_NAN

    vtx: Vector3D = field(default_factory=Vector3D)
    momentum: Vector3D = field(default_factory=Vector3D)
    position: Vector3D = field(default_factory=Vector3D)

    cryostat: int = UNINITIALIZED_INT
    det: Det = Det.UNKNOWN

    generator: Generator = Generator.UNKNOWN
    genVersion: list[int] = field(default_factory=list)

    nprim: int = 0
    prim: list[TrueParticle] = field(default_factory=list)

    wgt: list[Multiverse] = field(default_factory=list)