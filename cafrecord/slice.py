"""Slices: groups of TPC activity with their reconstruction and truth."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.crumbs import CRUMBSResult
from cafrecord.enums import SIGNALING_NAN
from cafrecord.fake_reco import FakeReco
from cafrecord.flash_match import FlashMatch
from cafrecord.hit import Hit
from cafrecord.matching import TruthMatch
from cafrecord.nuid import NuID
from cafrecord.shower import Shower
from cafrecord.stub import Stub
from cafrecord.track import Track
from cafrecord.true_interaction import TrueInteraction
from cafrecord.vector import Vector3D

_INT_MIN = -(2**31)
_UINT_MAX = 2**32 - 1
_CHARGE_PLACEHOLDER = -5.0


@dataclass
class SliceRecoBranch:
    """Reconstructed objects of a slice, each list with its count."""

    trk: list[Track] = field(default_factory=list)
    ntrk: int = 0

    shw: list[Shower] = field(default_factory=list)
    nshw: int = 0

    hit: list[Hit] = field(default_factory=list)
    nhit: int = 0

    stub: list[Stub] = field(default_factory=list)
    nstub: int = 0

    def fill_sizes(self) -> None:
        """Set the track, shower and hit counts from their lists; the stub count is kept."""
        self.ntrk = len(self.trk)
        self.nshw = len(self.shw)
        self.nhit = len(self.hit)


@dataclass
class Slice:
    """Overall information on a slice.

    ``producer`` indexes the module that made the slice; in ICARUS it is the
    cryostat. ``self`` is the ID of the particle representing the slice.
    """

    producer: int = _UINT_MAX
    charge: float = SIGNALING_NAN
    vertex: Vector3D = field(default_factory=Vector3D)

    truth: TrueInteraction = field(default_factory=TrueInteraction)
    tmatch: TruthMatch = field(default_factory=TruthMatch)

    fmatch: FlashMatch = field(default_factory=FlashMatch)
    fmatch_a: FlashMatch = field(default_factory=FlashMatch)
    fmatch_b: FlashMatch = field(default_factory=FlashMatch)

    fake_reco: FakeReco = field(default_factory=FakeReco)

    is_clear_cosmic: bool = False
    nu_pdg: int = _INT_MIN
    nu_score: float = SIGNALING_NAN
    crumbs_result: CRUMBSResult = field(default_factory=CRUMBSResult)

    nuid: NuID = field(default_factory=NuID)

    primary: list[int] = field(default_factory=list)
    self: int = _INT_MIN

    reco: SliceRecoBranch = field(default_factory=SliceRecoBranch)

    def set_default(self) -> None:
        """Fill the calorimetric charge with its placeholder value."""
        self.charge = _CHARGE_PLACEHOLDER