"""The top-level record of a common analysis file."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.crt import CRTHit, CRTTrack
from cafrecord.fake_reco import FakeReco
from cafrecord.header import Header
from cafrecord.opflash import OpFlash
from cafrecord.slice import Slice, SliceRecoBranch
from cafrecord.true_particle import TrueParticle
from cafrecord.truth_branch import TruthBranch


@dataclass
class StandardRecord:
    """Everything stored for one event: header, reconstruction, truth and detector objects."""

    hdr: Header = field(default_factory=Header)
    reco: SliceRecoBranch = field(default_factory=SliceRecoBranch)
    mc: TruthBranch = field(default_factory=TruthBranch)

    nslc: int = 0
    slc: list[Slice] = field(default_factory=list)
    nfake_reco: int = 0
    fake_reco: list[FakeReco] = field(default_factory=list)
    ntrue_particles: int = 0
    true_particles: list[TrueParticle] = field(default_factory=list)
    ncrt_hits: int = 0
    crt_hits: list[CRTHit] = field(default_factory=list)
    ncrt_tracks: int = 0
    crt_tracks: list[CRTTrack] = field(default_factory=list)
    nopflashes: int = 0
    opflashes: list[OpFlash] = field(default_factory=list)

    pass_flashtrig: bool = False