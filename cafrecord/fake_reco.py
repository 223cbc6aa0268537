"""Fake reconstruction built from proposal-level resolution estimates."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN
from cafrecord.vector import Vector3D


@dataclass
class FakeRecoParticle:
    """One particle of a fake reconstruction."""

    ke: float = SIGNALING_NAN
    costh: float = SIGNALING_NAN
    len: float = SIGNALING_NAN
    pid: int = -999
    contained: bool = False


@dataclass
class FakeReco:
    """A fake-reconstructed interaction: neutrino energy, vertex, lepton and hadrons."""

    nuE: float = SIGNALING_NAN
    vtx: Vector3D = field(default_factory=Vector3D)
    lepton: FakeRecoParticle = field(default_factory=FakeRecoParticle)
    hadrons: list[FakeRecoParticle] = field(default_factory=list)
    nhad: int = 0
    wgt: float = SIGNALING_NAN
    filled: bool = False