"""Matching between reconstructed objects and simulated truth."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN
from cafrecord.true_particle import TrueParticle

_INT_MIN = -(2**31)


@dataclass
class ParticleMatch:
    """Match from a reconstructed object to one true particle.

    Energies are summed over the deposits seen by each of the three planes.
    """

    G4ID: int = _INT_MIN
    energy: float = SIGNALING_NAN
    hit_completeness: float = SIGNALING_NAN
    hit_purity: float = SIGNALING_NAN
    energy_completeness: float = SIGNALING_NAN
    energy_purity: float = SIGNALING_NAN


@dataclass
class LegacyParticleMatch:
    """Deprecated match holding only the particle ID and matched energy."""

    G4ID: int = _INT_MIN
    energy: float = SIGNALING_NAN


@dataclass
class TruthMatch:
    """Match from a slice to a true neutrino interaction."""

    eff: float = SIGNALING_NAN
    eff_cryo: float = SIGNALING_NAN
    pur: float = SIGNALING_NAN
    visEinslc: float = SIGNALING_NAN
    visEcosmic: float = SIGNALING_NAN
    index: int = -999

    def set_default(self) -> None:
        """Mark the match as filled with placeholder values."""
        self.index = -5
        self.eff = -5.0
        self.pur = -5.0


@dataclass
class TrackTruth:
    """Match from a track to the true particles behind it, most energetic first."""

    visEintrk: float = SIGNALING_NAN
    eff: float = SIGNALING_NAN
    eff_cryo: float = SIGNALING_NAN
    pur: float = SIGNALING_NAN
    nmatches: int = 0
    matches: list[ParticleMatch] = field(default_factory=list)
    bestmatch: ParticleMatch = field(default_factory=ParticleMatch)
    p: TrueParticle = field(default_factory=TrueParticle)