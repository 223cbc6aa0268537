"""Particle identification and momentum estimates for reconstructed tracks."""

from __future__ import annotations

from dataclasses import dataclass

from cafrecord.enums import SIGNALING_NAN

_HYPOTHESES = ("muon", "pion", "kaon", "proton")
_MCS_MOMENTA = tuple(
    f"{prefix}_{hyp}"
    for prefix in ("fwdP", "fwdP_err", "bwdP", "bwdP_err")
    for hyp in _HYPOTHESES
)


@dataclass
class TrkChi2PID:
    """Chi-squared particle ID from dE/dx against residual range."""

    pdg: int = -999
    pid_ndof: int = -99
    chi2_muon: float = SIGNALING_NAN
    chi2_pion: float = SIGNALING_NAN
    chi2_kaon: float = SIGNALING_NAN
    chi2_proton: float = SIGNALING_NAN
    pida: float = SIGNALING_NAN

    def set_default(self) -> None:
        """Fill every field with the placeholder value."""
        self.pdg = -5
        self.pid_ndof = -5
        self.chi2_muon = -5.0
        self.chi2_pion = -5.0
        self.chi2_kaon = -5.0
        self.chi2_proton = -5.0
        self.pida = -5.0


@dataclass
class TrkMCS:
    """Momentum from multiple-Coulomb-scattering fits, forward and backward, per hypothesis [GeV/c]."""

    fwdP_muon: float = SIGNALING_NAN
    fwdP_pion: float = SIGNALING_NAN
    fwdP_kaon: float = SIGNALING_NAN
    fwdP_proton: float = SIGNALING_NAN

    fwdP_err_muon: float = SIGNALING_NAN
    fwdP_err_pion: float = SIGNALING_NAN
    fwdP_err_kaon: float = SIGNALING_NAN
    fwdP_err_proton: float = SIGNALING_NAN

    bwdP_muon: float = SIGNALING_NAN
    bwdP_pion: float = SIGNALING_NAN
    bwdP_kaon: float = SIGNALING_NAN
    bwdP_proton: float = SIGNALING_NAN

    bwdP_err_muon: float = SIGNALING_NAN
    bwdP_err_pion: float = SIGNALING_NAN
    bwdP_err_kaon: float = SIGNALING_NAN
    bwdP_err_proton: float = SIGNALING_NAN

    is_bwd_muon: bool = False
    is_bwd_pion: bool = False
    is_bwd_kaon: bool = False
    is_bwd_proton: bool = False

    def set_default(self) -> None:
        """Fill every momentum and error with the placeholder value; direction flags are kept."""
        for name in _MCS_MOMENTA:
            setattr(self, name, -5.0)


@dataclass
class TrkRange:
    """Momentum estimated from track range, per hypothesis."""

    p_muon: float = SIGNALING_NAN
    p_pion: float = SIGNALING_NAN
    p_proton: float = SIGNALING_NAN

    def set_default(self) -> None:
        """Fill every momentum with the placeholder value."""
        self.p_muon = -5.0
        self.p_pion = -5.0
        self.p_proton = -5.0


@dataclass
class TrackDazzle:
    """Output of the track PID classifier."""

    pdg: int = -5
    muonScore: float = -5.0
    pionScore: float = -5.0
    protonScore: float = -5.0
    otherScore: float = -5.0
    bestScore: float = -5.0


@dataclass
class TrackScatterClosestApproach:
    """Spread of a track about its interpolated start-to-end line [cm]."""

    mean: float = -5.0
    stdDev: float = -5.0
    max: float = -5.0


@dataclass
class TrackStoppingChi2Fit:
    """Constant and exponential fits to dE/dx against residual range."""

    pol0Chi2: float = -5.0
    expChi2: float = -5.0
    pol0Fit: float = -5.0