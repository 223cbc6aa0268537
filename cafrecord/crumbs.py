"""Results and inputs of the CRUMBS slice-identification classifier."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN

_INT_MAX = 2**31 - 1


@dataclass
class CRUMBSTPCVars:
    """TPC inputs: cosmic-reconstruction and neutrino-reconstruction features."""

    crlongtrackhitfrac: float = SIGNALING_NAN
    crlongtrackdefl: float = SIGNALING_NAN
    crlongtrackdiry: float = SIGNALING_NAN
    crnhitsmax: int = _INT_MAX
    nusphereeigenratio: float = SIGNALING_NAN
    nufinalstatepfos: int = _INT_MAX
    nutotalhits: int = _INT_MAX
    nuspherespacepoints: int = _INT_MAX
    nuvertexy: float = SIGNALING_NAN
    nuwgtdirz: float = SIGNALING_NAN
    stoppingchi2ratio: float = SIGNALING_NAN


@dataclass
class CRUMBSPDSVars:
    """Photon-detection inputs from the flash match; time in us."""

    fmtotalscore: float = SIGNALING_NAN
    fmpe: float = SIGNALING_NAN
    fmtime: float = SIGNALING_NAN


@dataclass
class CRUMBSCRTVars:
    """Cosmic-ray-tagger inputs; distances in cm, times in us."""

    trackscore: float = SIGNALING_NAN
    hitscore: float = SIGNALING_NAN
    tracktime: float = SIGNALING_NAN
    hittime: float = SIGNALING_NAN


@dataclass
class CRUMBSResult:
    """Classifier scores for a slice and the inputs they came from.

    ``bestid`` is 14 for CC muon neutrino, 12 for CC electron neutrino, 1 for NC.
    """

    score: float = SIGNALING_NAN
    ccnumuscore: float = SIGNALING_NAN
    ccnuescore: float = SIGNALING_NAN
    ncscore: float = SIGNALING_NAN
    bestscore: float = SIGNALING_NAN
    bestid: int = _INT_MAX

    tpc: CRUMBSTPCVars = field(default_factory=CRUMBSTPCVars)
    pds: CRUMBSPDSVars = field(default_factory=CRUMBSPDSVars)
    crt: CRUMBSCRTVars = field(default_factory=CRUMBSCRTVars)