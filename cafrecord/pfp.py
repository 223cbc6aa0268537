"""Particle-flow particles: hierarchy, Pandora metadata and track/shower features."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from cafrecord.enums import SIGNALING_NAN

_PLACEHOLDER = -9999.0


@dataclass
class PFOChar:
    """Track-versus-shower classifier inputs for one particle."""

    chgendfrac: float = SIGNALING_NAN
    chgfracspread: float = SIGNALING_NAN
    linfitdiff: float = SIGNALING_NAN
    linfitlen: float = SIGNALING_NAN
    linfitgaplen: float = SIGNALING_NAN
    linfitrms: float = SIGNALING_NAN
    openanglediff: float = SIGNALING_NAN
    pca2ratio: float = SIGNALING_NAN
    pca3ratio: float = SIGNALING_NAN
    vtxdist: float = SIGNALING_NAN

    def set_default(self) -> None:
        """Fill every feature with the placeholder value."""
        for f in fields(self):
            setattr(self, f.name, _PLACEHOLDER)


@dataclass
class PFP:
    """A particle-flow particle with its place in the hierarchy."""

    id: int = -5
    ndaughters: int = 0
    daughters: list[int] = field(default_factory=list)
    parent: int = -5
    parent_is_primary: bool = False
    trackScore: float = -5.0
    pfochar: PFOChar = field(default_factory=PFOChar)
    slcID: int = -5