"""Truth-level contents of a spill: neutrino interactions and portal decays."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.mevprtl import MeVPrtl
from cafrecord.true_interaction import TrueInteraction


@dataclass
class TruthBranch:
    """True interactions and portal-particle decays in a spill."""

    nu: list[TrueInteraction] = field(default_factory=list)
    nnu: int = 0

    prtl: list[MeVPrtl] = field(default_factory=list)
    nprtl: int = 0

    def fill_sizes(self) -> None:
        """Set the interaction count from the list it describes."""
        self.nnu = len(self.nu)