"""Neutrino-identification classifier inputs for a slice."""

from __future__ import annotations

from dataclasses import dataclass

from cafrecord.enums import SIGNALING_NAN, UNINITIALIZED_INT

_FLOAT_PLACEHOLDER = -9999.0
_INT_PLACEHOLDER = -5


@dataclass
class NuID:
    """Features fed to the neutrino-score classifier."""

    nufspfos: float = SIGNALING_NAN
    nutothits: int = UNINITIALIZED_INT
    nuvtxy: float = SIGNALING_NAN
    nuwgtdirz: float = SIGNALING_NAN
    nusps: float = SIGNALING_NAN
    nueigen: float = SIGNALING_NAN
    crlongtrkdiry: float = SIGNALING_NAN
    crlongtrkdef: float = SIGNALING_NAN
    crlongtrkhitfrac: float = SIGNALING_NAN
    crmaxhits: int = UNINITIALIZED_INT

    def set_default(self) -> None:
        """Fill every feature with its placeholder value."""
        self.nufspfos = _FLOAT_PLACEHOLDER
        self.nutothits = _INT_PLACEHOLDER
        self.nuvtxy = _FLOAT_PLACEHOLDER
        self.nuwgtdirz = _FLOAT_PLACEHOLDER
        self.nusps = _FLOAT_PLACEHOLDER
        self.nueigen = _FLOAT_PLACEHOLDER
        self.crlongtrkdiry = _FLOAT_PLACEHOLDER
        self.crlongtrkdef = _FLOAT_PLACEHOLDER
        self.crlongtrkhitfrac = _FLOAT_PLACEHOLDER
        self.crmaxhits = _INT_PLACEHOLDER