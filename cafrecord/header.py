"""Event header with beam and trigger information."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from cafrecord.enums import SIGNALING_NAN, Det, MCType

_UINT_MAX = 2**32 - 1
_INT_MAX = 2**31 - 1
_ULONG_MAX = 2**64 - 1
_BNB_PLACEHOLDER = -999.0


@dataclass
class BNBInfo:
    """Booster beam devices read out for one spill.

    Loss monitors are in R/s, position monitors in mm, the target air
    temperature in degrees C and the horn current in kA.
    """

    spill_time_sec: int = _ULONG_MAX
    spill_time_nsec: int = _ULONG_MAX
    event: int = _UINT_MAX

    TOR860: float = SIGNALING_NAN
    TOR875: float = SIGNALING_NAN

    LM875A: float = SIGNALING_NAN
    LM875B: float = SIGNALING_NAN
    LM875C: float = SIGNALING_NAN
    HP875: float = SIGNALING_NAN
    VP875: float = SIGNALING_NAN

    HPTG1: float = SIGNALING_NAN
    VPTG1: float = SIGNALING_NAN

    HPTG2: float = SIGNALING_NAN
    VPTG2: float = SIGNALING_NAN

    BTJT2: float = SIGNALING_NAN

    THCURR: float = SIGNALING_NAN

    M875BB: list[int] = field(default_factory=list)
    M876BB: list[int] = field(default_factory=list)
    MMBTBB: list[int] = field(default_factory=list)

    M875BB_spill_time_diff: float = SIGNALING_NAN
    M876BB_spill_time_diff: float = SIGNALING_NAN
    MMBTBB_spill_time_diff: float = SIGNALING_NAN

    def set_default(self) -> None:
        """Reset times and event to their maxima and every reading to the placeholder; multiwire data are kept."""
        self.spill_time_sec = _ULONG_MAX
        self.spill_time_nsec = _ULONG_MAX
        self.event = _UINT_MAX
        for f in fields(self):
            if f.type in ("float", float):
                setattr(self, f.name, _BNB_PLACEHOLDER)


@dataclass
class NuMIInfo:
    """NuMI beam devices read out for one spill; ``time`` is that of the device used to find the spill."""

    HP121: list[float] = field(default_factory=list)
    VP121: list[float] = field(default_factory=list)
    HPTGT: list[float] = field(default_factory=list)
    VPTGT: list[float] = field(default_factory=list)
    HITGT: list[float] = field(default_factory=list)
    VITGT: list[float] = field(default_factory=list)
    MTGTDS: list[float] = field(default_factory=list)
    HRNDIR: float = SIGNALING_NAN
    NSLINA: float = SIGNALING_NAN
    NSLINB: float = SIGNALING_NAN
    NSLINC: float = SIGNALING_NAN
    NSLIND: float = SIGNALING_NAN
    TRTGTD: float = SIGNALING_NAN
    TR101D: float = SIGNALING_NAN
    TORTGT: float = SIGNALING_NAN
    TOR101: float = SIGNALING_NAN
    time: float = SIGNALING_NAN

    spill_time_s: int = _ULONG_MAX
    spill_time_ns: int = _ULONG_MAX

    event: int = _UINT_MAX
    daq_gates: int = _UINT_MAX


@dataclass
class Trigger:
    """Trigger timing: absolute UTC times in ns, detector times in us."""

    global_trigger_time: int = _UINT_MAX
    beam_gate_time_abs: int = _UINT_MAX
    trigger_within_gate: int = _INT_MAX
    beam_gate_det_time: float = SIGNALING_NAN
    global_trigger_det_time: float = SIGNALING_NAN


@dataclass
class Header:
    """Overview of the current event.

    A ``husk`` record has been filtered out and is kept only for its exposure.
    """

    run: int = 0
    subrun: int = 0
    evt: int = 0
    subevt: int = 0
    ismc: bool = False
    isblind: bool = False
    fno: int = 0
    ngenevt: int = 0
    pot: float = 0.0
    mctype: MCType = MCType.UNKNOWN
    det: Det = Det.UNKNOWN
    first_in_subrun: bool = False
    first_in_file: bool = False
    proc: int = -1
    cluster: int = -1
    nbnbinfo: int = 0
    bnbinfo: list[BNBInfo] = field(default_factory=list)
    nnumiinfo: int = 0
    numiinfo: list[NuMIInfo] = field(default_factory=list)
    ntriggerinfo: int = 0
    triggerinfo: list[Trigger] = field(default_factory=list)

    husk: bool = False