"""Systematic-weight parameter descriptions stored alongside the records."""

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN, UNINITIALIZED_INT, ReweightType


@dataclass
class WeightParam:
    """One reweightable parameter."""

    name: str = ""
    mean: float = SIGNALING_NAN
    width: float = SIGNALING_NAN
    covidx: int = UNINITIALIZED_INT


@dataclass
class WeightMapEntry:
    """A parameter together with its values in each universe."""

    param: WeightParam = field(default_factory=WeightParam)
    vals: list[float] = field(default_factory=list)


@dataclass
class WeightPSet:
    """A named set of parameters varied together."""

    name: str = ""
    type: ReweightType = ReweightType.DEFAULT
    nuniv: int = UNINITIALIZED_INT
    covmx: list[float] = field(default_factory=list)
    map: list[WeightMapEntry] = field(default_factory=list)


@dataclass
class GlobalRecord:
    """File-level information that is not part of any one event."""

    wgts: list[WeightPSet] = field(default_factory=list)