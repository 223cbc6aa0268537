"""Truth information on the decay of a heavy portal particle in the detector."""

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN, UNINITIALIZED_INT, MeVPrtlChannel
from cafrecord.vector import Vector3D


@dataclass
class MeVPrtl:
    """A beyond-standard-model particle decaying inside the detector."""

    gen: MeVPrtlChannel = MeVPrtlChannel.UNKNOWN
    position: Vector3D = field(default_factory=Vector3D)
    time: float = SIGNALING_NAN
    momentum: Vector3D = field(default_factory=Vector3D)
    E: float = SIGNALING_NAN
    M: float = SIGNALING_NAN
    cryostat: int = UNINITIALIZED_INT
    flux_weight: float = SIGNALING_NAN
    ray_weight: float = SIGNALING_NAN
    decay_weight: float = SIGNALING_NAN
    decay_length: float = SIGNALING_NAN
    enter: Vector3D = field(default_factory=Vector3D)
    exit: Vector3D = field(default_factory=Vector3D)
    start: Vector3D = field(default_factory=Vector3D)
    C1: float = SIGNALING_NAN
    C2: float = SIGNALING_NAN
    C3: float = SIGNALING_NAN
    C4: float = SIGNALING_NAN
    C5: float = SIGNALING_NAN