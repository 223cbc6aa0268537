"""Low-level wire hits and the space points built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

from cafrecord.enums import SIGNALING_NAN, UNINITIALIZED_INT
from cafrecord.vector import Vector3D

_FLOAT_PLACEHOLDER = -9999.0
_ID_PLACEHOLDER = -5


@dataclass
class SpacePoint:
    """A reconstructed space point: position, fit quality and owning particle.

    ``pfpID`` is -1 when the point belongs to no particle.
    """

    XYZ: Vector3D = field(default_factory=Vector3D)
    chisq: float = SIGNALING_NAN
    ID: int = UNINITIALIZED_INT
    pfpID: int = UNINITIALIZED_INT


@dataclass
class Hit:
    """A wire hit: amplitude, integral, timing and geometric IDs."""

    peakTime: float = SIGNALING_NAN
    RMS: float = SIGNALING_NAN
    peakAmplitude: float = SIGNALING_NAN
    integral: float = SIGNALING_NAN

    cryoID: int = UNINITIALIZED_INT
    tpcID: int = UNINITIALIZED_INT
    planeID: int = UNINITIALIZED_INT
    wireID: int = UNINITIALIZED_INT

    spacepoint: SpacePoint = field(default_factory=SpacePoint)

    def set_default(self) -> None:
        """Fill every field, including the space point, with placeholder values."""
        self.peakTime = _FLOAT_PLACEHOLDER
        self.RMS = _FLOAT_PLACEHOLDER
        self.peakAmplitude = _FLOAT_PLACEHOLDER
        self.integral = _FLOAT_PLACEHOLDER

        self.cryoID = _ID_PLACEHOLDER
        self.tpcID = _ID_PLACEHOLDER
        self.planeID = _ID_PLACEHOLDER
        self.wireID = _ID_PLACEHOLDER

        self.spacepoint.XYZ = Vector3D(
            _FLOAT_PLACEHOLDER, _FLOAT_PLACEHOLDER, _FLOAT_PLACEHOLDER
        )
        self.spacepoint.chisq = _FLOAT_PLACEHOLDER
        self.spacepoint.ID = UNINITIALIZED_INT
        self.spacepoint.pfpID = UNINITIALIZED_INT