"""Compact three- and four-vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from cafrecord.enums import SIGNALING_NAN


@dataclass
class Vector3D:
    """A plain three-vector; components are NaN until set."""

    x: float = SIGNALING_NAN
    y: float = SIGNALING_NAN
    z: float = SIGNALING_NAN

    def set_xyz(self, x: float, y: float, z: float) -> None:
        """Set all three components at once."""
        self.x = x
        self.y = y
        self.z = z

    def mag2(self) -> float:
        """Squared magnitude."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        """Magnitude."""
        return math.sqrt(self.mag2())

    def dot(self, other: Vector3D) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def unit(self) -> Vector3D:
        """Vector of length one in the same direction; a null vector raises ZeroDivisionError."""
        m = self.mag()
        return Vector3D(self.x / m, self.y / m, self.z / m)


@dataclass
class LorentzVector:
    """A four-vector of energy and momentum; components are NaN until set."""

    E: float = SIGNALING_NAN
    px: float = SIGNALING_NAN
    py: float = SIGNALING_NAN
    pz: float = SIGNALING_NAN

    def mag(self) -> float:
        """Magnitude of the spatial part."""
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    def beta(self) -> float:
        """Velocity as a fraction of the speed of light."""
        return self.mag() / self.E

    def gamma(self) -> float:
        """Lorentz factor."""
        b = self.beta()
        return 1.0 / math.sqrt(1.0 - b * b)

    def vect(self) -> Vector3D:
        """Spatial part as a three-vector."""
        return Vector3D(self.px, self.py, self.pz)