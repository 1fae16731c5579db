"""
SUNRISE Angles

Immutable angle value type and angle-aware trigonometry.

Angles are held in decimal degrees. The inverse functions take a
dimensionless ratio and return the NaN angle when the ratio lies outside
[-1, 1], which is how the solvers learn that the sun never reaches the
horizon on a given day.
"""

import math
from dataclasses import dataclass

__all__ = [
    "Angle",
    "NAN_ANGLE",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
]


@dataclass(frozen=True)
class Angle:
    """Angle in decimal degrees."""
    degrees: float

    @classmethod
    def from_degrees(cls, degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> "Angle":
        """Build an angle from degrees, arcminutes and arcseconds.

        The minutes and seconds take the sign of the degrees, so
        from_degrees(-23, 26, 21) is -23.4392 deg.
        """
        sign = -1.0 if degrees < 0 else 1.0
        return cls(degrees + sign * (minutes / 60.0 + seconds / 3600.0))

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(math.degrees(radians))

    @classmethod
    def nan(cls) -> "Angle":
        """The undefined angle."""
        return cls(math.nan)

    @property
    def radians(self) -> float:
        return math.radians(self.degrees)

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.degrees)

    @property
    def dms(self) -> str:
        """Angle in sDD:MM:SS.ss format."""
        if self.is_nan:
            return "nan"
        sign = "+" if self.degrees >= 0 else "-"
        d = abs(self.degrees)
        deg = int(d)
        m = int((d - deg) * 60)
        s = ((d - deg) * 60 - m) * 60
        return f"{sign}{deg:02d}:{m:02d}:{s:05.2f}"

    def simplify(self) -> "Angle":
        """Equivalent angle in [0, 360) degrees."""
        if self.is_nan:
            return self
        value = self.degrees % 360.0
        # -1e-15 % 360.0 rounds up to 360.0
        if value >= 360.0:
            value = 0.0
        return Angle(value)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.degrees + other.degrees)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.degrees - other.degrees)

    def __neg__(self) -> "Angle":
        return Angle(-self.degrees)

    def __mul__(self, factor: float) -> "Angle":
        if isinstance(factor, Angle):
            return NotImplemented
        return Angle(self.degrees * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Angle":
        if isinstance(divisor, Angle):
            return NotImplemented
        return Angle(self.degrees / divisor)

    def __str__(self) -> str:
        return f"{self.degrees}°"


NAN_ANGLE = Angle.nan()


def sin(angle: Angle) -> float:
    return math.sin(angle.radians)


def cos(angle: Angle) -> float:
    return math.cos(angle.radians)


def tan(angle: Angle) -> float:
    return math.tan(angle.radians)


def asin(ratio: float) -> Angle:
    """Inverse sine, or the NaN angle outside [-1, 1]."""
    if not -1.0 <= ratio <= 1.0:
        return NAN_ANGLE
    return Angle.from_radians(math.asin(ratio))


def acos(ratio: float) -> Angle:
    """Inverse cosine, or the NaN angle outside [-1, 1]."""
    if not -1.0 <= ratio <= 1.0:
        return NAN_ANGLE
    return Angle.from_radians(math.acos(ratio))
