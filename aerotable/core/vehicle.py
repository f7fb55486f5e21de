"""Vehicle configuration model for AeroTable.

A single-stage rocket built from a nose cone, one body tube and an optional
trapezoidal fin set.  All lengths are in metres, measured aft from the nose
tip.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NoseShape(Enum):
    CONICAL = "conical"
    OGIVE = "ogive"
    PARABOLIC = "parabolic"
    ELLIPTICAL = "elliptical"


# Nose CP as a fraction of nose length (Barrowman)
NOSE_CP_FRACTION = {
    NoseShape.CONICAL: 0.666,
    NoseShape.OGIVE: 0.466,
    NoseShape.PARABOLIC: 0.5,
    NoseShape.ELLIPTICAL: 0.333,
}


@dataclass
class NoseCone:
    shape: NoseShape = NoseShape.OGIVE
    length: float = 0.30  # m
    diameter: float = 0.10  # m, base diameter

    @property
    def half_angle(self) -> float:
        """Equivalent cone half-angle [rad]."""
        return math.atan2(self.diameter / 2.0, self.length)


@dataclass
class BodyTube:
    length: float = 1.50  # m
    diameter: float = 0.10  # m


@dataclass
class FinSet:
    """Trapezoidal fin set."""

    count: int = 4
    root_chord: float = 0.20  # m
    tip_chord: float = 0.10  # m
    semi_span: float = 0.10  # m
    sweep_length: float = 0.10  # m, leading edge sweep, root to tip
    thickness: float = 0.004  # m
    position: float | None = None  # m, root leading edge; None = flush with aft end

    @property
    def planform_area(self) -> float:
        """Area of a single fin [m²]."""
        return 0.5 * (self.root_chord + self.tip_chord) * self.semi_span

    @property
    def mid_chord_length(self) -> float:
        """Length of the mid-chord line, root to tip [m]."""
        mid_sweep = self.sweep_length + 0.5 * (self.tip_chord - self.root_chord)
        return math.hypot(self.semi_span, mid_sweep)


@dataclass
class RocketConfiguration:
    """Complete vehicle description passed to the aerodynamic calculator."""

    name: str = "Untitled"
    nose: NoseCone = field(default_factory=NoseCone)
    body: BodyTube = field(default_factory=BodyTube)
    fins: FinSet | None = field(default_factory=FinSet)

    @property
    def length(self) -> float:
        return self.nose.length + self.body.length

    @property
    def reference_diameter(self) -> float:
        return max(self.nose.diameter, self.body.diameter)

    @property
    def reference_length(self) -> float:
        return self.reference_diameter

    @property
    def reference_area(self) -> float:
        return math.pi * (self.reference_diameter / 2.0) ** 2

    @property
    def fin_position(self) -> float:
        """Axial position of the fin root leading edge [m]."""
        if self.fins is None:
            return self.length
        if self.fins.position is not None:
            return self.fins.position
        return self.length - self.fins.root_chord


def configuration_from_dict(data: dict[str, Any]) -> RocketConfiguration:
    """Rebuild a RocketConfiguration from its ``asdict`` form."""
    nose_data = dict(data.get("nose", {}))
    if "shape" in nose_data:
        nose_data["shape"] = NoseShape(nose_data["shape"])
    fins_data = data.get("fins", {})
    return RocketConfiguration(
        name=data.get("name", "Untitled"),
        nose=NoseCone(**nose_data),
        body=BodyTube(**data.get("body", {})),
        fins=FinSet(**fins_data) if fins_data is not None else None,
    )


def example_configuration(name: str = "Example 54mm") -> RocketConfiguration:
    """A typical high-power sport rocket: 54 mm body, ogive nose, 3 fins."""
    return RocketConfiguration(
        name=name,
        nose=NoseCone(shape=NoseShape.OGIVE, length=0.25, diameter=0.054),
        body=BodyTube(length=0.90, diameter=0.054),
        fins=FinSet(
            count=3,
            root_chord=0.12,
            tip_chord=0.05,
            semi_span=0.06,
            sweep_length=0.06,
            thickness=0.003,
        ),
    )
