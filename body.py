import math
from typing import Iterable, Tuple

import numpy as np

import constants

TWO_PI = 2 * math.pi


def fill_style(r: int, g: int, b: int) -> str:
    """Return a CSS-style colour string for the given channels."""
    return f"rgb({r},{g},{b})"


def _color_channels(r, g, b) -> Tuple[int, int, int]:
    channels = []
    for c in (r, g, b):
        if int(c) != c or not 0 <= c <= 255:
            raise ValueError(f"colour channel must be an integer in 0..255, got {c!r}")
        channels.append(int(c))
    return tuple(channels)


def bearing(x1: float, y1: float, x2: float, y2: float) -> float:
    """Bearing from (x1, y1) to (x2, y2) in [0, 2*pi).

    Coincident points have no direction and return 0.0.
    """
    theta = math.atan2(y2 - y1, x2 - x1)
    if theta < 0:
        theta += TWO_PI
    # tiny negatives round up to exactly 2*pi; -0.0 folds to 0.0
    if theta >= TWO_PI or theta == 0.0:
        return 0.0
    return theta


def angle(origin: "Body", target: "Body") -> float:
    """Bearing from one body's position toward another's."""
    return bearing(origin.x, origin.y, target.x, target.y)


def sq_distance(a: "Body", b: "Body") -> float:
    d = b.pos - a.pos
    return float(d @ d)


def distance(a: "Body", b: "Body") -> float:
    return math.sqrt(sq_distance(a, b))


class Body:
    def __init__(self, mass, x, y, speed, angle, radius, color):
        """Initialize a body at (x, y) moving at `speed` along `angle` radians."""
        self._mass = float(mass)
        self.pos = np.array([x, y], dtype=np.float64)
        self.vel = np.array([speed * math.cos(angle), speed * math.sin(angle)], dtype=np.float64)
        self.acc = np.zeros(2, dtype=np.float64)
        self._radius = float(radius)
        self._color = _color_channels(*color)

    def __repr__(self):
        return (f"Body(mass={self._mass:g}, pos=({self.x:g}, {self.y:g}), "
                f"vel=({self.vx:g}, {self.vy:g}), radius={self._radius:g})")

    # Accessors / mutators

    @property
    def mass(self) -> float:
        return self._mass

    def set_mass(self, mass: float) -> None:
        self._mass = float(mass)

    @property
    def x(self) -> float:
        return float(self.pos[0])

    @property
    def y(self) -> float:
        return float(self.pos[1])

    def set_position(self, x: float, y: float) -> None:
        self.pos[:] = (x, y)

    @property
    def vx(self) -> float:
        return float(self.vel[0])

    @property
    def vy(self) -> float:
        return float(self.vel[1])

    def set_velocity(self, vx: float, vy: float) -> None:
        self.vel[:] = (vx, vy)

    @property
    def ax(self) -> float:
        return float(self.acc[0])

    @property
    def ay(self) -> float:
        return float(self.acc[1])

    @property
    def speed(self) -> float:
        return math.hypot(self.vel[0], self.vel[1])

    @property
    def heading(self) -> float:
        """Direction of travel in [0, 2*pi)."""
        return bearing(0.0, 0.0, self.vel[0], self.vel[1])

    @property
    def radius(self) -> float:
        return self._radius

    def set_radius(self, radius: float) -> None:
        self._radius = float(radius)

    @property
    def color(self) -> Tuple[int, int, int]:
        return self._color

    def set_color(self, r: int, g: int, b: int) -> None:
        self._color = _color_channels(r, g, b)

    @property
    def fill_style(self) -> str:
        return fill_style(*self._color)

    # Physics

    def update_acceleration(self, bodies: Iterable["Body"], G: float = constants.G) -> None:
        """Recompute acceleration from the current positions of `bodies`.

        Self and any body sitting exactly on this body's position are skipped.
        """
        acc = np.zeros(2, dtype=np.float64)
        for other in bodies:
            if other is self:
                continue
            r = other.pos - self.pos
            r_sq = float(r @ r)
            if r_sq == 0.0:
                continue
            # G*m/|r|^2 along r/|r|
            acc += (G * other.mass / (r_sq * math.sqrt(r_sq))) * r
        self.acc = acc

    def update_velocity(self, dt: float = 1.0) -> None:
        self.vel += self.acc * dt

    def update_position(self, dt: float = 1.0) -> None:
        self.pos += self.vel * dt
