"""Star, planet and moon construction.

Every body is a plain `Body`; the category and sub-type only decide its mass,
radius and (for stars and moons) colour. Unknown or missing sub-types fall
back to the category default: main-sequence stars and rocky planets.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from body import Body
from constants import SOLAR_MASS, PLANET_MASS, MOON_MASS


class Category(str, Enum):
    STAR = "star"
    PLANET = "planet"
    MOON = "moon"


class StarType(str, Enum):
    MAIN = "main"
    BLUE = "blue"
    RED = "red"
    YELLOW = "yellow"
    ORANGE = "orange"
    GIANT = "giant"


class PlanetType(str, Enum):
    ROCKY = "rocky"
    GASEOUS = "gaseous"


@dataclass(frozen=True)
class Preset:
    mass: float
    radius: float
    color: Optional[Tuple[int, int, int]] = None  # None = caller supplies it


STAR_RADIUS = 25
PLANET_RADIUS = 7
MOON_RADIUS = 3

STARS = {
    StarType.MAIN: Preset(SOLAR_MASS, STAR_RADIUS, (255, 255, 0)),
    StarType.BLUE: Preset(50 * SOLAR_MASS, STAR_RADIUS, (38, 97, 156)),
    StarType.RED: Preset(0.1 * SOLAR_MASS, STAR_RADIUS, (125, 0, 0)),
    StarType.YELLOW: Preset(0.85 * SOLAR_MASS, STAR_RADIUS, (255, 220, 0)),
    StarType.ORANGE: Preset(0.5 * SOLAR_MASS, STAR_RADIUS, (255, 102, 0)),
    StarType.GIANT: Preset(1000 * SOLAR_MASS, STAR_RADIUS, (255, 100, 0)),
}

PLANETS = {
    PlanetType.ROCKY: Preset(PLANET_MASS, PLANET_RADIUS),
    PlanetType.GASEOUS: Preset(1000 * PLANET_MASS, PLANET_RADIUS),
}

MOON = Preset(MOON_MASS, MOON_RADIUS, (150, 150, 150))

DEFAULT_PLANET_COLOR = (125, 0, 0)

Tag = Union[str, Enum, None]


def _resolve(kind, tag: Tag, default):
    try:
        return kind(tag)
    except ValueError:
        return default


def star_type(tag: Tag) -> StarType:
    return _resolve(StarType, tag, StarType.MAIN)


def planet_type(tag: Tag) -> PlanetType:
    return _resolve(PlanetType, tag, PlanetType.ROCKY)


def star(x, y, speed=0.0, angle=0.0, kind: Tag = StarType.MAIN) -> Body:
    preset = STARS[star_type(kind)]
    return Body(preset.mass, x, y, speed, angle, preset.radius, preset.color)


def planet(x, y, speed=0.0, angle=0.0, kind: Tag = PlanetType.ROCKY,
           color: Tuple[int, int, int] = DEFAULT_PLANET_COLOR) -> Body:
    preset = PLANETS[planet_type(kind)]
    return Body(preset.mass, x, y, speed, angle, preset.radius, color)


def moon(x, y, speed=0.0, angle=0.0) -> Body:
    return Body(MOON.mass, x, y, speed, angle, MOON.radius, MOON.color)


def make_body(category: Union[Category, str], x, y, speed=0.0, angle=0.0,
              kind: Tag = None, color: Optional[Tuple[int, int, int]] = None) -> Body:
    """Build a body from a (category, sub-type) tag pair.

    `color` is only honoured for planets; stars and moons have fixed colours.
    """
    category = Category(category)
    if category is Category.STAR:
        return star(x, y, speed, angle, kind)
    if category is Category.PLANET:
        return planet(x, y, speed, angle, kind, color or DEFAULT_PLANET_COLOR)
    return moon(x, y, speed, angle)
