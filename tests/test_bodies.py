import pytest

from bodies import (Category, PlanetType, StarType, make_body, moon, planet,
                    planet_type, star, star_type)
from constants import MOON_MASS, PLANET_MASS, SOLAR_MASS


@pytest.mark.parametrize("kind, scale, color", [
    ("main", 1, (255, 255, 0)),
    ("blue", 50, (38, 97, 156)),
    ("red", 0.1, (125, 0, 0)),
    ("yellow", 0.85, (255, 220, 0)),
    ("orange", 0.5, (255, 102, 0)),
    ("giant", 1000, (255, 100, 0)),
])
def test_star_types(kind, scale, color):
    s = star(10, 20, kind=kind)
    assert s.mass == pytest.approx(scale * SOLAR_MASS)
    assert s.color == color
    assert s.radius == 25
    assert (s.x, s.y) == (10, 20)


@pytest.mark.parametrize("kind", [None, "", "white dwarf", "MAIN", 42])
def test_unknown_star_type_is_main_sequence(kind):
    assert star_type(kind) is StarType.MAIN
    assert star(0, 0, kind=kind).mass == SOLAR_MASS


def test_planet_types_take_caller_color():
    rocky = planet(0, 0, kind="rocky", color=(30, 0, 125))
    gas = planet(0, 0, kind=PlanetType.GASEOUS, color=(1, 2, 3))
    assert rocky.mass == pytest.approx(PLANET_MASS)
    assert gas.mass == pytest.approx(1000 * PLANET_MASS)
    assert rocky.color == (30, 0, 125)
    assert gas.color == (1, 2, 3)
    assert rocky.radius == gas.radius == 7


@pytest.mark.parametrize("kind", [None, "icy", StarType.BLUE])
def test_unknown_planet_type_is_rocky(kind):
    assert planet_type(kind) is PlanetType.ROCKY


def test_moon():
    m = moon(5, 6, 1.0, 0.0)
    assert m.mass == pytest.approx(MOON_MASS)
    assert m.color == (150, 150, 150)
    assert m.radius == 3
    assert m.vx == pytest.approx(1.0)


def test_mass_hierarchy_is_positive():
    masses = [star(0, 0, kind=k).mass for k in StarType]
    masses += [planet(0, 0, kind=k).mass for k in PlanetType]
    masses.append(moon(0, 0).mass)
    assert all(m > 0 for m in masses)
    assert MOON_MASS < PLANET_MASS < SOLAR_MASS


def test_make_body_dispatches_on_category():
    s = make_body(Category.STAR, 0, 0, kind="blue")
    p = make_body("planet", 0, 0, kind="gaseous", color=(9, 9, 9))
    m = make_body("moon", 0, 0, kind="anything", color=(9, 9, 9))
    assert s.mass == pytest.approx(50 * SOLAR_MASS)
    assert p.mass == pytest.approx(1000 * PLANET_MASS)
    assert p.color == (9, 9, 9)
    assert m.color == (150, 150, 150)


def test_make_body_rejects_unknown_category():
    with pytest.raises(ValueError):
        make_body("comet", 0, 0)


def test_factories_return_independent_bodies():
    a = star(0, 0)
    b = star(0, 0)
    a.vel[0] = 3.0
    assert b.vx == 0.0
