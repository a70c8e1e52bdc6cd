"""Initial-velocity seeding for circular orbits.

Both helpers are meant to be called once, right after a body is built and
before it joins a simulation.
"""
import logging
import math

import numpy as np

import constants
from body import Body, angle, distance

logger = logging.getLogger(__name__)

QUARTER_TURN = math.pi / 2


def _tangent(speed: float, bearing: float) -> np.ndarray:
    """Velocity of magnitude `speed` rotated +90 degrees from `bearing`."""
    return speed * np.array([math.cos(bearing + QUARTER_TURN), math.sin(bearing + QUARTER_TURN)])


def assign_parent(child: Body, anchor: Body, G: float = constants.G) -> None:
    """Put `child` on a circular orbit around a dominant `anchor`.

    The child keeps up with the anchor's own motion and adds the circular
    speed sqrt(G*M/r) perpendicular to the child->anchor line. The child's
    own pull on the anchor is ignored.
    """
    r = distance(child, anchor)
    if r == 0.0:
        logger.warning("assign_parent: child coincides with anchor at (%g, %g); "
                       "copying anchor velocity", anchor.x, anchor.y)
        child.vel = anchor.vel.copy()
        return

    speed = math.sqrt(G * anchor.mass / r)
    child.vel = anchor.vel + _tangent(speed, angle(child, anchor))


def assign_binary(a: Body, b: Body, G: float = constants.G) -> None:
    """Seed a mutual circular orbit of two bodies about their barycenter.

    Each body gets sqrt(G * m_other**2 / (r * (m_a + m_b))), turned +90 degrees
    from its bearing toward the other, so the momenta cancel.
    """
    r = distance(a, b)
    if r == 0.0:
        logger.warning("assign_binary: bodies coincide at (%g, %g); velocities unchanged",
                       a.x, a.y)
        return

    total = a.mass + b.mass
    speed_a = math.sqrt(G * b.mass ** 2 / (r * total))
    speed_b = math.sqrt(G * a.mass ** 2 / (r * total))
    a.vel = _tangent(speed_a, angle(a, b))
    b.vel = _tangent(speed_b, angle(b, a))
