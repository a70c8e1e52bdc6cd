"""
2D N-body Gravity Sandbox
=========================

A star with rings of planets on circular orbits, integrated one step per
frame under mutual Newtonian gravity.

Controls:
    - SPACE: Start the simulation
    - ESC: Quit
"""
import logging

import hsluv
import pygame
import pygame.gfxdraw

import config
from bodies import planet, star
from logging_config import setup_logging
from orbits import assign_parent
from simulation import Simulation

logger = logging.getLogger(__name__)


def ring_color(hue: float, ring: int, rings: int) -> tuple:
    """Colour for one ring of planets, brightening outward."""
    lightness = 30.0 + 40.0 * ring / max(rings - 1, 1)
    rgb = hsluv.hsluv_to_rgb([hue, 100.0, lightness])
    return tuple(min(255, max(0, int(round(x * 255)))) for x in rgb)


def galaxy_scene(width: float, height: float):
    """A main-sequence star with a line of planets either side of it."""
    scene = config.SCENE
    center = star(width / 2, height / 2, kind=scene["star_type"])
    bodies = [center]
    spacing = width * scene["ring_spacing_fraction"]
    for i in range(scene["rings"]):
        offset = spacing * i + scene["inner_radius"]
        left = planet(center.x - offset, center.y, color=ring_color(12.0, i, scene["rings"]))
        right = planet(center.x + offset, center.y, color=ring_color(250.0, i, scene["rings"]))
        for body in (left, right):
            assign_parent(body, center)
            bodies.append(body)
    return bodies


class Renderer:
    """Draws bodies on the pygame surface with physics y pointing up."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.height = screen.get_height()

    def __call__(self, position, radius, color):
        x = int(position[0])
        y = int(self.height - position[1])
        r = max(int(radius), 1)
        # Skip bodies far off-screen; gfxdraw takes 16-bit coordinates
        if not (-r <= x <= self.screen.get_width() + r and -r <= y <= self.height + r):
            return
        pygame.gfxdraw.filled_circle(self.screen, x, y, r, color)
        pygame.gfxdraw.aacircle(self.screen, x, y, r, color)


def main():
    setup_logging(config.LOGGING["level"], config.LOGGING["log_dir"])

    pygame.init()
    window_size = (config.WINDOW["width"], config.WINDOW["height"])
    screen = pygame.display.set_mode(window_size)
    pygame.display.set_caption(config.WINDOW["title"])
    clock = pygame.time.Clock()
    render = Renderer(screen)

    sim = Simulation(**config.SIMULATION)
    sim.extend(galaxy_scene(*window_size))
    logger.info("Scene ready with %d bodies, press SPACE to start", len(sim.bodies))

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        sim.start()

            screen.fill(config.COLORS["background"])
            if not sim.step(render):
                # Not started yet: show where everything sits
                for body in sim.bodies:
                    render((body.x, body.y), body.radius, body.color)

            pygame.display.flip()
            clock.tick(config.WINDOW["fps"])
    finally:
        sim.close()
        pygame.quit()
        logger.info("Shutdown complete after %d ticks", sim.tick)


if __name__ == "__main__":
    main()
